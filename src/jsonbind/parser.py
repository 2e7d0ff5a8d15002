# src/jsonbind/parser.py
"""
JSON parsing utilities for jsonbind.
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterator, List

from .errors import InputShapeError, ParseError
from .types import StructuralValue

ARRAY_REQUIRED = "Input must be an array"
OBJECT_REQUIRED = "Input must be an object"


def parse_json(value: Any) -> StructuralValue:
    """
    Normalize JSON text or an already-parsed value into a structural value.

    Args:
        value: JSON text (str/bytes) or a decoded mapping/list/scalar

    Returns:
        The decoded value; non-text input is returned unchanged

    Raises:
        ParseError: If text input is not well-formed JSON
    """
    if not isinstance(value, (str, bytes, bytearray)):
        return value

    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ParseError(
            str(e),
            raw_input=value,
            parse_position=e.pos,
        ) from e


def require_sequence(value: Any) -> List[Any]:
    """Return *value* as a list, or raise if it is not a JSON array."""
    if not isinstance(value, (list, tuple)):
        raise InputShapeError(ARRAY_REQUIRED, raw_input=value)
    return list(value)


_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.IGNORECASE | re.DOTALL)


def _candidates(text: str) -> Iterator[str]:
    """Likely JSON spans in *text*, most specific first."""
    for block in _FENCE.findall(text):
        yield block.strip()
    for opener, closer in (("{", "}"), ("[", "]")):
        start, end = text.find(opener), text.rfind(closer)
        if start != -1 and end > start:
            yield text[start:end + 1]
    yield text.strip()


def extract_json(text: str) -> str:
    """
    Extract JSON from model output that may contain markdown or prose.

    Tries fenced code blocks, then the widest ``{...}`` or ``[...]`` span,
    then the whole text, and returns the first one that decodes.

    Raises:
        ParseError: If no candidate is well-formed JSON
    """
    last_error = None
    for candidate in _candidates(text):
        try:
            json.loads(candidate)
        except json.JSONDecodeError as e:
            last_error = e
            continue
        return candidate

    raise ParseError(
        "Could not extract valid JSON from response",
        raw_input=text[:500],
        parse_position=last_error.pos if last_error else None,
    ) from last_error
