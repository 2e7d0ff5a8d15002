# src/jsonbind/deserializer.py
"""
Deserialize JSON objects and arrays into instances of a target class.

Three strategies share the same shape:

- ``deserialize`` / ``deserialize_array``: copy fields with no checking.
- ``deserialize_with_validation`` / ``deserialize_array_with_validation``:
  run a ``Validator`` first and stop at its first complaint.
- ``deserialize_with_schema`` / ``deserialize_array_with_schema``: run a
  ``SchemaValidator`` and report every violation at once.
  ``deserialize_with_schema_safe`` returns the outcome instead of raising.

Usage:
    from jsonbind import deserialize_with_schema
    from jsonbind.models import SentimentObject, SENTIMENT_OBJECT_SCHEMA

    obj = deserialize_with_schema(
        '{"sentiment": "positive", "urgency": "high"}',
        SentimentObject,
        SENTIMENT_OBJECT_SCHEMA,
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Type, TypeVar

from .errors import ParseError
from .instantiate import instantiate
from .parser import parse_json, require_sequence
from .types import SafeParseFailure, SafeParseResult, SafeParseSuccess
from .validators import SchemaValidator, Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


def deserialize(json_object: Any, class_type: Type[T]) -> T:
    """
    Deserialize a JSON object into an instance of *class_type*.

    Args:
        json_object: A mapping or JSON text encoding one
        class_type: The class to instantiate

    Returns:
        An instance whose attributes are exactly the object's fields. A
        value that is not an object carries no fields and yields a bare
        instance.

    Raises:
        ParseError: If text input is not well-formed JSON
    """
    obj = parse_json(json_object)
    if not isinstance(obj, Mapping):
        obj = {}

    logger.debug("Deserializing %s without validation", class_type.__name__)
    return instantiate(obj, class_type)


def deserialize_array(json_array: Any, class_type: Type[T]) -> List[T]:
    """Deserialize a JSON array of objects into instances of *class_type*."""
    items = require_sequence(parse_json(json_array))
    logger.debug("Deserializing %d %s item(s) without validation", len(items), class_type.__name__)
    return [deserialize(item, class_type) for item in items]


def deserialize_with_validation(
    json_object: Any,
    class_type: Type[T],
    validator: Validator,
) -> T:
    """
    Deserialize a JSON object after checking it with *validator*.

    Raises:
        ParseError: If text input is not well-formed JSON
        ValidationError: On the first rule the object breaks
    """
    obj = parse_json(json_object)
    validated = validator.validate(obj)
    return instantiate(validated, class_type)


def deserialize_array_with_validation(
    json_array: Any,
    class_type: Type[T],
    validator: Validator,
) -> List[T]:
    """Validate and deserialize each element; the first failure propagates."""
    items = require_sequence(parse_json(json_array))
    logger.debug(
        "Deserializing %d %s item(s) with %s",
        len(items), class_type.__name__, type(validator).__name__,
    )
    return [deserialize_with_validation(item, class_type, validator) for item in items]


def deserialize_with_schema(
    json_object: Any,
    class_type: Type[T],
    schema: SchemaValidator,
) -> T:
    """
    Deserialize a JSON object after validating it against *schema*.

    Fields the schema does not declare are dropped.

    Raises:
        ParseError: If text input is not well-formed JSON
        AggregateValidationError: With every violation found
    """
    obj = parse_json(json_object)
    validated = schema.parse(obj)
    return instantiate(validated, class_type)


def deserialize_array_with_schema(
    json_array: Any,
    class_type: Type[T],
    schema: SchemaValidator,
) -> List[T]:
    """Schema-validate and deserialize each element; the first failure propagates."""
    items = require_sequence(parse_json(json_array))
    logger.debug(
        "Deserializing %d %s item(s) with schema %s",
        len(items), class_type.__name__, schema.name,
    )
    return [deserialize_with_schema(item, class_type, schema) for item in items]


def deserialize_with_schema_safe(
    json_object: Any,
    class_type: Type[T],
    schema: SchemaValidator,
) -> SafeParseResult[T]:
    """
    Non-throwing version of ``deserialize_with_schema``.

    Returns:
        ``SafeParseSuccess`` with the instance, or ``SafeParseFailure`` with
        the aggregate error

    Raises:
        ParseError: If text input is not well-formed JSON. Malformed text is
            never reported as a failure outcome.
    """
    try:
        obj = parse_json(json_object)
    except ParseError as e:
        raise ParseError(
            f"Failed to parse JSON: {e}",
            raw_input=e.raw_input,
            parse_position=e.parse_position,
        ) from e

    result = schema.safe_parse(obj)
    if isinstance(result, SafeParseFailure):
        logger.warning(
            "Schema %s rejected input: %s", schema.name, result.error,
        )
        return result

    return SafeParseSuccess(instantiate(result.data, class_type))
