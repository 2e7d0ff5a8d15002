# src/jsonbind/types.py
"""
Type definitions for jsonbind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Literal, Tuple, TypeVar, Union

if TYPE_CHECKING:
    from .errors import AggregateValidationError

T = TypeVar("T")

# A parsed JSON value before it is bound to a target type
StructuralValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class ViolationKind(str, Enum):
    """What went wrong with a single field."""

    MISSING = "missing"
    """A required field is absent."""

    INVALID_TYPE = "invalid_type"
    """The value has the wrong primitive type."""

    INVALID_VALUE = "invalid_value"
    """The value is outside the field's allowed domain."""


@dataclass(frozen=True)
class Violation:
    """A single mismatch between input and a field's declared rules."""

    kind: ViolationKind
    path: Tuple[Union[str, int], ...]
    message: str

    @property
    def dotted_path(self) -> str:
        return ".".join(str(p) for p in self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.dotted_path}: {self.message}"
        return self.message


@dataclass(frozen=True)
class SafeParseSuccess(Generic[T]):
    """Successful outcome of a non-throwing schema call."""

    data: T
    success: Literal[True] = True


@dataclass(frozen=True)
class SafeParseFailure:
    """Failed outcome of a non-throwing schema call."""

    error: "AggregateValidationError"
    success: Literal[False] = False

    @property
    def violations(self) -> List[Violation]:
        return self.error.violations


SafeParseResult = Union[SafeParseSuccess[T], SafeParseFailure]
