# src/jsonbind/errors.py
"""
Error classes for jsonbind.
"""

from __future__ import annotations

from typing import Any, List

from .types import Violation


class DeserializationError(Exception):
    """
    Base exception for all deserialization errors.

    Attributes:
        message: Error description
        raw_input: The input that failed
    """

    def __init__(self, message: str, *, raw_input: Any = None):
        super().__init__(message)
        self.raw_input = raw_input

    def format_for_retry(self) -> str:
        """Format error message to send back to an LLM for retry."""
        return f"Error: {str(self)}\nPlease correct your response."


class ParseError(DeserializationError):
    """
    Raised when input text is not well-formed JSON.

    The underlying ``json.JSONDecodeError`` is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        raw_input: Any = None,
        parse_position: int | None = None,
    ):
        super().__init__(message, raw_input=raw_input)
        self.parse_position = parse_position

    def format_for_retry(self) -> str:
        return (
            f"Failed to parse JSON: {str(self)}\n"
            "Please respond with valid JSON only, no additional text."
        )


class InputShapeError(DeserializationError):
    """
    Raised when an array entry point receives anything but an array.
    """


class ValidationError(DeserializationError):
    """
    Raised by hand-written validators on the first violation found.

    Example:
        ValidationError(
            "sentiment must be one of: positive, negative, neutral",
            violation=Violation(ViolationKind.INVALID_VALUE, ("sentiment",), ...),
        )
    """

    def __init__(
        self,
        message: str,
        *,
        raw_input: Any = None,
        violation: Violation | None = None,
    ):
        super().__init__(message, raw_input=raw_input)
        self.violation = violation


class AggregateValidationError(DeserializationError):
    """
    Raised by schema validation, carrying every violation found in one pass.

    Attributes:
        violations: All violations, in the order the schema reported them
        schema_name: Name of the schema that rejected the input
    """

    def __init__(
        self,
        violations: List[Violation],
        *,
        schema_name: str | None = None,
        raw_input: Any = None,
    ):
        super().__init__(
            "; ".join(str(v) for v in violations) or "Validation failed",
            raw_input=raw_input,
        )
        self.violations = list(violations)
        self.schema_name = schema_name

    @property
    def paths(self) -> List[str]:
        """Dotted paths of every violation."""
        return [v.dotted_path for v in self.violations]

    def format_for_retry(self) -> str:
        errors = "\n".join(f"  - {v}" for v in self.violations)
        return f"Validation failed for '{self.schema_name}':\n{errors}\nPlease fix and try again."


class ConfigurationError(Exception):
    """Raised when a required environment setting is not defined."""
