"""Tests for errors.py and the violation types."""

from jsonbind.errors import (
    AggregateValidationError,
    DeserializationError,
    InputShapeError,
    ParseError,
    ValidationError,
)
from jsonbind.types import Violation, ViolationKind


def _violation(field, message, kind=ViolationKind.INVALID_VALUE):
    return Violation(kind, (field,), message)


class TestHierarchy:

    def test_all_subclass_base(self):
        for cls in (ParseError, InputShapeError, ValidationError, AggregateValidationError):
            assert issubclass(cls, DeserializationError)

    def test_base_format_for_retry(self):
        err = DeserializationError("boom", raw_input="x")
        assert err.raw_input == "x"
        assert err.format_for_retry() == "Error: boom\nPlease correct your response."


class TestParseError:

    def test_attributes(self):
        err = ParseError("Expecting value", raw_input="{", parse_position=1)
        assert err.parse_position == 1
        assert "Failed to parse JSON: Expecting value" in err.format_for_retry()


class TestViolation:

    def test_str_with_path(self):
        v = _violation("sentiment", "sentiment must be one of: positive, negative, neutral")
        assert str(v) == "sentiment: sentiment must be one of: positive, negative, neutral"

    def test_str_without_path(self):
        v = Violation(ViolationKind.INVALID_TYPE, (), "Input must be an object")
        assert str(v) == "Input must be an object"

    def test_dotted_path(self):
        v = Violation(ViolationKind.MISSING, ("items", 0, "urgency"), "Field required")
        assert v.dotted_path == "items.0.urgency"

    def test_kind_values(self):
        assert {k.value for k in ViolationKind} == {"missing", "invalid_type", "invalid_value"}


class TestAggregateValidationError:

    def test_message_joins_violations(self):
        err = AggregateValidationError(
            [_violation("sentiment", "bad sentiment"), _violation("urgency", "bad urgency")],
            schema_name="SentimentObjectSchema",
        )
        assert str(err) == "sentiment: bad sentiment; urgency: bad urgency"
        assert err.paths == ["sentiment", "urgency"]

    def test_format_for_retry_lists_each_violation(self):
        err = AggregateValidationError(
            [_violation("urgency", "urgency must be one of: high, medium, low")],
            schema_name="SentimentObjectSchema",
        )
        text = err.format_for_retry()
        assert "'SentimentObjectSchema'" in text
        assert "  - urgency: urgency must be one of: high, medium, low" in text

    def test_empty_violations(self):
        assert str(AggregateValidationError([])) == "Validation failed"
