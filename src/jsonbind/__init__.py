# src/jsonbind/__init__.py
"""
jsonbind

Turn untyped JSON from a model (or anywhere else) into instances of your
own classes, with as much checking as you want.

Strategies:
- Unchecked: copy fields straight onto the instance
- Validator: hand-written rules, first failure raises
- Schema: pydantic model, all failures reported together

Basic Usage:
    from jsonbind import deserialize
    from jsonbind.models import SentimentObject

    obj = deserialize('{"sentiment": "positive", "urgency": "high"}', SentimentObject)

Validated Usage:
    from jsonbind import deserialize_with_schema_safe
    from jsonbind.models import SentimentObject, SENTIMENT_OBJECT_SCHEMA

    result = deserialize_with_schema_safe(payload, SentimentObject, SENTIMENT_OBJECT_SCHEMA)
    if result.success:
        print(result.data)
    else:
        for violation in result.violations:
            print(violation)
"""

__version__ = "0.1.0"

from .types import (
    ViolationKind,
    Violation,
    SafeParseSuccess,
    SafeParseFailure,
    SafeParseResult,
)
from .errors import (
    DeserializationError,
    ParseError,
    InputShapeError,
    ValidationError,
    AggregateValidationError,
    ConfigurationError,
)
from .parser import parse_json, extract_json
from .instantiate import instantiate
from .validators import (
    Validator,
    FieldRuleValidator,
    SentimentObjectValidator,
    SchemaValidator,
)
from .deserializer import (
    deserialize,
    deserialize_array,
    deserialize_with_validation,
    deserialize_array_with_validation,
    deserialize_with_schema,
    deserialize_array_with_schema,
    deserialize_with_schema_safe,
)

__all__ = [
    # Deserialization
    "deserialize",
    "deserialize_array",
    "deserialize_with_validation",
    "deserialize_array_with_validation",
    "deserialize_with_schema",
    "deserialize_array_with_schema",
    "deserialize_with_schema_safe",
    # Validators
    "Validator",
    "FieldRuleValidator",
    "SentimentObjectValidator",
    "SchemaValidator",
    # Types
    "ViolationKind",
    "Violation",
    "SafeParseSuccess",
    "SafeParseFailure",
    "SafeParseResult",
    # Errors
    "DeserializationError",
    "ParseError",
    "InputShapeError",
    "ValidationError",
    "AggregateValidationError",
    "ConfigurationError",
    # Utilities
    "parse_json",
    "extract_json",
    "instantiate",
]
