"""
Schema Examples: Validated Deserialization

This demonstrates:
1. A valid object
2. An out-of-domain value
3. A missing field
4. The non-throwing form
5. An array of objects
6. The hand-written validator, which stops at the first problem
"""

import os
import sys
import logging

# Add src directory to path
_src_dir = os.path.join(os.path.dirname(__file__), '../src')
sys.path.insert(0, _src_dir)

from jsonbind import (
    AggregateValidationError,
    ValidationError,
    deserialize_array_with_schema,
    deserialize_with_schema,
    deserialize_with_schema_safe,
    deserialize_with_validation,
)
from jsonbind.models import SENTIMENT_OBJECT_SCHEMA, SENTIMENT_OBJECT_VALIDATOR, SentimentObject

logging.basicConfig(level=logging.INFO)


def main():
    print("=== Schema Validation Examples ===\n")

    print("Example 1: Valid object")
    obj = deserialize_with_schema(
        {"sentiment": "positive", "urgency": "high"}, SentimentObject, SENTIMENT_OBJECT_SCHEMA
    )
    print("  Success:", obj)

    print("\nExample 2: Invalid sentiment value")
    try:
        deserialize_with_schema(
            {"sentiment": "happy", "urgency": "high"}, SentimentObject, SENTIMENT_OBJECT_SCHEMA
        )
    except AggregateValidationError as e:
        print("  Validation failed (as expected):", e.violations[0])

    print("\nExample 3: Missing urgency property")
    try:
        deserialize_with_schema({"sentiment": "positive"}, SentimentObject, SENTIMENT_OBJECT_SCHEMA)
    except AggregateValidationError as e:
        print("  Validation failed (as expected):", e.violations[0])

    print("\nExample 4: Safe parse with invalid data")
    result = deserialize_with_schema_safe(
        {"sentiment": "bad", "urgency": "urgent"}, SentimentObject, SENTIMENT_OBJECT_SCHEMA
    )
    if result.success:
        print("  Success:", result.data)
    else:
        print("  Validation failed (as expected):")
        for violation in result.violations:
            print(f"  - {violation}")

    print("\nExample 5: Deserialize array")
    objects = deserialize_array_with_schema(
        [
            {"sentiment": "positive", "urgency": "high"},
            {"sentiment": "neutral", "urgency": "medium"},
            {"sentiment": "negative", "urgency": "low"},
        ],
        SentimentObject,
        SENTIMENT_OBJECT_SCHEMA,
    )
    print("  Success: deserialized", len(objects), "objects")
    for i, item in enumerate(objects):
        print(f"  [{i}]:", item)

    print("\nExample 6: Hand-written validator")
    try:
        deserialize_with_validation(
            {"sentiment": "bad", "urgency": "urgent"}, SentimentObject, SENTIMENT_OBJECT_VALIDATOR
        )
    except ValidationError as e:
        print("  Validation failed (as expected):", e)


if __name__ == "__main__":
    main()
