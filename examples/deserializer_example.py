"""
Deserializer Examples: Unchecked Deserialization

This demonstrates:
1. Deserializing a single JSON object
2. Deserializing from a JSON string
3. Deserializing an array of objects
"""

import os
import sys
import logging

# Add src directory to path
_src_dir = os.path.join(os.path.dirname(__file__), '../src')
sys.path.insert(0, _src_dir)

from jsonbind import deserialize, deserialize_array
from jsonbind.models import SentimentObject

logging.basicConfig(level=logging.INFO)


def main():
    # Example 1: Single JSON object
    json_data = {"sentiment": "positive", "urgency": "high"}
    instance = deserialize(json_data, SentimentObject)
    print("Single object:", instance)
    print("Is instance of SentimentObject?", isinstance(instance, SentimentObject))

    # Example 2: JSON string
    from_string = deserialize('{"sentiment": "negative", "urgency": "low"}', SentimentObject)
    print("From string:", from_string)

    # Example 3: Array of objects
    json_array = [
        {"sentiment": "positive", "urgency": "high"},
        {"sentiment": "neutral", "urgency": "medium"},
        {"sentiment": "negative", "urgency": "low"},
    ]
    instances = deserialize_array(json_array, SentimentObject)
    print("Array of objects:", instances)
    print("First item is instance?", isinstance(instances[0], SentimentObject))


if __name__ == "__main__":
    main()
