# src/jsonbind/analyzer.py
"""
Sentiment analysis of review text through an OpenAI chat model.

The model is asked for a JSON object; its reply is handed to
``deserialize_with_schema`` so callers always get a validated
``SentimentObject`` or an exception.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import openai

from .config import AzureSettings
from .deserializer import deserialize_with_schema
from .models import SENTIMENT_OBJECT_SCHEMA, SentimentObject
from .parser import extract_json
from .validators import SchemaValidator

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You analyze customer review text. Respond with a JSON object only, "
    'with exactly two keys: "sentiment" (one of "positive", "negative", '
    '"neutral") and "urgency" (one of "low", "medium", "high").'
)


class SentimentAnalyzer:
    """Classifies review text into a ``SentimentObject``.

    *client* is any object exposing ``chat.completions.create`` in the
    OpenAI SDK shape. When omitted, an ``openai.AzureOpenAI`` client is
    built from *settings* (or from the environment).
    """

    def __init__(
        self,
        client: Any = None,
        *,
        model: Optional[str] = None,
        settings: Optional[AzureSettings] = None,
        schema: SchemaValidator = SENTIMENT_OBJECT_SCHEMA,
        temperature: float = 0.0,
    ):
        if client is None or model is None:
            settings = settings or AzureSettings.from_env()
        if client is None:
            client = openai.AzureOpenAI(
                api_key=settings.api_key,
                api_version=settings.api_version,
                azure_endpoint=settings.endpoint,
            )
        self._client = client
        self.model = model or settings.deployment
        self.schema = schema
        self.temperature = temperature

    def _messages(self, review_text: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": review_text},
        ]

    def analyze(self, review_text: str) -> SentimentObject:
        """
        Classify *review_text*.

        Raises:
            ParseError: If the reply holds no JSON
            AggregateValidationError: If the JSON does not fit the schema
        """
        response = self._client.chat.completions.create(
            model=self.model,
            messages=self._messages(review_text),
            response_format={"type": "json_object"},
            temperature=self.temperature,
        )
        content = response.choices[0].message.content or ""
        logger.debug("Model %s replied: %s", self.model, content)

        return deserialize_with_schema(extract_json(content), SentimentObject, self.schema)
