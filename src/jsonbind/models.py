# src/jsonbind/models.py
"""
The sentiment record produced by review analysis, with its validators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from .validators import SchemaValidator, SentimentObjectValidator

Sentiment = Literal["positive", "negative", "neutral"]
Urgency = Literal["high", "medium", "low"]


@dataclass
class SentimentObject:
    """Sentiment and urgency of a customer message."""

    sentiment: Sentiment
    urgency: Urgency


class SentimentObjectSchema(BaseModel):
    """Schema for validating ``SentimentObject`` payloads."""

    sentiment: Sentiment
    urgency: Urgency


SENTIMENT_OBJECT_SCHEMA = SchemaValidator(SentimentObjectSchema)
SENTIMENT_OBJECT_VALIDATOR = SentimentObjectValidator()
