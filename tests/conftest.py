"""
Pytest configuration and fixtures for jsonbind tests.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src directory to path for imports
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture
def valid_payload():
    """A payload every strategy accepts."""
    return {"sentiment": "positive", "urgency": "high"}


@pytest.fixture
def valid_payloads():
    return [
        {"sentiment": "positive", "urgency": "high"},
        {"sentiment": "neutral", "urgency": "medium"},
        {"sentiment": "negative", "urgency": "low"},
    ]


@pytest.fixture
def azure_env():
    """Complete Azure environment mapping."""
    return {
        "AZURE_API_KEY": "test-key",
        "AZURE_DEPLOYMENT": "gpt-4o-mini",
        "AZURE_API_BASE": "my-resource",
    }


class FakeCompletions:
    """Records ``create`` calls and replies with canned content."""

    def __init__(self, content):
        self.content = content
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_client():
    """Factory for OpenAI-shaped clients returning fixed content."""

    def _make(content):
        completions = FakeCompletions(content)
        return SimpleNamespace(chat=SimpleNamespace(completions=completions))

    return _make
