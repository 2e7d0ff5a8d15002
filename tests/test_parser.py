"""Tests for parser.py: JSON normalization, sequence checks, extraction."""

import json

import pytest

from jsonbind.errors import InputShapeError, ParseError
from jsonbind.parser import extract_json, parse_json, require_sequence


# ═══════════════════════════════════════════════════════════════════════════════
# parse_json
# ═══════════════════════════════════════════════════════════════════════════════

class TestParseJson:

    def test_text_object(self):
        assert parse_json('{"a": 1}') == {"a": 1}

    def test_text_array(self):
        assert parse_json("[1, 2]") == [1, 2]

    def test_bytes(self):
        assert parse_json(b'{"a": true}') == {"a": True}

    def test_mapping_passes_through_unchanged(self):
        data = {"a": 1}
        assert parse_json(data) is data

    def test_scalars_pass_through(self):
        assert parse_json(None) is None
        assert parse_json(42) == 42

    def test_malformed_text_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            parse_json("{invalid json}")
        err = exc_info.value
        assert isinstance(err.__cause__, json.JSONDecodeError)
        assert err.parse_position == 1
        assert err.raw_input == "{invalid json}"

    def test_empty_text_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_json("")


# ═══════════════════════════════════════════════════════════════════════════════
# require_sequence
# ═══════════════════════════════════════════════════════════════════════════════

class TestRequireSequence:

    def test_list(self):
        assert require_sequence([1]) == [1]

    def test_tuple_becomes_list(self):
        assert require_sequence((1, 2)) == [1, 2]

    @pytest.mark.parametrize("value", [{"a": 1}, "text", 3, None])
    def test_non_sequence(self, value):
        with pytest.raises(InputShapeError, match="Input must be an array"):
            require_sequence(value)


# ═══════════════════════════════════════════════════════════════════════════════
# extract_json
# ═══════════════════════════════════════════════════════════════════════════════

class TestExtractJson:

    def test_plain_json(self):
        assert json.loads(extract_json('{"sentiment": "neutral"}')) == {"sentiment": "neutral"}

    def test_code_block(self):
        text = 'Here you go:\n```json\n{"urgency": "low"}\n```'
        assert json.loads(extract_json(text)) == {"urgency": "low"}

    def test_invalid_block_then_valid_block(self):
        text = '```json\n{invalid}\n```\n```json\n{"valid": true}\n```'
        assert json.loads(extract_json(text)) == {"valid": True}

    def test_object_among_text(self):
        text = 'Result is {"answer": 42} and that is final.'
        assert json.loads(extract_json(text))["answer"] == 42

    def test_array_among_text(self):
        assert json.loads(extract_json("Results: [1, 2, 3] done.")) == [1, 2, 3]

    def test_broken_fence_falls_back_to_span(self):
        text = '```json\nnot json\n```\nActually: {"urgency": "high"}'
        assert json.loads(extract_json(text)) == {"urgency": "high"}

    def test_error_chains_decode_error(self):
        with pytest.raises(ParseError) as exc_info:
            extract_json("The result is {bad json} here.")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_no_json(self):
        with pytest.raises(ParseError, match="Could not extract valid JSON"):
            extract_json("no json here")
