"""Tests for JSON object extraction from model answers."""

import pytest

from resume_builder.utils.json_parser import extract_json_object


class TestExtractJsonObject:
    def test_plain_object(self):
        assert extract_json_object('{"score": 75, "suggestions": []}') == {
            "score": 75,
            "suggestions": [],
        }

    def test_fenced_code_block(self):
        text = '```json\n{"score": 64, "suggestions": ["Add Terraform"]}\n```'
        assert extract_json_object(text)["suggestions"] == ["Add Terraform"]

    def test_object_inside_prose(self):
        text = 'Here is my analysis: {"score": 88} Let me know if you need more.'
        assert extract_json_object(text) == {"score": 88}

    def test_top_level_array_is_rejected(self):
        with pytest.raises(ValueError, match="Could not extract JSON object"):
            extract_json_object('["not", "an", "object"]')

    @pytest.mark.parametrize("text", ["", "   ", "no json here", "{broken"])
    def test_unparseable_raises(self, text):
        with pytest.raises(ValueError):
            extract_json_object(text)
