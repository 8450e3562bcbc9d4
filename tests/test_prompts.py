"""Tests for the action prompt table."""

from __future__ import annotations

import pytest

from resume_builder.errors import InvalidActionError
from resume_builder.models.improvement import Action, PromptPair
from resume_builder.prompts.actions import (
    ACTION_PROMPTS,
    TONE_DESCRIPTIONS,
    describe_tone,
    parse_action,
    select_prompts,
    supported_actions,
)

SAMPLE_TEXT = "Managed a team of 5 engineers building internal tools"


class TestSupportedActions:
    def test_table_covers_every_action(self):
        assert set(ACTION_PROMPTS) == set(Action)

    def test_supported_actions_lists_all_tags(self):
        assert supported_actions() == [
            "improve",
            "tone",
            "bulletize",
            "quantify",
            "grammar",
            "suggestions",
            "skills",
            "certifications",
            "keywords",
            "shorten",
        ]


class TestSelectPrompts:
    @pytest.mark.parametrize("action", [a.value for a in Action])
    def test_every_action_embeds_text(self, action):
        pair = select_prompts(action, SAMPLE_TEXT, "description", "technical")
        assert isinstance(pair, PromptPair)
        assert pair.system_prompt.strip()
        assert SAMPLE_TEXT in pair.user_prompt

    def test_text_is_quoted(self):
        pair = select_prompts("grammar", SAMPLE_TEXT)
        assert f'"{SAMPLE_TEXT}"' in pair.user_prompt

    def test_accepts_enum_member(self):
        assert select_prompts(Action.SHORTEN, SAMPLE_TEXT) == select_prompts("shorten", SAMPLE_TEXT)

    def test_improve_interpolates_content_type(self):
        pair = select_prompts("improve", SAMPLE_TEXT, content_type="summary")
        assert "Improve this summary for a professional resume" in pair.user_prompt

    def test_improve_defaults_content_type(self):
        pair = select_prompts("improve", SAMPLE_TEXT)
        assert "Improve this general for a professional resume" in pair.user_prompt

    @pytest.mark.parametrize("tone", list(TONE_DESCRIPTIONS))
    def test_tone_uses_description(self, tone):
        pair = select_prompts("tone", SAMPLE_TEXT, tone=tone)
        assert TONE_DESCRIPTIONS[tone] in pair.user_prompt

    def test_unknown_tone_falls_back_to_professional(self):
        pair = select_prompts("tone", SAMPLE_TEXT, tone="sarcastic")
        assert "formal, corporate, and polished" in pair.user_prompt

    def test_missing_tone_falls_back_to_professional(self):
        pair = select_prompts("tone", SAMPLE_TEXT)
        assert TONE_DESCRIPTIONS["professional"] in pair.user_prompt

    def test_unknown_action_raises(self):
        with pytest.raises(InvalidActionError) as exc_info:
            select_prompts("bogus", SAMPLE_TEXT)
        assert exc_info.value.action == "bogus"
        assert isinstance(exc_info.value, ValueError)

    def test_identical_inputs_identical_prompts(self):
        first = select_prompts("tone", SAMPLE_TEXT, "bullet", "executive")
        second = select_prompts("tone", SAMPLE_TEXT, "bullet", "executive")
        assert first == second
        assert first.system_prompt == second.system_prompt
        assert first.user_prompt == second.user_prompt

    def test_prompt_pair_is_frozen(self):
        pair = select_prompts("grammar", SAMPLE_TEXT)
        with pytest.raises(Exception):
            pair.user_prompt = "changed"  # type: ignore[misc]


class TestHelpers:
    def test_describe_tone_known(self):
        assert describe_tone("executive") == "senior-level, strategic, and leadership-focused"

    @pytest.mark.parametrize("tone", [None, "", "PROFESSIONAL", "unknown"])
    def test_describe_tone_default(self, tone):
        assert describe_tone(tone) == "formal, corporate, and polished"

    def test_parse_action(self):
        assert parse_action("keywords") is Action.KEYWORDS

    @pytest.mark.parametrize("action", ["", None, "Improve", "bulletise"])
    def test_parse_action_rejects(self, action):
        with pytest.raises(InvalidActionError):
            parse_action(action)
