"""Prompt templates for the AI text improvement actions."""

from resume_builder.prompts.actions import (
    ACTION_PROMPTS,
    TONE_DESCRIPTIONS,
    describe_tone,
    parse_action,
    select_prompts,
    supported_actions,
)

__all__ = [
    "ACTION_PROMPTS",
    "TONE_DESCRIPTIONS",
    "describe_tone",
    "parse_action",
    "select_prompts",
    "supported_actions",
]
