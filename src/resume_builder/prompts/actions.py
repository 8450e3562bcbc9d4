"""Prompt table for the AI text improvement actions.

Each action maps to one static system prompt and a user prompt template.
Selection is a pure lookup: identical inputs always produce identical prompts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from resume_builder.errors import InvalidActionError
from resume_builder.models.improvement import Action, PromptPair, Tone

DEFAULT_CONTENT_TYPE = "general"

TONE_DESCRIPTIONS: dict[str, str] = {
    Tone.PROFESSIONAL.value: "formal, corporate, and polished",
    Tone.CASUAL.value: "approachable but still professional",
    Tone.TECHNICAL.value: "technical, detailed, and precise",
    Tone.EXECUTIVE.value: "senior-level, strategic, and leadership-focused",
    Tone.CREATIVE.value: "dynamic, innovative, and engaging",
}


@dataclass(frozen=True)
class PromptContext:
    text: str
    content_type: str
    tone: str


@dataclass(frozen=True)
class ActionPrompt:
    system: str
    user: Callable[[PromptContext], str]


IMPROVE_SYSTEM = """\
You are an expert resume writer and career coach. Your job is to improve resume content to be:
- Action-oriented with strong verbs
- Achievement-focused with quantifiable results
- Concise and impactful
- ATS-friendly (no fancy formatting)
- Professional and compelling

Return ONLY the improved text, nothing else. No explanations, no markdown, no quotes."""

TONE_SYSTEM = """\
You are an expert resume writer. Rewrite the given text to match the specified tone \
while keeping the same core meaning and achievements. Return ONLY the rewritten text."""

BULLETIZE_SYSTEM = """\
You are an expert resume writer. Convert the given paragraph into 3-5 powerful bullet points. Each bullet should:
- Start with a strong action verb
- Be concise (under 20 words)
- Highlight achievements and impact
- Include metrics when possible

Return ONLY the bullet points, one per line, starting with "•". No additional text."""

QUANTIFY_SYSTEM = """\
You are an expert resume writer. Analyze this text and suggest specific metrics or numbers \
that could be added to make it more impactful.

Return your response in this exact format:
SUGGESTIONS:
- [First suggestion with specific metric]
- [Second suggestion]
- [Third suggestion]

IMPROVED VERSION:
[The text with placeholder metrics like [X%], [Y clients], [Z projects] where numbers should go]"""

GRAMMAR_SYSTEM = """\
You are a professional editor. Fix any grammar, spelling, or punctuation errors in the text. \
Keep the tone and style the same. Return ONLY the corrected text."""

SUGGESTIONS_SYSTEM = """\
You are an experienced career coach reviewing resume content. Give 3-5 specific, actionable \
suggestions for strengthening the text (clarity, impact, relevance, missing details).

Return ONLY the suggestions, one per line, starting with "-". No introduction or closing remarks."""

SKILLS_SYSTEM = """\
You are an expert technical recruiter. Based on the given experience or role description, \
suggest 8-12 relevant skills (a mix of hard and soft skills) a candidate should list on their resume.

Return ONLY a comma-separated list of skills. No numbering, no explanations."""

CERTIFICATIONS_SYSTEM = """\
You are a career development advisor. Based on the given experience, role, or skills, \
recommend 3-5 widely recognized professional certifications that would strengthen the candidate's resume.

Return ONLY the certifications, one per line, in the format "Certification Name - Issuing Organization"."""

KEYWORDS_SYSTEM = """\
You are an ATS (Applicant Tracking System) optimization expert. Extract or suggest 10-15 \
industry keywords and phrases that recruiters and ATS filters look for in relation to the given text.

Return ONLY a comma-separated list of keywords. No explanations."""

SHORTEN_SYSTEM = """\
You are an expert resume writer. Shorten the given text to roughly half its length while \
keeping the most important achievements, metrics, and keywords. Use strong action verbs.

Return ONLY the shortened text, nothing else."""


def _quoted(ctx: PromptContext) -> str:
    return f'"{ctx.text}"'


ACTION_PROMPTS: dict[Action, ActionPrompt] = {
    Action.IMPROVE: ActionPrompt(
        system=IMPROVE_SYSTEM,
        user=lambda ctx: (
            f"Improve this {ctx.content_type} for a professional resume:\n\n"
            f"{_quoted(ctx)}\n\nImproved version:"
        ),
    ),
    Action.TONE: ActionPrompt(
        system=TONE_SYSTEM,
        user=lambda ctx: (
            f"Rewrite this in a {describe_tone(ctx.tone)} tone:\n\n"
            f"{_quoted(ctx)}\n\nRewritten:"
        ),
    ),
    Action.BULLETIZE: ActionPrompt(
        system=BULLETIZE_SYSTEM,
        user=lambda ctx: f"Convert this into resume bullet points:\n\n{_quoted(ctx)}",
    ),
    Action.QUANTIFY: ActionPrompt(
        system=QUANTIFY_SYSTEM,
        user=lambda ctx: f"Suggest quantifiable metrics for this:\n\n{_quoted(ctx)}",
    ),
    Action.GRAMMAR: ActionPrompt(
        system=GRAMMAR_SYSTEM,
        user=lambda ctx: f"Fix any errors in this text:\n\n{_quoted(ctx)}",
    ),
    Action.SUGGESTIONS: ActionPrompt(
        system=SUGGESTIONS_SYSTEM,
        user=lambda ctx: f"Suggest improvements for this resume content:\n\n{_quoted(ctx)}",
    ),
    Action.SKILLS: ActionPrompt(
        system=SKILLS_SYSTEM,
        user=lambda ctx: f"Suggest relevant resume skills for this:\n\n{_quoted(ctx)}",
    ),
    Action.CERTIFICATIONS: ActionPrompt(
        system=CERTIFICATIONS_SYSTEM,
        user=lambda ctx: f"Recommend certifications relevant to this:\n\n{_quoted(ctx)}",
    ),
    Action.KEYWORDS: ActionPrompt(
        system=KEYWORDS_SYSTEM,
        user=lambda ctx: f"List ATS keywords relevant to this:\n\n{_quoted(ctx)}",
    ),
    Action.SHORTEN: ActionPrompt(
        system=SHORTEN_SYSTEM,
        user=lambda ctx: f"Shorten this text:\n\n{_quoted(ctx)}\n\nShortened version:",
    ),
}


def supported_actions() -> list[str]:
    """Return the action tags in table order."""
    return [action.value for action in ACTION_PROMPTS]


def describe_tone(tone: str | None) -> str:
    """Map a tone name to its description, defaulting to professional."""
    return TONE_DESCRIPTIONS.get(tone or "", TONE_DESCRIPTIONS[Tone.PROFESSIONAL.value])


def parse_action(action: str | Action | None) -> Action:
    """Resolve an action tag, raising InvalidActionError when unknown."""
    try:
        return Action(action)
    except ValueError:
        raise InvalidActionError(action) from None


def select_prompts(
    action: str | Action,
    text: str,
    content_type: str | None = None,
    tone: str | None = None,
) -> PromptPair:
    """Build the system/user prompt pair for an action.

    Raises:
        InvalidActionError: if ``action`` is not a supported tag.
    """
    entry = ACTION_PROMPTS[parse_action(action)]
    ctx = PromptContext(
        text=text,
        content_type=content_type or DEFAULT_CONTENT_TYPE,
        tone=tone or Tone.PROFESSIONAL.value,
    )
    return PromptPair(system_prompt=entry.system, user_prompt=entry.user(ctx))
