"""Pydantic models for AI text improvement requests and results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Action(str, Enum):
    IMPROVE = "improve"
    TONE = "tone"
    BULLETIZE = "bulletize"
    QUANTIFY = "quantify"
    GRAMMAR = "grammar"
    SUGGESTIONS = "suggestions"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    KEYWORDS = "keywords"
    SHORTEN = "shorten"


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    TECHNICAL = "technical"
    EXECUTIVE = "executive"
    CREATIVE = "creative"


class ImprovementRequest(BaseModel):
    """Body of POST /api/ai/improve.

    Missing or null text and unknown actions are rejected by the pipeline,
    not by the schema.
    """

    text: str | None = ""
    action: str = ""
    type: str | None = None
    tone: str | None = None


class PromptPair(BaseModel):
    """System and user prompt sent to the provider for one request."""

    model_config = ConfigDict(frozen=True)

    system_prompt: str
    user_prompt: str


class ImprovementResult(BaseModel):
    original: str
    improved: str  # never empty; falls back to original
    action: str
    type: str | None = None


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class ProfileRequest(BaseModel):
    """Body of POST /api/ai/generate."""

    profile: str | None = ""


class ContentRequest(BaseModel):
    """Body of POST /api/ai/polish."""

    content: str | None = ""


class JobMatchRequest(BaseModel):
    """Body of the resume-vs-job endpoints (tailor, cover letter, ATS score)."""

    resume: str | None = ""
    job_description: str | None = ""


class GeneratedContent(BaseModel):
    content: str


class ATSScore(BaseModel):
    score: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)
