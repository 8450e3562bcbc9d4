"""Data models for the text improvement service."""

from resume_builder.models.improvement import (
    ATSScore,
    Action,
    ContentRequest,
    ErrorResponse,
    GeneratedContent,
    ImprovementRequest,
    ImprovementResult,
    JobMatchRequest,
    ProfileRequest,
    PromptPair,
    Tone,
)

__all__ = [
    "ATSScore",
    "Action",
    "ContentRequest",
    "ErrorResponse",
    "GeneratedContent",
    "ImprovementRequest",
    "ImprovementResult",
    "JobMatchRequest",
    "ProfileRequest",
    "PromptPair",
    "Tone",
]
