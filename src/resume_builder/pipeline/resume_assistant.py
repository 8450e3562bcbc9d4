"""Whole-resume helpers: generate, polish, tailor, cover letter, ATS score.

Each helper makes one provider call. Provider failures are logged and
answered with a fixed fallback instead of an error, so the form can keep
going with what the user already has.
"""

from __future__ import annotations

import logging
import time

from resume_builder.clients.llm_client import LLMClient
from resume_builder.errors import EmptyTextError
from resume_builder.logging.cost_calculator import calculate_cost
from resume_builder.logging.models import UsageLog
from resume_builder.logging.usage_store import UsageStore, record_usage
from resume_builder.models.improvement import ATSScore, PromptPair
from resume_builder.prompts import assistant as prompts
from resume_builder.utils.json_parser import extract_json_object

logger = logging.getLogger(__name__)

GENERATE_MAX_TOKENS = 2000
POLISH_MAX_TOKENS = 2000
TAILOR_MAX_TOKENS = 2000
COVER_LETTER_MAX_TOKENS = 1500
ATS_MAX_TOKENS = 1000

ATS_EMPTY_FALLBACK = ATSScore(
    score=50, suggestions=["Add more relevant keywords from the job description"]
)
ATS_ERROR_FALLBACK = ATSScore(score=50, suggestions=["Unable to analyze - please try again"])


def _require(**fields: str | None) -> None:
    for value in fields.values():
        if not value or not value.strip():
            raise EmptyTextError()


class ResumeAssistant:
    """Generate and adapt full resume documents with one LLM call each."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        usage_store: UsageStore | None = None,
        session_id: str = "anonymous",
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.usage_store = usage_store
        self.session_id = session_id

    async def generate_content(self, profile: str | None) -> str:
        """Draft resume content from free-form profile notes. Empty string on failure."""
        _require(profile=profile)
        text = await self._call("generate", prompts.generate_prompts(profile), GENERATE_MAX_TOKENS)
        return text or ""

    async def polish_content(self, content: str | None) -> str:
        """Improve a whole resume. Returns the input unchanged on failure."""
        _require(content=content)
        text = await self._call("polish", prompts.polish_prompts(content), POLISH_MAX_TOKENS)
        return text or content

    async def tailor_to_job(self, resume: str | None, job_description: str | None) -> str:
        """Rewrite a resume for a job description. Returns the resume unchanged on failure."""
        _require(resume=resume, job_description=job_description)
        text = await self._call(
            "tailor", prompts.tailor_prompts(resume, job_description), TAILOR_MAX_TOKENS
        )
        return text or resume

    async def cover_letter(self, resume: str | None, job_description: str | None) -> str:
        """Write a cover letter. Empty string on failure."""
        _require(resume=resume, job_description=job_description)
        text = await self._call(
            "cover_letter",
            prompts.cover_letter_prompts(resume, job_description),
            COVER_LETTER_MAX_TOKENS,
        )
        return text or ""

    async def ats_score(self, resume: str | None, job_description: str | None) -> ATSScore:
        """Score a resume against a job description (0-100) with suggestions."""
        _require(resume=resume, job_description=job_description)
        text = await self._call(
            "ats_score", prompts.ats_prompts(resume, job_description), ATS_MAX_TOKENS
        )
        if text is None:
            return ATS_ERROR_FALLBACK.model_copy(deep=True)
        if not text:
            return ATS_EMPTY_FALLBACK.model_copy(deep=True)
        return self._parse_score(text)

    @staticmethod
    def _parse_score(text: str) -> ATSScore:
        """Parse the model's JSON answer, falling back on anything unusable."""
        try:
            data = extract_json_object(text)
            score = max(0, min(100, int(data["score"])))
            suggestions = data.get("suggestions") or []
            if isinstance(suggestions, str):
                suggestions = [suggestions]
            return ATSScore(score=score, suggestions=[str(s) for s in suggestions])
        except (ValueError, KeyError, TypeError):
            logger.warning("Unparseable ATS score response: %.200s", text)
            return ATS_ERROR_FALLBACK.model_copy(deep=True)

    async def _call(self, operation: str, pair: PromptPair, max_tokens: int) -> str | None:
        """One provider call. Trimmed text, or None when the call failed."""
        started = time.monotonic()
        try:
            response = await self.llm.complete(
                pair,
                model=self.model,
                temperature=self.temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.exception("%s LLM call failed", operation)
            await self._record(operation, time.monotonic() - started, error=str(e))
            return None

        text = response.text.strip()
        await self._record(
            operation,
            time.monotonic() - started,
            input_tokens=response.input_tokens,
            output_tokens=response.output_tokens,
            fallback_used=not text,
        )
        return text

    async def _record(
        self,
        operation: str,
        elapsed: float,
        input_tokens: int = 0,
        output_tokens: int = 0,
        fallback_used: bool = False,
        error: str | None = None,
    ) -> None:
        if self.usage_store is None:
            return
        log = UsageLog(
            session_id=self.session_id,
            action=operation,
            provider=self.llm.provider,
            model=self.model,
            elapsed_seconds=round(elapsed, 3),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            estimated_cost_usd=calculate_cost([(self.model, input_tokens, output_tokens)]),
            fallback_used=fallback_used or error is not None,
            success=error is None,
            error_message=error,
        )
        await record_usage(self.usage_store, log)
