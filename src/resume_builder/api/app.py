"""HTTP API for AI text improvement (FastAPI)."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_builder.clients.llm_client import LLMClient, get_llm_client
from resume_builder.config import AppConfig, load_config
from resume_builder.errors import InputValidationError, InvalidActionError, UpstreamError
from resume_builder.logging.usage_store import UsageStore
from resume_builder.models.improvement import (
    ATSScore,
    ContentRequest,
    ErrorResponse,
    GeneratedContent,
    ImprovementRequest,
    ImprovementResult,
    JobMatchRequest,
    ProfileRequest,
    Tone,
)
from resume_builder.pipeline.resume_assistant import ResumeAssistant
from resume_builder.pipeline.text_improver import TextImprover
from resume_builder.prompts.actions import TONE_DESCRIPTIONS, supported_actions

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    llm: LLMClient | None = None,
    usage_store: UsageStore | None = None,
) -> FastAPI:
    """Build the API app.

    ``llm`` defaults to the process-wide client for ``config.llm``; pass a
    substitute to keep tests off the network. ``usage_store`` defaults to the
    configured SQLite store when usage logging is enabled.
    """
    config = config or load_config()
    if llm is None:
        llm = get_llm_client(config.llm)
    if usage_store is None and config.usage.enabled:
        usage_store = UsageStore(db_path=config.usage.resolved_db_path)

    improver = TextImprover(
        llm,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        usage_store=usage_store,
    )

    app = FastAPI(title="Resume Builder AI API", version="0.1.0")
    app.state.improver = improver
    app.state.assistant = ResumeAssistant(
        llm,
        model=config.llm.model,
        temperature=config.llm.temperature,
        usage_store=usage_store,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InputValidationError)
    async def _input_error(request: Request, exc: InputValidationError) -> JSONResponse:
        details = exc.details if isinstance(exc, InvalidActionError) else None
        body = ErrorResponse(error=str(exc), details=details)
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    @app.exception_handler(RequestValidationError)
    async def _body_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        body = ErrorResponse(error="Invalid request body", details=str(exc.errors()))
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(UpstreamError)
    async def _upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
        body = ErrorResponse(error=str(exc), details=exc.details)
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"status": "ok"}

    @app.get("/api/ai/actions")
    async def list_actions() -> dict:
        return {
            "actions": supported_actions(),
            "tones": [
                {"name": tone.value, "description": TONE_DESCRIPTIONS[tone.value]}
                for tone in Tone
            ],
        }

    @app.post("/api/ai/improve", response_model=ImprovementResult)
    async def improve(body: ImprovementRequest) -> ImprovementResult:
        logger.info("Improve request: action=%s type=%s", body.action, body.type)
        return await app.state.improver.improve(body)

    @app.post("/api/ai/generate", response_model=GeneratedContent)
    async def generate(body: ProfileRequest) -> GeneratedContent:
        content = await app.state.assistant.generate_content(body.profile)
        return GeneratedContent(content=content)

    @app.post("/api/ai/polish", response_model=GeneratedContent)
    async def polish(body: ContentRequest) -> GeneratedContent:
        content = await app.state.assistant.polish_content(body.content)
        return GeneratedContent(content=content)

    @app.post("/api/ai/tailor", response_model=GeneratedContent)
    async def tailor(body: JobMatchRequest) -> GeneratedContent:
        content = await app.state.assistant.tailor_to_job(body.resume, body.job_description)
        return GeneratedContent(content=content)

    @app.post("/api/ai/cover-letter", response_model=GeneratedContent)
    async def cover_letter(body: JobMatchRequest) -> GeneratedContent:
        content = await app.state.assistant.cover_letter(body.resume, body.job_description)
        return GeneratedContent(content=content)

    @app.post("/api/ai/ats-score", response_model=ATSScore)
    async def ats_score(body: JobMatchRequest) -> ATSScore:
        return await app.state.assistant.ats_score(body.resume, body.job_description)

    return app
