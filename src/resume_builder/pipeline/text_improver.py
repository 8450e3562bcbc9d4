"""Text improvement agent: one prompt pair, one provider call, one result."""

from __future__ import annotations

import logging
import time

from resume_builder.clients.llm_client import LLMClient, LLMResponse
from resume_builder.config import LLMConfig
from resume_builder.errors import EmptyTextError, UpstreamError
from resume_builder.logging.cost_calculator import calculate_cost
from resume_builder.logging.models import UsageLog
from resume_builder.logging.usage_store import UsageStore, record_usage
from resume_builder.models.improvement import ImprovementRequest, ImprovementResult
from resume_builder.prompts.actions import parse_action, select_prompts

logger = logging.getLogger(__name__)


class TextImprover:
    """Rewrite a piece of resume text according to an action tag."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 500,
        usage_store: UsageStore | None = None,
        session_id: str = "anonymous",
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.usage_store = usage_store
        self.session_id = session_id

    async def improve(self, request: ImprovementRequest) -> ImprovementResult:
        """Run a single improvement.

        Raises:
            EmptyTextError: text is empty or whitespace only.
            InvalidActionError: action is not supported.
            UpstreamError: the provider call failed.
        """
        if not request.text or not request.text.strip():
            raise EmptyTextError()
        action = parse_action(request.action)
        prompts = select_prompts(action, request.text, request.type, request.tone)

        started = time.monotonic()
        try:
            response = await self.llm.complete(
                prompts,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error("AI improvement failed for action=%s", action.value)
            await self._record(request, time.monotonic() - started, error=str(e))
            raise UpstreamError(str(e)) from e

        improved = response.text.strip()
        fallback_used = not improved
        if fallback_used:
            logger.debug("Empty completion for action=%s, returning original text", action.value)
            improved = request.text

        await self._record(
            request,
            time.monotonic() - started,
            response=response,
            fallback_used=fallback_used,
        )
        return ImprovementResult(
            original=request.text,
            improved=improved,
            action=action.value,
            type=request.type,
        )

    async def _record(
        self,
        request: ImprovementRequest,
        elapsed: float,
        response: LLMResponse | None = None,
        fallback_used: bool = False,
        error: str | None = None,
    ) -> None:
        if self.usage_store is None:
            return
        input_tokens = response.input_tokens if response else 0
        output_tokens = response.output_tokens if response else 0
        log = UsageLog(
            session_id=self.session_id,
            action=request.action,
            content_type=request.type,
            provider=self.llm.provider,
            model=self.model,
            elapsed_seconds=round(elapsed, 3),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            estimated_cost_usd=calculate_cost([(self.model, input_tokens, output_tokens)]),
            fallback_used=fallback_used,
            success=error is None,
            error_message=error,
        )
        await record_usage(self.usage_store, log)


def build_improver(
    config: LLMConfig,
    usage_store: UsageStore | None = None,
    session_id: str = "anonymous",
    api_key: str | None = None,
) -> TextImprover:
    """TextImprover with its own LLMClient.

    For callers that wrap each improvement in asyncio.run: the client's
    connection pool cannot outlive the loop it was first used on.
    """
    llm = LLMClient(
        provider=config.provider,
        api_key=api_key,
        timeout=config.timeout,
        base_url=config.base_url,
    )
    return TextImprover(
        llm,
        model=config.model,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        usage_store=usage_store,
        session_id=session_id,
    )
