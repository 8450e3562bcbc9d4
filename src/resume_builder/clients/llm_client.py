"""Text-generation provider wrapper (OpenAI or Anthropic)."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any

import anthropic
import openai

from resume_builder.config import LLMConfig
from resume_builder.models.improvement import PromptPair

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from the provider including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async chat-completion client. One call per request, no retries.

    The SDK client is built on first use and reused afterwards. Its connection
    pool belongs to the event loop of the first call, so callers that start a
    new loop per call (asyncio.run) need a new LLMClient each time.
    """

    def __init__(
        self,
        provider: str = "openai",
        api_key: str | None = None,
        timeout: float | None = None,
        base_url: str | None = None,
    ):
        if provider not in ("openai", "anthropic"):
            raise ValueError(f"Unknown provider: {provider}")
        self.provider = provider
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = base_url
        self._client: Any = None

    @property
    def client(self) -> Any:
        if self._client is None:
            # SDKs retry by default; one attempt per request here
            kwargs: dict = {"max_retries": 0}
            if self._api_key is not None:
                kwargs["api_key"] = self._api_key
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            if self._base_url is not None:
                kwargs["base_url"] = self._base_url
            if self.provider == "openai":
                self._client = openai.AsyncOpenAI(**kwargs)
            else:
                self._client = anthropic.AsyncAnthropic(**kwargs)
            logger.debug("Created %s client", self.provider)
        return self._client

    async def complete(
        self,
        prompts: PromptPair,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 500,
    ) -> LLMResponse:
        """Send a system/user prompt pair and return the first choice's text.

        The text is returned untrimmed and may be empty.
        """
        logger.debug("LLM call: provider=%s model=%s", self.provider, model)
        try:
            if self.provider == "openai":
                response = await self._complete_openai(prompts, model, temperature, max_tokens)
            else:
                response = await self._complete_anthropic(prompts, model, temperature, max_tokens)
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise
        logger.debug(
            "LLM response: %d input, %d output tokens",
            response.input_tokens,
            response.output_tokens,
        )
        return response

    async def _complete_openai(
        self,
        prompts: PromptPair,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> LLMResponse:
        completion = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": prompts.system_prompt},
                {"role": "user", "content": prompts.user_prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        text = ""
        if completion.choices:
            text = completion.choices[0].message.content or ""
        usage = completion.usage
        return LLMResponse(
            text=text,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )

    async def _complete_anthropic(
        self,
        prompts: PromptPair,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> LLMResponse:
        message = await self.client.messages.create(
            model=model,
            system=prompts.system_prompt,
            messages=[{"role": "user", "content": prompts.user_prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        text = ""
        for block in message.content:
            if getattr(block, "type", None) == "text":
                text = block.text
                break
        return LLMResponse(
            text=text,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )


@functools.lru_cache(maxsize=None)
def get_llm_client(config: LLMConfig) -> LLMClient:
    """Process-wide client for a given LLM config."""
    return LLMClient(provider=config.provider, timeout=config.timeout, base_url=config.base_url)
