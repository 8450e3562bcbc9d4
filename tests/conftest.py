"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from resume_builder.clients.llm_client import LLMClient, LLMResponse
from resume_builder.config import AppConfig, UsageConfig
from resume_builder.logging.usage_store import UsageStore


@pytest.fixture
def sample_description() -> str:
    return (
        "I was responsible for the backend of our checkout service. "
        "I worked on making the API faster and helped new engineers get started."
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client that returns a fixed completion."""
    client = AsyncMock(spec=LLMClient)
    client.provider = "openai"
    client.complete = AsyncMock(
        return_value=LLMResponse(
            text="  Led backend development of the checkout service.  ",
            input_tokens=120,
            output_tokens=40,
        )
    )
    return client


@pytest.fixture
def usage_store(tmp_path: Path) -> UsageStore:
    return UsageStore(db_path=tmp_path / "usage.db")


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Default config with usage logging pointed at a temp database."""
    return AppConfig(usage=UsageConfig(db_path=str(tmp_path / "api_usage.db")))
