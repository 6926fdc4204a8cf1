"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any, List

import pytest
from fastapi.testclient import TestClient

from ask_gemini.api import create_app
from ask_gemini.config import Settings, logger
from ask_gemini.integration.gemini import Generation


class FakeGeminiClient:
    """Stands in for GeminiClient; records calls and replays a fixed Generation."""

    def __init__(self, generation: Generation, model_name: str = "gemini-test") -> None:
        self.model_name = model_name
        self.generation = generation
        self.calls: List[tuple] = []

    async def send(self, history: List[Any], prompt: str) -> Generation:
        self.calls.append((history, prompt))
        return self.generation


@pytest.fixture
def log_records():
    """Collect loguru records emitted while the test runs."""
    records: List[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def settings():
    """Settings isolated from .env and the process environment."""
    return Settings(_env_file=None, GEMINI_API_KEY="test-key", GEMINI_MODEL="gemini-test")


@pytest.fixture
def fake_client():
    return FakeGeminiClient(Generation(text="Hi there"))


@pytest.fixture
def client(settings, fake_client):
    return TestClient(create_app(settings=settings, client=fake_client))


@pytest.fixture
def unconfigured_client():
    settings = Settings(_env_file=None, GEMINI_API_KEY=None)
    return TestClient(create_app(settings=settings))
