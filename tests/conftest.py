"""Shared fixtures for the censor test suite."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Coroutine, Iterator

import pytest

from censor.engine.censor_engine import CensorEngine
from censor.service.pipeline import CensorService


@pytest.fixture
def engine() -> CensorEngine:
    """Engine seeded with the bundled word list."""
    return CensorEngine()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep real credentials and the shared engine out of tests."""
    monkeypatch.delenv("OPEN_MODERATOR_API_KEY", raising=False)
    monkeypatch.delenv("CENSOR_OPEN_MODERATOR_API_KEY", raising=False)
    CensorService.reset()
    yield
    CensorService.reset()


@pytest.fixture
def run() -> Callable[[Coroutine[Any, Any, Any]], Any]:
    """Runs a coroutine to completion on a fresh event loop."""
    return asyncio.run
