"""Test configuration helpers."""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Declare the async plugins explicitly so ``@pytest.mark.anyio`` works even
# when plugin auto-discovery is disabled.
pytest_plugins = ("anyio", "pytest_asyncio")

# Ensure the repository root is importable so ``import core`` succeeds when
# tests are executed from arbitrary working directories.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("GOOGLE_API_KEY", "test-key")

from core.http.client import GeminiHttpClient  # noqa: E402
from core.http.retry import RetryPolicy  # noqa: E402

from .helpers import Handler, MockGemini, RecordingSleep  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    """Restrict async tests to the asyncio backend."""

    return "asyncio"


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_http_client(recording_sleep: RecordingSleep) -> Callable[..., tuple[GeminiHttpClient, MockGemini]]:
    """Return a factory building a client backed by ``httpx.MockTransport``."""

    def _factory(
        handler: Handler,
        *,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_jitter: float = 1.0,
        seed: int = 0,
    ) -> tuple[GeminiHttpClient, MockGemini]:
        mock = MockGemini(handler)
        policy = RetryPolicy(
            max_retries=max_retries,
            base_delay=base_delay,
            max_jitter=max_jitter,
            rng=random.Random(seed),
        )
        client = GeminiHttpClient(
            api_key="test-key",
            policy=policy,
            client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(mock)),
            sleep=recording_sleep,
        )
        return client, mock

    return _factory
