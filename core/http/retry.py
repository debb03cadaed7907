"""Scheduling-agnostic retry policy and async retry loop."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, TypeVar

from config import http as http_config

from .cancellation import CancellationToken

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Capped exponential backoff with additive jitter.

    ``delay_for(attempt)`` is ``2**attempt * base_delay + uniform(0, max_jitter)``
    where ``attempt`` is the zero-based index of the failed attempt.
    """

    max_retries: int = http_config.MAX_RETRIES
    base_delay: float = http_config.RETRY_BASE_DELAY
    max_jitter: float = http_config.RETRY_MAX_JITTER
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_delay < 0 or self.max_jitter < 0:
            raise ValueError("delays must be >= 0")

    def base_delay_for(self, attempt: int) -> float:
        return (2 ** attempt) * self.base_delay

    def delay_for(self, attempt: int) -> float:
        jitter = self.rng.uniform(0.0, self.max_jitter) if self.max_jitter else 0.0
        return self.base_delay_for(attempt) + jitter

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_retries


async def retry_async(
    operation: Callable[[int], Awaitable[T]],
    *,
    policy: RetryPolicy,
    is_retryable: Callable[[BaseException], bool],
    cancellation: Optional[CancellationToken] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    description: str = "operation",
) -> T:
    """Run ``operation(attempt)`` until it succeeds or the policy gives up.

    Errors rejected by ``is_retryable`` propagate immediately. Once retries are
    exhausted the last error propagates unchanged.
    """

    attempt = 0
    while True:
        if cancellation is not None:
            cancellation.raise_if_cancelled(description)
        try:
            return await operation(attempt)
        except Exception as exc:
            if not is_retryable(exc) or not policy.should_retry(attempt):
                raise
            delay = policy.delay_for(attempt)
            logger.warning(
                "%s failed (attempt %d/%d): %s; retrying in %.2fs",
                description,
                attempt + 1,
                policy.max_retries + 1,
                exc,
                delay,
            )
            if cancellation is not None:
                await cancellation.sleep(delay, sleeper=sleep)
            else:
                await (sleep or asyncio.sleep)(delay)
            attempt += 1


__all__ = ["RetryPolicy", "retry_async"]
