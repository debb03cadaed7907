"""Per-call cancellation token shared by the HTTP client and providers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional


@dataclass
class CancellationToken:
    """Signal that a superseded request should stop retrying.

    Cancelling the token does not interrupt an in-flight HTTP request; it
    aborts the next backoff sleep or retry attempt with
    :class:`asyncio.CancelledError`.
    """

    _cancelled: asyncio.Event = field(default_factory=asyncio.Event)

    def cancel(self) -> None:
        """Signal that this call should stop processing."""
        if not self._cancelled.is_set():
            self._cancelled.set()

    def is_cancelled(self) -> bool:
        """Return True if cancellation has been requested."""
        return self._cancelled.is_set()

    def raise_if_cancelled(self, stage: str = "request") -> None:
        if self._cancelled.is_set():
            raise asyncio.CancelledError(f"{stage} cancelled")

    async def sleep(
        self,
        delay: float,
        sleeper: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        """Sleep for ``delay`` seconds unless cancelled first.

        A custom ``sleeper`` replaces the wall-clock wait; cancellation is then
        checked once it returns.
        """

        if sleeper is not None:
            await sleeper(delay)
            self.raise_if_cancelled("backoff")
            return
        try:
            await asyncio.wait_for(self._cancelled.wait(), timeout=max(delay, 0.0))
        except asyncio.TimeoutError:
            return
        raise asyncio.CancelledError("backoff cancelled")


__all__ = ["CancellationToken"]
