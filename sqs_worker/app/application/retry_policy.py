"""How long the poller waits after a failed receive before trying again."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Protocol

from sqs_worker.app.config.settings import Settings
from sqs_worker.app.core.backoff import backoff_delay


class RetryPolicy(Protocol):
    async def wait(self, consecutive_failures: int) -> None: ...


class ImmediateRetry:
    """Retry at once. The long-poll wait already limits the request rate."""

    async def wait(self, consecutive_failures: int) -> None:
        await asyncio.sleep(0)


class ExponentialBackoffRetry:
    """Sleep `initial * multiplier ** (n - 1)` seconds, capped, before the n-th retry."""

    def __init__(
        self,
        initial_delay: float,
        max_delay: float,
        multiplier: float = 2.0,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._initial_delay = initial_delay
        self._max_delay = max_delay
        self._multiplier = multiplier
        self._sleep = sleep

    def delay_for(self, consecutive_failures: int) -> float:
        return backoff_delay(
            consecutive_failures,
            self._initial_delay,
            self._max_delay,
            self._multiplier,
        )

    async def wait(self, consecutive_failures: int) -> None:
        await self._sleep(self.delay_for(consecutive_failures))


def create_retry_policy(settings: Settings) -> RetryPolicy:
    if settings.receive_retry_backoff:
        return ExponentialBackoffRetry(
            settings.initial_backoff_seconds,
            settings.max_backoff_seconds,
            settings.backoff_multiplier,
        )
    return ImmediateRetry()
