"""Retry policy with exponential backoff for transient API failures."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from jolpica_f1.exceptions import TransientSourceError

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5
DEFAULT_INITIAL_DELAY = 2.0
DEFAULT_BACKOFF_MULTIPLIER = 1.5

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Decide whether a failed attempt is retried, and after how long.

    Usage:
        policy = RetryPolicy()
        policy.next_delay(1, JolpicaRateLimitError(429, "slow down"))  # 2.0
        policy.next_delay(2, JolpicaRateLimitError(429, "slow down"))  # 3.0
        policy.next_delay(1, JolpicaAPIError(404, "missing"))  # None
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: float = DEFAULT_INITIAL_DELAY
    multiplier: float = DEFAULT_BACKOFF_MULTIPLIER

    def next_delay(self, attempt: int, error: Exception) -> float | None:
        """Return the delay before retrying, or None to give up.

        Args:
            attempt: Number of attempts that have failed so far (1 after the first failure).
            error: The exception raised by the failed attempt.
        """
        if not isinstance(error, TransientSourceError):
            return None
        if attempt > self.max_retries:
            return None
        return self.initial_delay * self.multiplier ** (attempt - 1)



def call_with_retry(
    fn: Callable[[], T],
    policy: RetryPolicy,
    sleep: Callable[[float], None] = time.sleep,
    description: str = "request",
) -> T:
    """Call *fn* until it succeeds or *policy* gives up, sleeping between attempts."""
    attempt = 0
    while True:
        try:
            return fn()
        except Exception as exc:
            attempt += 1
            delay = policy.next_delay(attempt, exc)
            if delay is None:
                raise
            logger.warning(
                "%s failed (%s); retrying in %.2fs (%d retries left)",
                description, exc, delay, policy.max_retries - attempt,
            )
            sleep(delay)


async def acall_with_retry(
    fn: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    description: str = "request",
) -> T:
    """Async variant of call_with_retry; the backoff suspends only the calling task."""
    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:
            attempt += 1
            delay = policy.next_delay(attempt, exc)
            if delay is None:
                raise
            logger.warning(
                "%s failed (%s); retrying in %.2fs (%d retries left)",
                description, exc, delay, policy.max_retries - attempt,
            )
            await sleep(delay)
