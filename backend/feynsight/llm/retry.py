"""Retry policy for remote model calls.

Transient failures back off exponentially; quota failures fail fast because
retrying cannot succeed until the quota resets.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QuotaExceededError(RuntimeError):
    """The model provider rejected the call for rate or quota reasons."""


def is_quota_error(exc: BaseException) -> bool:
    if isinstance(exc, QuotaExceededError):
        return True
    if getattr(exc, "status_code", None) == 429 or getattr(exc, "status", None) == 429:
        return True
    msg = str(exc).lower()
    return "429" in msg or "quota" in msg or "rate limit" in msg


async def with_retry(
    call: Callable[[], Awaitable[T]],
    retries: int = 3,
    base_delay: float = 0.5,
) -> T:
    """Await ``call()`` up to ``retries`` times, sleeping base·2^i between tries."""
    last_error: Exception | None = None
    for attempt in range(retries):
        try:
            return await call()
        except Exception as e:
            if is_quota_error(e):
                raise QuotaExceededError(str(e)) from e
            last_error = e
            delay = base_delay * (2 ** attempt)
            logger.warning("Model call failed (attempt %d/%d): %s", attempt + 1, retries, e)
            if attempt + 1 < retries:
                await asyncio.sleep(delay)
    if last_error is None:
        raise ValueError("retries must be at least 1")
    raise last_error
