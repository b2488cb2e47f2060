"""
Rate Limiter Utility - per-endpoint request pacing, scoped to the event loop.

Each upstream (directory search, backend server) gets its own limiter so a burst of
feed fetches never delays a directory search. Limiters are keyed by event loop to
avoid "attached to a different loop" errors when tests create fresh loops.

Usage:
    from utils.rate_limiter import get_rate_limiter

    limiter = get_rate_limiter("directory", max_rate=5, time_period=1)
    async with limiter:
        ...
"""

from __future__ import annotations

import asyncio
import os
import threading
from typing import Any

from aiolimiter import AsyncLimiter

from utils.get_logger import get_logger

logger = get_logger(__name__)

_lock = threading.Lock()

# Key: (endpoint, max_rate, time_period, loop_id)
_limiters: dict[tuple[str, int, float, int], AsyncLimiter] = {}


class NoOpRateLimiter:
    """Stand-in used for unit tests, where every request is mocked."""

    async def __aenter__(self) -> NoOpRateLimiter:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        return None


def rate_limiting_disabled() -> bool:
    return os.getenv("ENVIRONMENT", "").lower() == "test"


def get_rate_limiter(
    endpoint: str, max_rate: int, time_period: float = 1.0
) -> AsyncLimiter | NoOpRateLimiter:
    """
    Get or create the limiter for an endpoint on the running event loop.

    Args:
        endpoint: Logical upstream name (e.g. "directory", "server")
        max_rate: Maximum number of requests allowed per period
        time_period: Period length in seconds (default: 1.0)

    Returns:
        An AsyncLimiter, or a no-op limiter when ENVIRONMENT=test
    """
    if rate_limiting_disabled():
        return NoOpRateLimiter()

    loop = asyncio.get_running_loop()
    cache_key = (endpoint, max_rate, time_period, id(loop))

    if cache_key not in _limiters:
        with _lock:
            if cache_key not in _limiters:
                _limiters[cache_key] = AsyncLimiter(max_rate, time_period)
                logger.debug(
                    f"Created rate limiter for '{endpoint}' on loop {id(loop)}: "
                    f"{max_rate} requests per {time_period}s"
                )

    return _limiters[cache_key]
