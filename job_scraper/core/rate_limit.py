"""
Throttling for outbound work: a cap on open browser pages and a retry
decorator for flaky upstream calls (Jina Reader).
"""

import asyncio
import functools
import logging
import random
from typing import Any, Callable, Coroutine, Tuple, Type, TypeVar

from job_scraper.config.settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimiter:
    """
    Async context manager admitting at most `max_concurrent` holders at once.
    """

    def __init__(self, max_concurrent: int):
        self.max_concurrent = max_concurrent
        self._slots = asyncio.Semaphore(max_concurrent)

    async def __aenter__(self):
        await self._slots.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self._slots.release()


# Shared by every PortalExtractor in the process
page_limiter = RateLimiter(settings.MAX_CONCURRENT_PAGES)


def backoff_delay(attempt: int, base_delay: float, max_delay: float) -> float:
    """Exponential delay for the given zero-based attempt, capped, plus up to 50% jitter."""
    delay = min(base_delay * (2**attempt), max_delay)
    return delay + random.uniform(0, 0.5 * delay)


def with_retry(
    retry_on: Tuple[Type[BaseException], ...],
    max_retries: int = settings.MAX_RETRIES,
    base_delay: float = settings.RETRY_BASE_DELAY,
    max_delay: float = settings.RETRY_MAX_DELAY,
):
    """
    Retry an async call on the listed exception types, up to `max_retries`
    extra attempts. Other exceptions are raised on the first occurrence.
    """

    def decorator(
        func: Callable[..., Coroutine[Any, Any, T]],
    ) -> Callable[..., Coroutine[Any, Any, T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except retry_on as e:
                    if attempt == max_retries:
                        logger.error(
                            f"{func.__name__} gave up after {attempt + 1} attempt(s): {e}"
                        )
                        raise
                    wait = backoff_delay(attempt, base_delay, max_delay)
                    logger.warning(
                        f"{func.__name__} failed ({type(e).__name__}: {e}), "
                        f"attempt {attempt + 2}/{max_retries + 1} in {wait:.2f}s"
                    )
                    await asyncio.sleep(wait)

        return wrapper

    return decorator
