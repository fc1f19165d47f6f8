"""
In-process result cache keyed by normalized URL.

Entries expire lazily: an entry older than the TTL is evicted when it is
next read. There is no size bound and no background sweep.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from job_scraper.config.settings import settings
from job_scraper.core.models import CacheStats, JobRecord

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    record: JobRecord
    created_at: float


class ResultCache:
    """
    Thread-safe TTL cache of extracted job records.
    """

    def __init__(
        self,
        ttl_seconds: float = settings.CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[JobRecord]:
        """
        Return a copy of the cached record, or None on a miss or an expired entry.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            age = self._clock() - entry.created_at
            if age > self.ttl_seconds:
                del self._entries[key]
                logger.debug(f"Cache entry expired after {age:.0f}s: {key}")
                return None

            return entry.record.model_copy(deep=True)

    def set(self, key: str, record: JobRecord) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(
                record=record.model_copy(deep=True),
                created_at=self._clock(),
            )

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Result cache cleared ({count} entries).")

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(size=len(self._entries), keys=list(self._entries))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
