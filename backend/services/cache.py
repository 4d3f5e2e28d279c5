"""
In-process cache for brand vetting results.

Entries live until local midnight, so a brand is re-vetted at most once a day
per process. Not shared between workers; a multi-instance deployment should
put a shared store behind the same get/set/evict interface.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from config import BRAND_CACHE_CLEANUP_THRESHOLD
from schemas.brand import BrandVettingResult

logger = logging.getLogger(__name__)


def next_local_midnight(now: datetime) -> datetime:
    tomorrow = now.date() + timedelta(days=1)
    return datetime(tomorrow.year, tomorrow.month, tomorrow.day)


class BrandVetCache:
    def __init__(self, cleanup_threshold: int = BRAND_CACHE_CLEANUP_THRESHOLD):
        self.cleanup_threshold = cleanup_threshold
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def get(self, key: str, now: datetime = None) -> Optional[BrandVettingResult]:
        """Cached copy flagged cached=True, or None when absent or expired."""
        now = now or datetime.now()
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Brand cache miss: %s", key)
            return None

        result, expires_at = entry
        if now >= expires_at:
            del self._entries[key]
            logger.debug("Brand cache expired: %s", key)
            return None

        logger.info("Brand cache hit: %s", key)
        return result.model_copy(update={"cached": True}, deep=True)

    def set(self, key: str, result: BrandVettingResult, now: datetime = None) -> None:
        now = now or datetime.now()
        if len(self._entries) > self.cleanup_threshold:
            self.evict(now)
        self._entries[key] = (result.model_copy(deep=True), next_local_midnight(now))

    def evict(self, now: datetime = None) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = now or datetime.now()
        stale = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.info("Evicted %d expired brand cache entries", len(stale))
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()


brand_vet_cache = BrandVetCache()
