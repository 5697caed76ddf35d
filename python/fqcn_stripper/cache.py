"""
Memoization store for strip() results.

Keys combine the raw qualified name with the raw (non-normalized) modifier
value, so LOWER | UC and LOW_UC given as different ints would be cached
separately. Entries live until clear() is called; there is no eviction.
"""

import threading
from typing import Optional

from .constants import CACHE_KEY_SEPARATOR
from .logging_config import get_logger

logger = get_logger("cache")


def make_key(qualified_name: str, modifier: int, namespace: str = "") -> str:
    """
    Build the cache key for a qualified name and raw modifier value.

    A non-empty namespace is appended so strippers with different behavior
    switches can share one cache without serving each other's results.
    """
    key = f"{qualified_name}{CACHE_KEY_SEPARATOR}{int(modifier)}"
    if namespace:
        key = f"{key}{CACHE_KEY_SEPARATOR}{namespace}"
    return key


class StripCache:
    """
    Thread-safe, unbounded result cache.

    Example:
        cache = StripCache()
        stripper = NameStripper(cache=cache)
        stripper.strip("App\\Entity\\User")
        len(cache)  # 1
    """

    def __init__(self):
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        """Drop all entries and reset the hit/miss counters."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self.hits = 0
            self.misses = 0
        logger.debug(f"Cleared {count} cached entries")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
