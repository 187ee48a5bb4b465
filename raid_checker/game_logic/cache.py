# raid_checker/game_logic/cache.py
import threading
import time

from raid_checker import config


class _Miss:
    def __bool__(self):
        return False

    def __repr__(self):
        return "MISS"


# Returned by FreshnessCache.get when nothing fresh is stored.
MISS = _Miss()


def wall_clock_ms():
    return int(time.time() * 1000)


class CacheEntry:
    __slots__ = ("key", "payload", "stored_at")

    def __init__(self, key, payload, stored_at):
        self.key = key
        self.payload = payload
        self.stored_at = stored_at

    def __repr__(self):
        return f"CacheEntry(key={self.key!r}, stored_at={self.stored_at!r})"


def normalize_key(key: str) -> str:
    return key.casefold()


class FreshnessCache:
    """In-memory hiscore payload cache with a fixed time-to-live.

    Timestamps are milliseconds from `clock`. An entry is stale once
    now - stored_at >= ttl_ms and is then never returned.
    """

    def __init__(self, ttl_ms=None, clock=None):
        self.ttl_ms = config.HISCORE_CACHE_TTL_MS if ttl_ms is None else ttl_ms
        self._clock = wall_clock_ms if clock is None else clock
        self._entries = {}
        self._lock = threading.Lock()

    def now(self):
        return self._clock()

    def is_expired(self, entry: CacheEntry, now: int) -> bool:
        return now - entry.stored_at >= self.ttl_ms

    def get(self, key, now=None):
        cache_key = normalize_key(key)
        if now is None:
            now = self.now()
        with self._lock:
            entry = self._entries.get(cache_key)
        if entry is None:
            if config.DEBUG_MODE and config.DEBUG_CACHE_VERBOSE:
                print(f"DEBUG CACHE: Miss for '{cache_key}' (not stored).")
            return MISS
        if self.is_expired(entry, now):
            if config.DEBUG_MODE and config.DEBUG_CACHE_VERBOSE:
                print(f"DEBUG CACHE: Miss for '{cache_key}' (stale, age {now - entry.stored_at}ms).")
            return MISS
        if config.DEBUG_MODE and config.DEBUG_CACHE_VERBOSE:
            print(f"DEBUG CACHE: Hit for '{cache_key}' (age {now - entry.stored_at}ms).")
        return entry.payload

    def put(self, key, payload, now=None):
        cache_key = normalize_key(key)
        if now is None:
            now = self.now()
        with self._lock:
            self._entries[cache_key] = CacheEntry(cache_key, payload, now)

    def __len__(self):
        with self._lock:
            return len(self._entries)
