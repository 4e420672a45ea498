import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")

DEFAULT_TTL = timedelta(minutes=5)


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    data: T
    timestamp: float


class TTLCache:
    """
    One entry per key, each valid for `ttl` after it was stored.

    The clock is injectable so expiry can be tested without sleeping. There is
    no request coalescing: two callers that both miss will both fetch.
    """

    def __init__(self, ttl: Union[timedelta, float] = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        self.clock = clock
        self._entries: Dict[str, CacheEntry[Any]] = {}

    def is_valid(self, entry: Optional[CacheEntry[Any]]) -> bool:
        if entry is None:
            return False
        return (self.clock() - entry.timestamp) < self.ttl

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if not self.is_valid(entry):
            return None
        return entry.data

    def set(self, key: str, data: Any) -> None:
        self._entries[key] = CacheEntry(data=data, timestamp=self.clock())

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
