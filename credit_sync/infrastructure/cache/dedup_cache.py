"""Key-existence cache guarding at-most-once order processing."""

import asyncio
import threading
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from credit_sync.domain.exceptions import InvalidArgumentException


class _KeyLock:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = asyncio.Lock()
        self.holders = 0


class DedupCache:
    """
    Records which order ids have already been durably persisted.

    Only key existence drives dedup decisions; the stored value is an
    opaque marker. Entries never expire and are only dropped by
    ``remove`` or ``clear``. The owner decides the cache's lifetime.

    Mutations are serialized with a re-entrant lock. ``key_lock`` adds
    per-key mutual exclusion for callers that need "check, persist,
    mark" to happen atomically across awaits.
    """

    def __init__(self):
        self._storage: Dict[str, Any] = {}
        self._guard = threading.RLock()
        self._key_locks: Dict[str, _KeyLock] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Store a marker for a key, overwriting any previous value.

        Raises:
            InvalidArgumentException: If the key is None or empty
        """
        if not key:
            raise InvalidArgumentException("Cache key cannot be null or empty")
        with self._guard:
            self._storage[key] = value

    def contains(self, key: Optional[str]) -> bool:
        if not key:
            return False
        with self._guard:
            return key in self._storage

    def get(self, key: Optional[str]) -> Any:
        if not key:
            return None
        with self._guard:
            return self._storage.get(key)

    def remove(self, key: Optional[str]) -> None:
        if not key:
            return
        with self._guard:
            self._storage.pop(key, None)

    def clear(self) -> None:
        with self._guard:
            self._storage.clear()

    def size(self) -> int:
        with self._guard:
            return len(self._storage)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    @asynccontextmanager
    async def key_lock(self, key: Optional[str]) -> AsyncGenerator[None, None]:
        """
        Hold an exclusive per-key lock for the duration of the block.

        The lock object is discarded once no task holds or waits on it.
        """
        lock_key = key or ""
        with self._guard:
            entry = self._key_locks.get(lock_key)
            if entry is None:
                entry = self._key_locks[lock_key] = _KeyLock()
            entry.holders += 1

        try:
            async with entry.lock:
                yield
        finally:
            with self._guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._key_locks[lock_key]
