"""In-process locks keyed by arbitrary hashable values."""

from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock


@dataclass
class KeyedLock:
    """Serializes work per key; distinct keys proceed in parallel.

    A key's lock exists only while some caller holds or waits for it.
    """

    _guard: Lock = field(default_factory=Lock, repr=False)
    _locks: dict[Hashable, Lock] = field(default_factory=dict, repr=False)
    _users: dict[Hashable, int] = field(default_factory=dict, repr=False)

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        """Acquire the lock for ``key`` for the duration of the block."""
        with self._guard:
            lock = self._locks.setdefault(key, Lock())
            self._users[key] = self._users.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._users[key] -= 1
                if not self._users[key]:
                    del self._users[key]
                    del self._locks[key]
