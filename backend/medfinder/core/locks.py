"""Per-key locks for serializing writers that touch the same store key."""
import threading
from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Tuple


class KeyedLock:
    """
    One `threading.Lock` per key, created on first use.

    Writers on different keys never block each other. `hold` acquires in
    sorted order so two batches sharing keys cannot deadlock. A key's lock is
    dropped once no thread holds or waits for it, so only keys in use are kept.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}
        self._users: Dict[str, int] = defaultdict(int)

    def _checkout(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            self._users[key] += 1
            return lock

    def _checkin(self, key: str) -> None:
        with self._guard:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]

    @contextmanager
    def hold(self, keys: Iterable[str]) -> Iterator[None]:
        acquired: List[Tuple[str, threading.Lock]] = []
        try:
            for key in sorted(set(keys)):
                lock = self._checkout(key)
                try:
                    lock.acquire()
                except BaseException:
                    self._checkin(key)
                    raise
                acquired.append((key, lock))
            yield
        finally:
            for key, lock in reversed(acquired):
                lock.release()
                self._checkin(key)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
