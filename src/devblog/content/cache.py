"""Document cache.

Parsed documents are cached per source path. Each entry remembers the file fingerprint
(mtime + size) it was built from and is rebuilt as soon as the file changes, so a page never serves
an outline that belongs to an older version of its content.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from devblog.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Fingerprint:
    mtime_ns: int
    size: int

    @classmethod
    def of(cls, path: Path) -> Fingerprint:
        st = path.stat()
        return cls(mtime_ns=st.st_mtime_ns, size=st.st_size)


class ContentCache(Generic[T]):
    """LRU cache of parsed documents keyed by resolved path."""

    def __init__(self, max_size: int = 256) -> None:
        """Initialize the cache.

        Args:
            max_size: Maximum number of documents to keep.
        """
        self.max_size = max_size
        self._entries: OrderedDict[Path, tuple[Fingerprint, T]] = OrderedDict()
        self._lock = threading.Lock()

    def get_or_load(self, path: Path, loader: Callable[[Path], T]) -> T:
        """Return the cached value for `path`, loading it when missing or stale.

        Raises:
            FileNotFoundError: If `path` does not exist.
        """

        key = path.resolve()
        fingerprint = Fingerprint.of(key)

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0] == fingerprint:
                self._entries.move_to_end(key)
                return entry[1]

        # Load outside the lock; a concurrent load of the same file just wins the race
        value = loader(key)
        logger.debug("Loaded %s into content cache", key)

        with self._lock:
            self._entries[key] = (fingerprint, value)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
        return value

    def invalidate(self, path: Path) -> bool:
        """Drop the entry for `path`. Returns True when something was removed."""

        with self._lock:
            return self._entries.pop(path.resolve(), None) is not None

    def clear(self) -> None:
        """Drop every entry."""

        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        """Get current cache size."""

        with self._lock:
            return len(self._entries)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Path):
            return False
        with self._lock:
            return path.resolve() in self._entries
