"""Directory size calculation and memoization."""

import logging
import os
import threading
from collections.abc import MutableMapping
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    """Hidden entries are skipped everywhere: not listed, not counted."""
    return name.startswith(".")


def get_directory_size(path: str) -> int:
    """
    Total size of all non-hidden files below a directory.

    Uses os.scandir and never follows symlinks. Entries that can't be read
    contribute 0 instead of failing the whole calculation.

    Args:
        path: Directory to measure

    Returns:
        Total bytes
    """
    total_size = 0
    pending = [path]

    # Directories still to visit; no recursion, so depth is unbounded
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    if is_hidden(entry.name):
                        continue
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(entry.path)
                        else:
                            total_size += entry.stat(follow_symlinks=False).st_size
                    except (PermissionError, OSError):
                        continue
        except (PermissionError, OSError):
            continue

    return total_size


class SizeCache:
    """
    Memoized subtree sizes, keyed by path.

    A size is computed once per path and kept for the lifetime of the cache,
    even if the filesystem changes underneath it. Safe to share between
    threads: the mapping is guarded by a lock, and the traversal itself runs
    outside the lock so a slow subtree never blocks lookups of other paths.
    Two threads asking for the same uncached path may both compute it; the
    values are equal, so whichever write lands last is fine.
    """

    def __init__(
        self,
        measure: Callable[[str], int] = get_directory_size,
        store: Optional[MutableMapping[str, int]] = None,
    ):
        self._measure = measure
        self._store: MutableMapping[str, int] = store if store is not None else {}
        self._lock = threading.Lock()
        self.computations = 0

    def get(self, path: str) -> int:
        """Return the total size below path, computing it on first use."""
        with self._lock:
            if path in self._store:
                return self._store[path]

        size = self._measure(path)
        logger.debug("Measured %s: %d bytes", path, size)

        with self._lock:
            self.computations += 1
            self._store[path] = size
        return size

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
