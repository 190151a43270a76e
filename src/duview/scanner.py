"""One-level directory scanning for duview."""

import logging
import os
import stat
from typing import Optional

from duview.cache import SizeCache, is_hidden
from duview.models import Entry

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """A path could not be scanned (unreadable, vanished, ...)."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _base_name(path: str) -> str:
    # basename("/") is empty, show the root itself
    return os.path.basename(path.rstrip(os.sep)) or path


def annotate_percentages(children: list[Entry], total: int) -> None:
    """Set each child's percent of total. Left at 0 when total is 0."""
    if total <= 0:
        return
    for child in children:
        child.percent = child.size / total * 100


class Scanner:
    """
    Builds a directory Entry with its immediate children.

    Subdirectory sizes are full recursive totals from the SizeCache; file
    sizes come straight from stat. Grandchildren are never materialized.
    """

    def __init__(self, cache: Optional[SizeCache] = None):
        self.cache = cache if cache is not None else SizeCache()

    def scan(self, path: str, show_files: bool = True) -> Entry:
        """
        Scan path one level deep.

        Args:
            path: Directory (or file) to scan
            show_files: Materialize files as children. Hidden-from-display
                files still count toward the total.

        Returns:
            Entry with sorted, percentage-annotated children

        Raises:
            ScanError: If path can't be stat'ed or listed
        """
        path = os.path.abspath(path)
        logger.debug("Scanning %s (show_files=%s)", path, show_files)

        try:
            info = os.stat(path)
        except OSError as e:
            raise ScanError(path, e.strerror or str(e)) from e

        entry = Entry(
            name=_base_name(path),
            path=path,
            is_directory=stat.S_ISDIR(info.st_mode),
            percent=100.0,
        )

        if not entry.is_directory:
            entry.size = info.st_size
            return entry

        total_size = 0
        directories: list[Entry] = []
        files: list[Entry] = []

        try:
            with os.scandir(path) as entries:
                for child in entries:
                    if is_hidden(child.name):
                        continue

                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                        child_size = (
                            self.cache.get(child.path)
                            if is_dir
                            else child.stat(follow_symlinks=False).st_size
                        )
                    except (PermissionError, OSError) as e:
                        logger.debug("Skipping unreadable entry %s: %s", child.path, e)
                        continue

                    total_size += child_size

                    if is_dir:
                        directories.append(
                            Entry(name=child.name, path=child.path, size=child_size, is_directory=True)
                        )
                    elif show_files:
                        files.append(Entry(name=child.name, path=child.path, size=child_size))
        except OSError as e:
            raise ScanError(path, e.strerror or str(e)) from e

        directories.sort(key=lambda e: e.size, reverse=True)
        files.sort(key=lambda e: e.size, reverse=True)

        entry.children = directories + files
        entry.size = total_size
        annotate_percentages(entry.children, total_size)

        logger.debug(
            "Scanned %s: %d bytes, %d directories, %d files shown",
            path,
            total_size,
            len(directories),
            len(files),
        )
        return entry
