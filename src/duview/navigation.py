"""Cursor, scrolling and drill navigation over a one-level listing."""

import os
from typing import Optional

from duview.models import Entry, Intent, IntentKind

# Rows taken by the header line and the status line
HEADER_ROWS = 2

# Used until the terminal reports its real size
DEFAULT_HEIGHT = 20


def parent_path(path: str) -> Optional[str]:
    """Filesystem parent of path, or None at the filesystem root."""
    parent = os.path.dirname(path)
    if parent == path:
        return None
    return parent


class NavigationState:
    """
    The active root and the listing the user moves through.

    Every operation that touches the cursor, the scroll offset or the
    visible list re-applies the viewport invariant: the cursor row is
    always inside the rendered window, and the window never scrolls past
    the end of the list.

    Drill operations don't change anything themselves; they return an
    Intent and the caller decides what to do with it.
    """

    def __init__(
        self,
        show_files: bool = True,
        viewport_height: int = DEFAULT_HEIGHT,
        header_rows: int = HEADER_ROWS,
    ):
        self.show_files = show_files
        self.viewport_height = viewport_height
        self.header_rows = header_rows
        self.root: Optional[Entry] = None
        self.visible: list[Entry] = []
        self.cursor = 0
        self.scroll_offset = 0

    @property
    def max_visible(self) -> int:
        """Number of listing rows that fit in the viewport."""
        return max(self.viewport_height - self.header_rows, 0)

    @property
    def current(self) -> Optional[Entry]:
        """Entry under the cursor."""
        if 0 <= self.cursor < len(self.visible):
            return self.visible[self.cursor]
        return None

    def window(self) -> list[tuple[int, Entry]]:
        """(index, entry) pairs currently inside the viewport."""
        end = min(self.scroll_offset + self.max_visible, len(self.visible))
        return [(i, self.visible[i]) for i in range(self.scroll_offset, end)]

    # -- motions ---------------------------------------------------------

    def move_cursor(self, delta: int) -> None:
        """Move the cursor by delta rows, clamped to the list."""
        if not self.visible:
            return
        self.cursor = min(max(self.cursor + delta, 0), len(self.visible) - 1)
        self.ensure_cursor_visible()

    def move_to_start(self) -> None:
        self.move_cursor(-len(self.visible))

    def move_to_end(self) -> None:
        self.move_cursor(len(self.visible))

    def page_move(self, direction: int) -> None:
        """Move a page up (direction < 0) or down (direction > 0)."""
        page = max(self.max_visible, 1)
        self.move_cursor(page if direction > 0 else -page)

    def resize(self, new_height: int) -> None:
        """Update the viewport height without moving the cursor."""
        self.viewport_height = max(new_height, 0)
        self.ensure_cursor_visible()

    def ensure_cursor_visible(self) -> None:
        """Re-apply the viewport invariant."""
        max_visible = self.max_visible

        if self.cursor < self.scroll_offset:
            self.scroll_offset = self.cursor
        if self.cursor >= self.scroll_offset + max_visible:
            self.scroll_offset = self.cursor - max_visible + 1

        max_scroll = max(len(self.visible) - max_visible, 0)
        self.scroll_offset = min(max(self.scroll_offset, 0), max_scroll)

    # -- drilling --------------------------------------------------------

    def drill_into(self, index: int) -> Optional[Intent]:
        """
        Interpret selecting the entry at index.

        Returns:
            LOAD intent for the parent link or a directory, LAUNCH intent
            for a file, None if index is out of range or there's nowhere
            to go.
        """
        if not 0 <= index < len(self.visible):
            return None

        entry = self.visible[index]
        if entry.is_parent_link:
            return self.drill_up()
        if entry.is_directory:
            return Intent(kind=IntentKind.LOAD, path=entry.path)
        return Intent(kind=IntentKind.LAUNCH, path=entry.path)

    def select(self) -> Optional[Intent]:
        """Drill into the entry under the cursor."""
        return self.drill_into(self.cursor)

    def drill_up(self) -> Optional[Intent]:
        """Go to the parent of the active root, if there is one."""
        if self.root is None:
            return None
        parent = parent_path(self.root.path)
        if parent is None:
            return None
        return Intent(kind=IntentKind.LOAD, path=parent)

    def apply_load_result(self, new_root: Entry) -> None:
        """Make new_root the active root and rebuild the listing."""
        self.root = new_root
        self.visible = []

        parent = parent_path(new_root.path)
        if parent is not None:
            self.visible.append(
                Entry(name="..", path=parent, is_directory=True, is_parent_link=True)
            )

        self.visible.extend(
            child for child in new_root.children if child.is_directory or self.show_files
        )

        self.cursor = 0
        self.scroll_offset = 0
        self.ensure_cursor_visible()
