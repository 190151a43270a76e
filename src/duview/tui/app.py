"""Main TUI application for duview."""

import logging
import os
from functools import partial
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.worker import get_current_worker

from duview.launcher import launch_file
from duview.loader import LoadController
from duview.models import Intent, IntentKind, LoadOutcome, LoadState
from duview.navigation import NavigationState
from duview.scanner import Scanner
from duview.tui.widgets import ListingView

logger = logging.getLogger(__name__)


class DuviewApp(App):
    """Interactive directory size browser."""

    TITLE = "duview"

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False),
        Binding("up,k", "move_up", "Up", show=False),
        Binding("down,j", "move_down", "Down", show=False),
        Binding("home,g", "move_home", "Top", show=False),
        Binding("end,G", "move_end", "Bottom", show=False),
        Binding("pageup", "page_up", "Page Up", show=False),
        Binding("pagedown", "page_down", "Page Down", show=False),
        Binding("enter", "select_entry", "Open"),
        Binding("backspace,h,left", "go_back", "Back"),
    ]

    def __init__(self, start_path: str, show_files: bool = True, scanner: Optional[Scanner] = None):
        super().__init__()
        self.start_path = start_path
        self.navigation = NavigationState(show_files=show_files)
        self.loader = LoadController(scanner or Scanner(), self.navigation)

    def compose(self) -> ComposeResult:
        yield ListingView(self.navigation, self.loader, id="listing")

    def on_mount(self) -> None:
        """Start the first scan as soon as the app is up."""
        self.set_interval(0.1, self._tick_spinner)
        self.load(self.start_path)

    # -- loading ---------------------------------------------------------

    def load(self, path: str) -> None:
        """Scan path in a worker thread and show it when done."""
        if not self.loader.request(path):
            return
        logger.debug("Loading %s", path)
        self._refresh_listing()
        self.run_worker(
            partial(self._scan_in_thread, path),
            name=f"scan {path}",
            group="scan",
            thread=True,
            exit_on_error=False,
        )

    def _scan_in_thread(self, path: str) -> None:
        outcome = self.loader.execute(path)
        if get_current_worker().is_cancelled:
            return
        self.call_from_thread(self._finish_load, outcome)

    def _finish_load(self, outcome: LoadOutcome) -> None:
        self.loader.resolve(outcome)
        self._refresh_listing()

    def _tick_spinner(self) -> None:
        if self.loader.state == LoadState.LOADING:
            self.query_one(ListingView).spinner_frame += 1

    def _refresh_listing(self) -> None:
        self.query_one(ListingView).refresh()

    def dispatch_intent(self, intent: Optional[Intent]) -> None:
        """Carry out what a drill operation asked for."""
        if intent is None:
            return

        if intent.kind == IntentKind.LOAD:
            self.load(intent.path)
            return

        result = launch_file(intent.path)
        if result.success:
            self.notify(f"Opened {os.path.basename(result.path)}", timeout=3)
        else:
            self.notify(result.error or "Launch failed", severity="error", timeout=5)

    # -- actions ---------------------------------------------------------

    def _navigate(self, motion, *args) -> None:
        if self.loader.state != LoadState.IDLE:
            return
        motion(*args)
        self._refresh_listing()

    def action_move_up(self) -> None:
        self._navigate(self.navigation.move_cursor, -1)

    def action_move_down(self) -> None:
        self._navigate(self.navigation.move_cursor, 1)

    def action_move_home(self) -> None:
        self._navigate(self.navigation.move_to_start)

    def action_move_end(self) -> None:
        self._navigate(self.navigation.move_to_end)

    def action_page_up(self) -> None:
        self._navigate(self.navigation.page_move, -1)

    def action_page_down(self) -> None:
        self._navigate(self.navigation.page_move, 1)

    def action_select_entry(self) -> None:
        """Open the entry under the cursor, or retry after an error."""
        if not self.loader.accepts_input:
            return
        if self.loader.state == LoadState.ERROR:
            self.dispatch_intent(self.loader.retry_intent())
        else:
            self.dispatch_intent(self.navigation.select())

    def action_go_back(self) -> None:
        """Go to the parent directory."""
        if not self.loader.accepts_input:
            return
        if self.loader.state == LoadState.ERROR:
            self.dispatch_intent(self.loader.retry_intent(back=True))
        else:
            self.dispatch_intent(self.navigation.drill_up())


def run_tui(start_path: str, show_files: bool = True) -> None:
    """Run the interactive TUI.

    Args:
        start_path: Directory to open first
        show_files: If False, only directories are listed
    """
    app = DuviewApp(start_path=start_path, show_files=show_files)
    app.run()
