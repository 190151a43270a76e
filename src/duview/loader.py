"""Request/response state machine between navigation and scanning."""

import logging
from typing import Optional

from duview.models import Intent, IntentKind, LoadOutcome, LoadState
from duview.navigation import NavigationState, parent_path
from duview.scanner import ScanError, Scanner

logger = logging.getLogger(__name__)


class LoadController:
    """
    Tracks the single in-flight scan request.

    IDLE --request--> LOADING --resolve(success)--> IDLE
                              --resolve(failure)--> ERROR --request--> LOADING

    request() and resolve() must be called from the UI thread. execute()
    does the actual scan and is meant to run in a worker thread; it only
    touches the scanner's size cache.
    """

    def __init__(self, scanner: Scanner, navigation: NavigationState):
        self.scanner = scanner
        self.navigation = navigation
        self.state = LoadState.IDLE
        self.pending_path: Optional[str] = None
        self.error: Optional[str] = None
        self.failed_path: Optional[str] = None

    @property
    def accepts_input(self) -> bool:
        """Navigation input is ignored while a scan is in flight."""
        return self.state != LoadState.LOADING

    def request(self, path: str) -> bool:
        """
        Start loading path.

        Returns:
            False if a request is already in flight (nothing is queued)
        """
        if self.state == LoadState.LOADING:
            logger.debug("Ignoring request for %s, still loading %s", path, self.pending_path)
            return False

        self.state = LoadState.LOADING
        self.pending_path = path
        self.error = None
        self.failed_path = None
        return True

    def execute(self, path: str) -> LoadOutcome:
        """Scan path and wrap the result. Any error becomes a failed outcome."""
        try:
            entry = self.scanner.scan(path, show_files=self.navigation.show_files)
        except ScanError as e:
            return LoadOutcome(path=path, error=str(e))
        except Exception as e:
            # Every request must resolve, even on a bug in the scan
            logger.exception("Unexpected error scanning %s", path)
            return LoadOutcome(path=path, error=f"{path}: {e}")
        return LoadOutcome(path=path, entry=entry)

    def resolve(self, outcome: LoadOutcome) -> None:
        """Apply the outcome of the in-flight request."""
        if self.state != LoadState.LOADING:
            raise RuntimeError(f"No request in flight (state: {self.state.value})")

        self.pending_path = None

        if outcome.success:
            self.navigation.apply_load_result(outcome.entry)
            self.state = LoadState.IDLE
        else:
            logger.warning("Failed to load %s: %s", outcome.path, outcome.error)
            self.error = outcome.error
            self.failed_path = outcome.path
            self.state = LoadState.ERROR

    def retry_intent(self, back: bool = False) -> Optional[Intent]:
        """
        Fresh request to make from the error state.

        Args:
            back: Go to the failed path's parent instead of retrying it
        """
        if self.state != LoadState.ERROR or self.failed_path is None:
            return None
        if not back:
            return Intent(kind=IntentKind.LOAD, path=self.failed_path)
        parent = parent_path(self.failed_path)
        if parent is None:
            return None
        return Intent(kind=IntentKind.LOAD, path=parent)

    def load_now(self, path: str) -> LoadOutcome:
        """Request, execute and resolve in one go, on the calling thread."""
        if not self.request(path):
            raise RuntimeError(f"Already loading {self.pending_path}")
        outcome = self.execute(path)
        self.resolve(outcome)
        return outcome
