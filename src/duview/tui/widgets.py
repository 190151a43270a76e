"""Custom widgets for the duview TUI."""

from rich.text import Text
from textual import events
from textual.reactive import reactive
from textual.widget import Widget

from duview.display import (
    format_error,
    format_header,
    format_loading,
    format_row,
    format_status,
)
from duview.loader import LoadController
from duview.models import LoadState
from duview.navigation import NavigationState


class ListingView(Widget):
    """Header line plus the rows of the navigation window."""

    spinner_frame: reactive[int] = reactive(0)

    def __init__(self, navigation: NavigationState, loader: LoadController, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.navigation = navigation
        self.loader = loader

    def on_resize(self, event: events.Resize) -> None:
        """Keep the navigation viewport in sync with the widget height."""
        self.navigation.resize(event.size.height)
        self.refresh()

    def render(self) -> Text:
        """Render the current state."""
        if self.loader.state == LoadState.LOADING:
            return Text(format_loading(self.loader.pending_path or "", self.spinner_frame))

        if self.loader.state == LoadState.ERROR:
            return Text(format_error(self.loader.error or "unknown error"), style="red")

        nav = self.navigation
        if nav.root is None:
            return Text("")

        lines = [format_header(nav.root.path, self.size.width)]
        window = nav.window()
        for index, entry in window:
            lines.append(format_row(entry, selected=index == nav.cursor))

        # Keep the status line on the bottom row
        lines.extend(Text("") for _ in range(nav.max_visible - len(window)))
        count = sum(1 for e in nav.visible if not e.is_parent_link)
        lines.append(format_status(nav.root, count, nav.show_files))
        return Text("\n").join(lines)
