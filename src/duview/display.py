"""Rich terminal display for duview."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from duview.models import Entry

console = Console()

SPINNER_FRAMES = ("◐", "◓", "◑", "◒")

MAX_NAME_LENGTH = 50
NAME_WIDTH = 52

DIR_STYLE = "bold color(39)"
FILE_STYLE = "color(252)"
SIZE_STYLE = "color(248)"
PERCENT_STYLE = "color(214)"
SELECTED_STYLE = "on color(240)"
HEADER_STYLE = "color(226) on color(235)"


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable string (decimal units)."""
    if size_bytes >= 1000**4:
        return f"{size_bytes / (1000**4):.1f} TB"
    elif size_bytes >= 1000**3:
        return f"{size_bytes / (1000**3):.1f} GB"
    elif size_bytes >= 1000**2:
        return f"{size_bytes / (1000**2):.1f} MB"
    elif size_bytes >= 1000:
        return f"{size_bytes / 1000:.1f} KB"
    else:
        return f"{size_bytes} B"


def display_name(entry: Entry) -> str:
    """Name truncated for the listing, with a trailing / for directories."""
    name = entry.name
    if len(name) > MAX_NAME_LENGTH:
        name = name[: MAX_NAME_LENGTH - 3] + "..."
    if entry.is_directory:
        name += "/"
    return name


def format_row(entry: Entry, selected: bool = False) -> Text:
    """Render one listing line."""
    line = Text()
    line.append("> " if selected else "  ")
    line.append("  " * entry.depth)
    line.append("▶ " if entry.is_directory else "· ")
    line.append(
        display_name(entry).ljust(NAME_WIDTH),
        style=DIR_STYLE if entry.is_directory else FILE_STYLE,
    )

    if entry.is_parent_link:
        line.append(" " * 17)
    else:
        line.append(f"{format_size(entry.size):>10}", style=SIZE_STYLE)
        line.append(f"{entry.percent:7.1f}%", style=PERCENT_STYLE)

    if selected:
        line.stylize(SELECTED_STYLE)
    return line


def format_header(path: str, width: int = 0) -> Text:
    """Header line showing the active root, right aligned."""
    header = Text(path.rjust(width) if width else path, style=HEADER_STYLE)
    return header


def format_status(root: Entry, count: int, show_files: bool = True) -> Text:
    """Status line under the listing: entry count and total size."""
    label = "entries" if show_files else "directories"
    return Text(f"{count} {label}, {format_size(root.size)} total", style=SIZE_STYLE)


def format_loading(path: str, frame: int = 0) -> str:
    """Spinner line shown while a scan is in flight."""
    spinner = SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]
    return f"{spinner} Loading {path}..."


def format_error(message: str) -> str:
    """Full-screen error text."""
    return f"Error: {message}"


def show_listing(root: Entry) -> None:
    """Print a scanned directory as a table."""
    table = Table(title=root.path, show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("%", justify="right")

    for child in root.children:
        style = DIR_STYLE if child.is_directory else FILE_STYLE
        table.add_row(
            Text(display_name(child), style=style),
            child.size_human,
            f"{child.percent:.1f}%",
        )

    console.print(table)
    console.print(f"[bold]Total:[/bold] {root.size_human}")


def show_scan_error(message: str) -> None:
    """Display a scan failure."""
    console.print(f"[red]Error scanning directory: {message}[/red]")


def show_integration(bin_dir: str) -> None:
    """Explain how to put duview on PATH."""
    console.print("To add this application to your PATH, run the following command:\n")
    console.print(f'export PATH="{bin_dir}:$PATH"\n', markup=False, highlight=False)
    console.print("To make this permanent, add the above line to your shell profile:")
    console.print("  ~/.bashrc (for bash)")
    console.print("  ~/.zshrc (for zsh)")
    console.print("  ~/.profile (for general use)\n")
    console.print("Example:")
    console.print(
        f"echo 'export PATH=\"{bin_dir}:$PATH\"' >> ~/.bashrc", markup=False, highlight=False
    )
