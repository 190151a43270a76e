"""CLI interface for duview."""

import os
import sys
from typing import Optional

import typer

from duview import __version__
from duview.config import configure_logging, get_settings
from duview.display import console, show_integration, show_listing, show_scan_error
from duview.loader import LoadController
from duview.navigation import NavigationState
from duview.scanner import Scanner

# Create Typer app
app = typer.Typer(
    name="duview",
    help="Browse directories by size, largest first",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"duview version {__version__}")
        raise typer.Exit()


def resolve_show_files(files: Optional[bool]) -> bool:
    """Command-line flag wins over USAGE_SHOW_FILES."""
    if files is not None:
        return files
    return get_settings().show_files


def _run_browser(path: Optional[str], files: Optional[bool]) -> None:
    configure_logging(get_settings(), interactive=True)

    start_path = os.path.abspath(path or os.getcwd())
    if not os.path.exists(start_path):
        show_scan_error(f"{start_path}: no such file or directory")
        raise typer.Exit(1)

    from duview.tui import run_tui

    run_tui(start_path=start_path, show_files=resolve_show_files(files))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """duview - interactive directory size browser."""
    # If no command specified, browse the current directory
    if ctx.invoked_subcommand is None:
        _run_browser(None, None)


@app.command()
def browse(
    path: Optional[str] = typer.Argument(None, help="Directory to open (default: current)"),
    files: Optional[bool] = typer.Option(
        None, "--files/--no-files", help="Include files in the listing"
    ),
) -> None:
    """Browse a directory interactively."""
    _run_browser(path, files)


@app.command(name="list")
def list_directory(
    path: Optional[str] = typer.Argument(None, help="Directory to list (default: current)"),
    files: Optional[bool] = typer.Option(
        None, "--files/--no-files", help="Include files in the listing"
    ),
) -> None:
    """Print one level of a directory, largest first."""
    configure_logging(get_settings())

    controller = LoadController(Scanner(), NavigationState(show_files=resolve_show_files(files)))
    outcome = controller.load_now(os.path.abspath(path or os.getcwd()))

    if not outcome.success:
        show_scan_error(outcome.error or "unknown error")
        raise typer.Exit(1)

    show_listing(outcome.entry)


@app.command()
def integrate() -> None:
    """Show how to add duview to your PATH."""
    bin_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    show_integration(bin_dir)


if __name__ == "__main__":
    app()
