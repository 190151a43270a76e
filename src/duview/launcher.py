"""Open or run a selected file."""

import logging
import os
import subprocess
import sys
import threading

from duview.models import LaunchResult

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """A file could not be opened or executed."""


def is_executable(path: str) -> bool:
    """Whether path is a regular file with any execute bit set."""
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _spawn(command: list[str], cwd: str | None) -> None:
    """Start command detached from the terminal and reap it when it exits."""
    process = subprocess.Popen(
        command,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
    threading.Thread(target=process.wait, name=f"reap {command[0]}", daemon=True).start()


def open_path(path: str) -> None:
    """
    Start the program for path without waiting for it.

    Executable files are run directly from their own directory, anything
    else goes to the platform's default opener.

    Raises:
        LaunchError: If the file is missing or the process can't start
    """
    if not os.path.exists(path):
        raise LaunchError(f"No such file: {path}")

    cwd = os.path.dirname(path) or None

    try:
        if is_executable(path):
            _spawn([path], cwd)
        elif sys.platform == "win32":
            os.startfile(path)
        elif sys.platform == "darwin":
            _spawn(["open", path], cwd)
        else:
            _spawn(["xdg-open", path], cwd)
    except OSError as e:
        raise LaunchError(f"Failed to open {path}: {e}") from e


def launch_file(path: str) -> LaunchResult:
    """Launch path and report the outcome instead of raising."""
    try:
        open_path(path)
    except LaunchError as e:
        logger.warning("%s", e)
        return LaunchResult(path=path, success=False, error=str(e))

    logger.info("Launched %s", path)
    return LaunchResult(path=path, success=True)
