"""Textual interface for duview."""

from duview.tui.app import DuviewApp, run_tui

__all__ = ["DuviewApp", "run_tui"]
