"""Smoke tests for the Textual app."""

import asyncio
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from duview.models import LaunchResult, LoadState
from duview.tui import DuviewApp
from duview.tui.widgets import ListingView


@pytest.fixture
def tree():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "project" / "big").mkdir(parents=True)
        (root / "project" / "big" / "data.bin").write_bytes(b"x" * 400)
        (root / "project" / "small").mkdir()
        (root / "project" / "small" / "data.bin").write_bytes(b"x" * 100)
        (root / "project" / "notes.txt").write_bytes(b"x" * 10)
        yield os.path.abspath(tmpdir)


async def wait_for_scan(app, pilot) -> None:
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


def test_initial_load_and_cursor_moves(tree):
    start = os.path.join(tree, "project")

    async def run():
        app = DuviewApp(start_path=start)
        async with app.run_test(size=(100, 30)) as pilot:
            await wait_for_scan(app, pilot)
            assert app.loader.state == LoadState.IDLE
            assert app.navigation.root.path == start
            assert [e.name for e in app.navigation.visible] == ["..", "big", "small", "notes.txt"]

            rendered = app.query_one(ListingView).render().plain.split("\n")
            assert rendered[0].endswith(start)
            assert rendered[-1] == "3 entries, 510 B total"

            await pilot.press("down")
            await pilot.press("j")
            assert app.navigation.cursor == 2

            await pilot.press("end")
            assert app.navigation.cursor == 3
            await pilot.press("home")
            assert app.navigation.cursor == 0

    asyncio.run(run())


def test_drill_down_and_back(tree):
    start = os.path.join(tree, "project")

    async def run():
        app = DuviewApp(start_path=start, show_files=False)
        async with app.run_test(size=(100, 30)) as pilot:
            await wait_for_scan(app, pilot)
            assert [e.name for e in app.navigation.visible] == ["..", "big", "small"]

            await pilot.press("down")
            await pilot.press("enter")
            await wait_for_scan(app, pilot)
            assert app.navigation.root.path == os.path.join(start, "big")
            assert app.navigation.cursor == 0

            await pilot.press("backspace")
            await wait_for_scan(app, pilot)
            assert app.navigation.root.path == start

    asyncio.run(run())


def test_error_state_and_retry(tree):
    missing = os.path.join(tree, "missing")

    async def run():
        app = DuviewApp(start_path=missing)
        async with app.run_test(size=(100, 30)) as pilot:
            await wait_for_scan(app, pilot)
            assert app.loader.state == LoadState.ERROR
            assert app.loader.failed_path == missing

            await pilot.press("down")
            assert app.loader.state == LoadState.ERROR

            await pilot.press("backspace")
            await wait_for_scan(app, pilot)
            assert app.loader.state == LoadState.IDLE
            assert app.navigation.root.path == tree

    asyncio.run(run())


def test_enter_on_file_launches(tree):
    start = os.path.join(tree, "project")

    async def run():
        app = DuviewApp(start_path=start)
        async with app.run_test(size=(100, 30)) as pilot:
            await wait_for_scan(app, pilot)
            with patch(
                "duview.tui.app.launch_file",
                return_value=LaunchResult(path=os.path.join(start, "notes.txt")),
            ) as mock_launch:
                await pilot.press("end")
                await pilot.press("enter")
                await pilot.pause()
            mock_launch.assert_called_once_with(os.path.join(start, "notes.txt"))
            assert app.loader.state == LoadState.IDLE
            assert app.navigation.root.path == start

    asyncio.run(run())
