"""Tests for display module."""

from io import StringIO
from unittest.mock import patch

from rich.console import Console

from duview.display import (
    MAX_NAME_LENGTH,
    display_name,
    format_error,
    format_header,
    format_loading,
    format_row,
    format_size,
    format_status,
    show_integration,
    show_listing,
    show_scan_error,
)
from duview.models import Entry


def capture_console() -> Console:
    return Console(file=StringIO(), width=120, color_system=None)


class TestFormatSize:
    def test_bytes(self):
        assert format_size(500) == "500 B"

    def test_kilobytes(self):
        assert format_size(1500) == "1.5 KB"

    def test_megabytes(self):
        assert format_size(2_500_000) == "2.5 MB"

    def test_gigabytes(self):
        assert format_size(3_000_000_000) == "3.0 GB"

    def test_terabytes(self):
        assert format_size(4_000_000_000_000) == "4.0 TB"

    def test_zero(self):
        assert format_size(0) == "0 B"


class TestDisplayName:
    def test_directory_gets_slash(self):
        assert display_name(Entry(name="src", path="/src", is_directory=True)) == "src/"

    def test_file_unchanged(self):
        assert display_name(Entry(name="a.txt", path="/a.txt")) == "a.txt"

    def test_long_name_truncated(self):
        name = "x" * 80
        result = display_name(Entry(name=name, path="/" + name))
        assert len(result) == MAX_NAME_LENGTH
        assert result.endswith("...")


class TestFormatRow:
    def test_directory_row(self):
        entry = Entry(name="src", path="/p/src", size=2500, percent=62.5, is_directory=True)
        text = format_row(entry).plain
        assert text.startswith("  ▶ src/")
        assert "2.5 KB" in text
        assert text.endswith("62.5%")

    def test_file_row(self):
        entry = Entry(name="a.txt", path="/p/a.txt", size=10, percent=1.0)
        text = format_row(entry).plain
        assert "· a.txt" in text
        assert "10 B" in text

    def test_selected_marker(self):
        entry = Entry(name="a", path="/p/a", size=1)
        assert format_row(entry, selected=True).plain.startswith("> ")
        assert format_row(entry, selected=False).plain.startswith("  ")

    def test_depth_indents(self):
        entry = Entry(name="a", path="/p/a", depth=2)
        assert format_row(entry).plain.startswith("      · a")

    def test_parent_link_has_no_size(self):
        entry = Entry(name="..", path="/p", is_directory=True, is_parent_link=True)
        text = format_row(entry).plain
        assert "../" in text
        assert "%" not in text
        assert " B" not in text

    def test_columns_aligned(self):
        short = format_row(Entry(name="a", path="/a", size=1)).plain
        long = format_row(Entry(name="a" * 40, path="/b", size=1_000_000)).plain
        assert len(short) == len(long)


class TestStatusLines:
    def test_header_right_aligned(self):
        header = format_header("/data", width=20)
        assert header.plain == " " * 15 + "/data"

    def test_header_without_width(self):
        assert format_header("/data").plain == "/data"

    def test_loading_spinner_cycles(self):
        assert format_loading("/data", 0).startswith("◐ Loading /data")
        assert format_loading("/data", 1).startswith("◓")
        assert format_loading("/data", 4).startswith("◐")

    def test_error(self):
        assert format_error("boom") == "Error: boom"

    def test_status_line(self):
        root = Entry(name="p", path="/p", size=2500, is_directory=True)
        assert format_status(root, 3).plain == "3 entries, 2.5 KB total"

    def test_status_line_directories_only(self):
        root = Entry(name="p", path="/p", size=10, is_directory=True)
        assert format_status(root, 2, show_files=False).plain == "2 directories, 10 B total"


class TestShowListing:
    def test_prints_children_and_total(self):
        root = Entry(
            name="p",
            path="/p",
            size=400,
            is_directory=True,
            children=[
                Entry(name="a", path="/p/a", size=300, percent=75.0, is_directory=True),
                Entry(name="b.txt", path="/p/b.txt", size=100, percent=25.0),
            ],
        )
        test_console = capture_console()
        with patch("duview.display.console", test_console):
            show_listing(root)

        output = test_console.file.getvalue()
        assert "a/" in output
        assert "b.txt" in output
        assert "75.0%" in output
        assert "Total:" in output
        assert "400 B" in output

    def test_scan_error(self):
        test_console = capture_console()
        with patch("duview.display.console", test_console):
            show_scan_error("/x: Permission denied")
        assert "Permission denied" in test_console.file.getvalue()

    def test_integration(self):
        test_console = capture_console()
        with patch("duview.display.console", test_console):
            show_integration("/opt/duview/bin")
        output = test_console.file.getvalue()
        assert 'export PATH="/opt/duview/bin:$PATH"' in output
        assert "~/.bashrc" in output
