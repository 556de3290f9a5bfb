"""Tests for command line parsing and headless mode."""

import io
import json
import logging

import pytest

from textdiff import main as entry
from textdiff.core.models import ExportFormat
from textdiff.services.settings import Theme

# Captured before the autouse fixture replaces it
REAL_SETUP_LOGGING = entry.setup_logging


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the entry point from replacing pytest's log and fault handlers."""
    monkeypatch.setattr(entry, "setup_logging", lambda *a, **kw: logging.getLogger())
    monkeypatch.setattr(entry.faulthandler, "enable", lambda *a, **kw: None)


class TestParseArguments:
    def test_no_arguments_opens_window(self):
        args = entry.parse_arguments([])

        assert args.left_path is None
        assert not args.headless
        assert args.log_level == "WARNING"

    def test_output_makes_headless(self):
        args = entry.parse_arguments(["a.txt", "b.txt", "-o", "out.csv"])

        assert args.headless
        assert args.output_path == "out.csv"
        assert args.export_format is None

    def test_explicit_format(self):
        args = entry.parse_arguments(["a", "b", "-o", "out", "--format", "json"])
        assert args.export_format == ExportFormat.JSON

    def test_theme_and_verbosity(self):
        args = entry.parse_arguments(["--theme", "dark", "-v"])

        assert args.theme == Theme.DARK
        assert args.log_level == "DEBUG"

    def test_headless_requires_two_files(self):
        with pytest.raises(SystemExit) as excinfo:
            entry.parse_arguments(["a.txt", "--no-gui"])
        assert excinfo.value.code == 2


class TestRunHeadless:
    def test_prints_differences(self, write_file):
        left = write_file("a.txt", "x\ny\nx\n")
        right = write_file("b.txt", "x\n")
        out = io.StringIO()

        args = entry.parse_arguments([str(left), str(right), "--no-gui"])
        code = entry.run_headless(args, out=out, err=io.StringIO())

        assert code == 0
        assert out.getvalue() == "y\n"

    def test_exports_with_inferred_format(self, write_file, tmp_path):
        left = write_file("a.txt", "a\nshared\n")
        right = write_file("b.txt", "shared\nb\n")
        destination = tmp_path / "diff.json"

        args = entry.parse_arguments([str(left), str(right), "-o", str(destination)])
        code = entry.run_headless(args, out=io.StringIO(), err=io.StringIO())

        assert code == 0
        assert json.loads(destination.read_text()) == ["a", "b"]

    def test_explicit_format_overrides_extension(self, write_file, tmp_path):
        left = write_file("a.txt", "a\n")
        right = write_file("b.txt", "")
        destination = tmp_path / "diff.txt"

        args = entry.parse_arguments([str(left), str(right), "-o", str(destination), "-f", "csv"])
        entry.run_headless(args, out=io.StringIO(), err=io.StringIO())

        assert destination.read_text() == '"a"\n'

    def test_read_error(self, write_file, tmp_path):
        left = write_file("a.txt", "a\n")
        err = io.StringIO()

        args = entry.parse_arguments([str(left), str(tmp_path / "missing.txt"), "--no-gui"])
        code = entry.run_headless(args, out=io.StringIO(), err=err)

        assert code == 1
        assert err.getvalue().startswith("Error while reading file!")

    def test_export_error(self, write_file, tmp_path):
        left = write_file("a.txt", "a\n")
        right = write_file("b.txt", "b\n")
        err = io.StringIO()

        args = entry.parse_arguments([str(left), str(right), "-o", str(tmp_path / "no" / "out.txt")])
        code = entry.run_headless(args, out=io.StringIO(), err=err)

        assert code == 1
        assert err.getvalue().startswith("Error while exporting!")


def test_main_headless(write_file, capsys):
    left = write_file("a.txt", "1\n2\n")
    right = write_file("b.txt", "2\n3\n3\n")

    assert entry.main([str(left), str(right), "--no-gui"]) == 0
    assert capsys.readouterr().out == "1\n3\n"


def test_setup_logging_formats_records(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = io.StringIO()
    log_file = tmp_path / "logs" / "run.log"

    try:
        REAL_SETUP_LOGGING("DEBUG", log_file, stream)
        logging.getLogger("textdiff.test").warning("careful")
        for handler in root.handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert "| WARNING  | textdiff.test | careful" in stream.getvalue()
    assert "\033[" not in log_file.read_text(encoding="utf-8")
    assert "careful" in log_file.read_text(encoding="utf-8")


class TerminalStream(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestLogColors:
    def test_terminal_stream_gets_colors(self, restore_root_logger):
        stream = TerminalStream()

        REAL_SETUP_LOGGING("INFO", stream=stream)
        logging.getLogger("textdiff.test").warning("careful")

        assert stream.getvalue().startswith(entry.LogFormatter.COLORS[logging.WARNING])

    def test_piped_stream_gets_plain_text(self, restore_root_logger, monkeypatch):
        # Colors follow the handler's stream, not whichever of stdout/stderr is a terminal
        monkeypatch.setattr(entry.sys, "stdout", TerminalStream())
        stream = io.StringIO()

        REAL_SETUP_LOGGING("INFO", stream=stream)
        logging.getLogger("textdiff.test").warning("careful")

        assert "\033[" not in stream.getvalue()
        assert "careful" in stream.getvalue()


class TestThemes:
    def test_both_themes_fill_the_same_slots(self):
        assert set(entry.THEME_COLORS) == {Theme.DARK, Theme.LIGHT}
        assert entry.THEME_COLORS[Theme.DARK].keys() == entry.THEME_COLORS[Theme.LIGHT].keys()

    def test_dark_text_is_lighter_than_its_background(self):
        dark = entry.THEME_COLORS[Theme.DARK]
        light = entry.THEME_COLORS[Theme.LIGHT]

        assert sum(dark["text"]) > sum(dark["base"])
        assert sum(light["text"]) < sum(light["base"])

    def test_build_palette(self, qcore_app):
        qtgui = pytest.importorskip("PyQt6.QtGui")
        QColor, QPalette = qtgui.QColor, qtgui.QPalette

        palette = entry.build_palette(entry.THEME_COLORS[Theme.DARK])

        assert palette.color(QPalette.ColorRole.Base) == QColor(35, 35, 35)
        assert palette.color(QPalette.ColorRole.Button) == QColor(45, 45, 45)
        assert palette.color(QPalette.ColorRole.HighlightedText) == QColor(0, 0, 0)
        assert palette.color(
            QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text
        ) == QColor(127, 127, 127)
