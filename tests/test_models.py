"""Tests for the core data models."""

from pathlib import Path

import pytest

from textdiff.core.models import (
    ExportFormat,
    ExportRequest,
    FileAccessError,
    SerializationError,
    TextDiffError,
)


class TestExportFormatFromPath:
    @pytest.mark.parametrize("name, expected", [
        ("out.txt", ExportFormat.TEXT),
        ("out.csv", ExportFormat.CSV),
        ("out.json", ExportFormat.JSON),
        ("OUT.JSON", ExportFormat.JSON),
        ("report.Csv", ExportFormat.CSV),
    ])
    def test_known_extensions(self, name, expected):
        assert ExportFormat.from_path(name) == expected

    @pytest.mark.parametrize("name", ["out.bak", "out", "archive.json.gz", ".csvrc"])
    def test_unknown_extension_falls_back_to_text(self, name):
        assert ExportFormat.from_path(name) == ExportFormat.TEXT

    def test_accepts_path_objects(self):
        assert ExportFormat.from_path(Path("dir.json") / "diff.csv") == ExportFormat.CSV


class TestExportFormatFromString:
    def test_names_and_extensions(self):
        assert ExportFormat.from_string("text") == ExportFormat.TEXT
        assert ExportFormat.from_string("txt") == ExportFormat.TEXT
        assert ExportFormat.from_string("JSON") == ExportFormat.JSON
        assert ExportFormat.from_string("csv") == ExportFormat.CSV

    def test_unknown_falls_back_to_default(self):
        assert ExportFormat.from_string("yaml") == ExportFormat.default()

    def test_extension_property(self):
        assert ExportFormat.CSV.extension == ".csv"


class TestExportRequest:
    def test_infers_format(self):
        request = ExportRequest.for_destination(["a"], "diff.json")

        assert request.export_format == ExportFormat.JSON
        assert request.destination == Path("diff.json")
        assert request.lines == ("a",)

    def test_explicit_format_wins(self):
        request = ExportRequest.for_destination(["a"], "diff.json", ExportFormat.CSV)
        assert request.export_format == ExportFormat.CSV

    def test_lines_are_copied(self):
        lines = ["a"]
        request = ExportRequest.for_destination(lines, "out.txt")
        lines.append("b")
        assert request.lines == ("a",)


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(FileAccessError, TextDiffError)
        assert issubclass(SerializationError, TextDiffError)

    def test_file_access_error_carries_details(self):
        cause = FileNotFoundError(2, "No such file")
        error = FileAccessError("File not found: x", "x", cause)

        assert str(error) == "File not found: x"
        assert error.path == Path("x")
        assert error.cause is cause
