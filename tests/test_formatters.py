"""Tests for the formatters package."""

import csv
import io
import json

import pytest
from rich.console import Console

from shccn.formatters import (
    CsvFormatter,
    JsonFormatter,
    RichFormatter,
    TextFormatter,
    get_formatter,
)
from shccn.metrics import analyze_lines
from shccn.models import AnalysisResult, FileMetrics, FileReport, FunctionMetrics

SEP = "-" * 80


def _make_result():
    """Two files, three function rows, one load error."""
    first = FileReport(
        path="bin/a.sh",
        file=FileMetrics("a.sh", 10, 7, 2, 1, 1),
        functions=[FunctionMetrics("foo", 4, 2)],
    )
    second = FileReport(
        path="bin/b.sh",
        file=FileMetrics("b.sh", 30, 25, 3, 2, 1),
        functions=[FunctionMetrics("BARE_CODE", 5, 1), FunctionMetrics("bar", 20, 9)],
    )
    return AnalysisResult(reports=[first, second], errors={"bin/c.sh": "No such file"})


class TestGetFormatter:
    def test_known_formatters(self):
        for name in ("text", "rich", "json", "csv"):
            assert get_formatter(name) is not None

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestTextFormatter:
    def test_exact_layout(self):
        output = TextFormatter().format(_make_result())
        lines = output.split("\n")

        assert lines[0] == SEP
        assert lines[1] == (
            "Name" + " " * 17 + "     Lines       Code   Comments     Blanks  Functions"
        )
        assert lines[2] == SEP
        assert lines[3] == "a.sh" + " " * 25 + "10" + (" " * 10 + "7") + (" " * 10 + "2") + (
            " " * 10 + "1"
        ) * 2
        assert lines[5] == SEP
        assert lines[6] == SEP
        assert lines[7] == "Name" + " " * 27 + " " * 16 + "Code" + " " * 18 + "CCN"
        assert lines[8] == SEP
        assert lines[9] == "foo@a.sh" + " " * 42 + "4" + " " * 20 + "2"
        assert lines[12] == SEP
        assert output.endswith(SEP + "\n")

    def test_row_widths(self):
        lines = TextFormatter().format(_make_result()).split("\n")
        assert len(lines[3]) == 20 + 5 * 11
        assert len(lines[9]) == 30 + 2 * 21

    def test_sort_by_ccn(self):
        lines = TextFormatter().format(_make_result(), sort_by="ccn").split("\n")
        assert lines[9].startswith("bar@b.sh")

    def test_render_prints(self, capsys):
        TextFormatter().render(_make_result())
        assert "BARE_CODE@b.sh" in capsys.readouterr().out


class TestJsonFormatter:
    def test_valid_json(self):
        data = json.loads(JsonFormatter().format(_make_result()))
        assert [f["name"] for f in data["files"]] == ["a.sh", "b.sh"]
        assert data["files"][0]["path"] == "bin/a.sh"
        assert data["files"][1]["lines"] == 30
        assert data["functions"][2] == {"file": "b.sh", "name": "bar", "code": 20, "ccn": 9}
        assert data["errors"] == {"bin/c.sh": "No such file"}


class TestCsvFormatter:
    def test_rows(self):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(_make_result()))))
        assert rows[0] == ["file", "function", "code", "ccn"]
        assert rows[1] == ["bin/a.sh", "foo", "4", "2"]
        assert len(rows) == 4

    def test_sort_by_code(self):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(_make_result(), "code"))))
        assert [r[1] for r in rows[1:]] == ["bar", "BARE_CODE", "foo"]


class TestRichFormatter:
    def test_format_contains_rows(self):
        text = RichFormatter().format(_make_result())
        assert "foo@a.sh" in text
        assert "Functions" in text

    def test_bracketed_names_render_literally(self):
        report = analyze_lines("a.sh", ["x[/y]() {", "echo", "}", "[bold]() {", "}"])
        text = RichFormatter().format(AnalysisResult(reports=[report]))
        assert "x[/y]@a.sh" in text
        assert "[bold]@a.sh" in text

    def test_render_escapes_error_paths(self):
        console = Console(record=True, width=120, file=io.StringIO())
        result = AnalysisResult(reports=[], errors={"[red]odd.sh": "No such file"})
        RichFormatter(console=console).render(result)
        assert "[red]odd.sh: No such file" in console.export_text()
