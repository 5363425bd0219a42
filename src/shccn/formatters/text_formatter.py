"""Plain-text formatter: fixed-width summary and function tables."""

from ..models import AnalysisResult
from .base import BaseFormatter

SEPARATOR = "-" * 80

SUMMARY_ROW = "%-20s %10s %10s %10s %10s %10s\n"
FUNCTION_ROW = "%-30s %20s %20s\n"


def summary_header() -> str:
    return (
        f"{SEPARATOR}\n"
        + SUMMARY_ROW % ("Name", "Lines", "Code", "Comments", "Blanks", "Functions")
        + f"{SEPARATOR}\n"
    )


def summary_row(name: str, lines: int, code: int, comments: int, blanks: int, functions: int) -> str:
    return "%-20s %10d %10d %10d %10d %10d\n" % (name, lines, code, comments, blanks, functions)


def function_header() -> str:
    return f"{SEPARATOR}\n" + FUNCTION_ROW % ("Name", "Code", "CCN") + f"{SEPARATOR}\n"


def function_row(script: str, name: str, code: int, ccn: int) -> str:
    return "%-30s %20d %20d\n" % (f"{name}@{script}", code, ccn)


def footer() -> str:
    return f"{SEPARATOR}\n"


class TextFormatter(BaseFormatter):
    """Summary block followed by the per-function block."""

    def render(self, result: AnalysisResult, sort_by: str = "name") -> None:
        print(self.format(result, sort_by), end="")

    def format(self, result: AnalysisResult, sort_by: str = "name") -> str:
        parts = [summary_header()]
        for report in result.reports:
            m = report.file
            parts.append(
                summary_row(
                    m.name, m.line_count, m.code_count, m.comment_count,
                    m.blank_count, m.function_count,
                )
            )
        parts.append(footer())

        parts.append(function_header())
        for report, fn in result.function_rows(sort_by):
            parts.append(function_row(report.name, fn.name, fn.code_line_count, fn.ccn))
        parts.append(footer())
        return "".join(parts)
