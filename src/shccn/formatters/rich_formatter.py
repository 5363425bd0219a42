"""Rich terminal formatter for shccn."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import AnalysisResult
from .base import BaseFormatter


def _ccn_style(ccn: int) -> str:
    if ccn > 20:
        return "red bold"
    elif ccn > 10:
        return "red"
    elif ccn > 5:
        return "yellow"
    else:
        return "green"


class RichFormatter(BaseFormatter):
    """Summary and function tables with CCN coloring."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult, sort_by: str = "name") -> None:
        self.console.print(self._summary_table(result))
        self.console.print(self._function_table(result, sort_by))

        if result.errors:
            self.console.print(f"[red]{len(result.errors)} file(s) could not be read:[/red]")
            for path, reason in result.errors.items():
                self.console.print(f"  [red]-[/red] {escape(path)}: {escape(reason)}")

    def format(self, result: AnalysisResult, sort_by: str = "name") -> str:
        recorder = Console(record=True, width=self.console.width, file=io.StringIO())
        recorder.print(self._summary_table(result))
        recorder.print(self._function_table(result, sort_by))
        return recorder.export_text()

    def _summary_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Files", title_style="bold cyan")
        table.add_column("Name", style="bold")
        for column in ("Lines", "Code", "Comments", "Blanks", "Functions"):
            table.add_column(column, justify="right")

        for report in result.reports:
            m = report.file
            table.add_row(
                escape(m.name),
                str(m.line_count),
                str(m.code_count),
                str(m.comment_count),
                str(m.blank_count),
                str(m.function_count),
            )
        return table

    def _function_table(self, result: AnalysisResult, sort_by: str) -> Table:
        table = Table(title="Functions", title_style="bold cyan")
        table.add_column("Name")
        table.add_column("Code", justify="right")
        table.add_column("CCN", justify="right")

        for report, fn in result.function_rows(sort_by):
            table.add_row(
                escape(fn.qualified_name(report.name)),
                str(fn.code_line_count),
                f"[{_ccn_style(fn.ccn)}]{fn.ccn}[/{_ccn_style(fn.ccn)}]",
            )
        return table

