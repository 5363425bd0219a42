"""CSV formatter for shccn."""

import csv
import io

from ..models import AnalysisResult
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """One row per function."""

    def render(self, result: AnalysisResult, sort_by: str = "name") -> None:
        print(self.format(result, sort_by), end="")

    def format(self, result: AnalysisResult, sort_by: str = "name") -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["file", "function", "code", "ccn"])
        for report, fn in result.function_rows(sort_by):
            writer.writerow([report.path, fn.name, fn.code_line_count, fn.ccn])
        return output.getvalue()
