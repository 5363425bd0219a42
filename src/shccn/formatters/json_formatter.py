"""JSON formatter for shccn."""

import json

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the result as JSON."""

    def render(self, result: AnalysisResult, sort_by: str = "name") -> None:
        print(self.format(result, sort_by))

    def format(self, result: AnalysisResult, sort_by: str = "name") -> str:
        data = {
            "files": [dict(r.file.to_dict(), path=r.path) for r in result.reports],
            "functions": [
                {
                    "file": report.name,
                    "name": fn.name,
                    "code": fn.code_line_count,
                    "ccn": fn.ccn,
                }
                for report, fn in result.function_rows(sort_by)
            ],
            "errors": dict(result.errors),
        }
        return json.dumps(data, indent=2)
