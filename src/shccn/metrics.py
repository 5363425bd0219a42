"""Whole-file and per-function metrics for a single script."""

from typing import Dict, Iterable, List, Optional

from .models import FileMetrics, FileReport, FunctionMetrics, SourceFile
from .scanning import (
    code_lines,
    compute_ccn,
    extract_functions,
    is_blank,
    is_comment,
    is_function_start,
)


class MetricsAggregator:
    """Composes the line classifier, extractor and CCN analyzer for one file."""

    def __init__(self, source: SourceFile):
        self.source = source

    @property
    def line_count(self) -> int:
        return len(self.source.lines)

    @property
    def blank_count(self) -> int:
        return sum(1 for line in self.source.lines if is_blank(line))

    @property
    def comment_count(self) -> int:
        return sum(1 for i, line in enumerate(self.source.lines) if is_comment(line, i))

    @property
    def code_count(self) -> int:
        return self.line_count - self.blank_count - self.comment_count

    @property
    def function_count(self) -> int:
        # Raw lines: a commented-out declaration still counts.
        return sum(1 for line in self.source.lines if is_function_start(line))

    def file_metrics(self) -> FileMetrics:
        return FileMetrics(
            name=self.source.name,
            line_count=self.line_count,
            code_count=self.code_count,
            comment_count=self.comment_count,
            blank_count=self.blank_count,
            function_count=self.function_count,
        )

    def functions(self) -> Dict[str, List[str]]:
        return extract_functions(code_lines(self.source.lines))

    def function_metrics(self) -> List[FunctionMetrics]:
        return [
            FunctionMetrics(name=name, code_line_count=len(body), ccn=compute_ccn(body))
            for name, body in self.functions().items()
        ]

    def report(self, path: Optional[str] = None) -> FileReport:
        return FileReport(
            path=path if path is not None else self.source.name,
            file=self.file_metrics(),
            functions=self.function_metrics(),
        )


def analyze_lines(name: str, lines: Iterable[str], path: Optional[str] = None) -> FileReport:
    """Build a report for lines already held in memory."""
    return MetricsAggregator(SourceFile.from_lines(name, lines)).report(path)
