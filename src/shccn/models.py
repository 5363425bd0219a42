"""Data models for shccn"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class SourceFile:
    """A script's name and its physical lines, without line terminators."""

    name: str
    lines: Tuple[str, ...]

    @classmethod
    def from_lines(cls, name: str, lines) -> "SourceFile":
        return cls(name=name, lines=tuple(lines))


@dataclass
class FileMetrics:
    """Whole-file line counts.

    ``code_count`` is whatever is neither blank nor comment, so the four
    counts always add up.
    """

    name: str
    line_count: int
    code_count: int
    comment_count: int
    blank_count: int
    function_count: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "lines": self.line_count,
            "code": self.code_count,
            "comments": self.comment_count,
            "blanks": self.blank_count,
            "functions": self.function_count,
        }


@dataclass
class FunctionMetrics:
    """Size and complexity of one extracted function (or ``BARE_CODE``)."""

    name: str
    code_line_count: int
    ccn: int

    def qualified_name(self, script: str) -> str:
        return f"{self.name}@{script}"


@dataclass
class FileReport:
    """Everything computed for one script."""

    path: str
    file: FileMetrics
    functions: List[FunctionMetrics] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.file.name

    @property
    def max_ccn(self) -> int:
        return max((fn.ccn for fn in self.functions), default=0)

    def to_dict(self) -> Dict[str, object]:
        return {
            "path": self.path,
            **self.file.to_dict(),
            "function_metrics": [
                {"name": fn.name, "code": fn.code_line_count, "ccn": fn.ccn}
                for fn in self.functions
            ],
        }


@dataclass
class AnalysisResult:
    """Reports for every file that loaded, plus load failures by path."""

    reports: List[FileReport] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def max_ccn(self) -> int:
        return max((r.max_ccn for r in self.reports), default=0)

    def function_rows(self, sort_by: str = "name") -> List[Tuple[FileReport, FunctionMetrics]]:
        """Flatten to ``(report, function)`` pairs for renderers.

        ``name`` keeps file order; ``ccn`` and ``code`` sort descending.
        """
        rows = [(r, fn) for r in self.reports for fn in r.functions]
        if sort_by == "ccn":
            rows.sort(key=lambda row: row[1].ccn, reverse=True)
        elif sort_by == "code":
            rows.sort(key=lambda row: row[1].code_line_count, reverse=True)
        return rows
