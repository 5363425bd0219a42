"""
shccn - Shell script metrics

Line counts (code, comments, blanks), function boundaries and a heuristic
cyclomatic complexity number for every function in a shell script.
"""

__version__ = "0.1.0"

from .api import analyze, analyze_file
from .file_ops import load_source_file
from .metrics import MetricsAggregator, analyze_lines
from .models import AnalysisResult, FileMetrics, FileReport, FunctionMetrics, SourceFile

__all__ = [
    "analyze",  # Main entry point
    "analyze_file",
    "analyze_lines",
    "load_source_file",
    "MetricsAggregator",
    "SourceFile",
    "FileMetrics",
    "FunctionMetrics",
    "FileReport",
    "AnalysisResult",
]
