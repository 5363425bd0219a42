"""Base formatter interface for shccn output rendering."""

from abc import ABC, abstractmethod

from ..models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult, sort_by: str = "name") -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, result: AnalysisResult, sort_by: str = "name") -> str:
        """Return formatted string representation of the result."""
