"""Exception hierarchy for shccn."""

from .analysis import AnalysisError, FileAccessError
from .base import ShccnError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "ShccnError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidConfigError",
]
