"""Line-level shell script scanning: classification, extraction, complexity."""

from .classifier import (
    code_lines,
    function_name,
    is_blank,
    is_comment,
    is_function_start,
    strip_single_quoted,
)
from .complexity import compute_ccn
from .extractor import FunctionExtractor, extract_functions
from .patterns import BARE_CODE

__all__ = [
    "BARE_CODE",
    # Line classification
    "is_blank",
    "is_comment",
    "is_function_start",
    "strip_single_quoted",
    "function_name",
    "code_lines",
    # Function boundaries
    "FunctionExtractor",
    "extract_functions",
    # Complexity
    "compute_ccn",
]
