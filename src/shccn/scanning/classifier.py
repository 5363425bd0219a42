"""Per-line predicates for shell scripts.

All functions here are pure and total: they accept any string and never
raise. They work on one physical line at a time and know nothing about
heredocs, continuations or multi-line strings.
"""

from typing import Iterable, List, Optional

from . import patterns


def is_blank(line: str) -> bool:
    """True if the line is empty once spaces are removed.

    Only U+0020 is stripped, so a line holding a tab is not blank.
    """
    return len(line.replace(" ", "")) == 0


def is_comment(line: str, line_index: Optional[int] = None) -> bool:
    """True if the line starts with ``#`` after optional whitespace.

    The first physical line (``line_index == 0``) is never a comment: a
    ``#!`` shebang counts as code.
    """
    if line_index == 0:
        return False
    return patterns.COMMENT.search(line) is not None


def strip_single_quoted(line: str) -> str:
    """Drop every ``'...'`` segment, quotes included.

    An unterminated quote drops the remainder of the line.
    """
    kept: List[str] = []
    quoted = False
    for char in line:
        if char == "'":
            quoted = not quoted
            continue
        if not quoted:
            kept.append(char)
    return "".join(kept)


def is_function_start(line: str) -> bool:
    """True if the line declares a function (``name() {``).

    Double quotes are normalised to single quotes and quoted text is
    stripped before matching, so ``echo "f() {"`` is not a declaration.
    """
    normalized = line.replace('"', "'")
    if "'" in normalized:
        normalized = strip_single_quoted(normalized)
    return patterns.FUNCTION_START.search(normalized) is not None


def function_name(line: str) -> str:
    """Derive a function name from its declaration line."""
    name = line
    for noise in patterns.FUNCTION_NAME_NOISE:
        name = name.replace(noise, "")
    return name


def code_lines(lines: Iterable[str]) -> List[str]:
    """Lines that are neither blank nor comments, in order.

    The shebang exception does not apply here: a leading ``#!`` line is
    not part of any function or of the bare code.
    """
    return [line for line in lines if not is_blank(line) and not is_comment(line)]
