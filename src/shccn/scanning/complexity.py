"""Heuristic cyclomatic complexity for shell function bodies."""

from typing import Iterable

from . import patterns


def keyword_branches(line: str) -> int:
    """1 if the line holds a branching keyword outside quotes, else 0.

    A line counts at most once however many keywords it holds. A keyword
    preceded by a quote anywhere on the line is treated as string content.
    """
    if patterns.BRANCH_KEYWORD.search(line) is None:
        return 0
    if patterns.QUOTED_KEYWORD.search(line) is not None:
        return 0
    return 1


def condition_branches(line: str) -> int:
    """Number of space-separated tokens holding ``&&`` or ``||``."""
    return sum(1 for token in line.split(" ") if patterns.CONDITION.search(token))


def compute_ccn(body_lines: Iterable[str]) -> int:
    """CCN of a function body: one baseline path plus every branch.

    Examples:
        >>> compute_ccn(["[ $a ] && [ $b ] || [ $c ]"])
        3
        >>> compute_ccn([])
        1
    """
    ccn = 1
    for line in body_lines:
        ccn += keyword_branches(line)
        ccn += condition_branches(line)
    return ccn
