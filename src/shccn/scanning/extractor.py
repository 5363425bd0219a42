"""Function boundary extraction.

Groups code lines (comments and blanks already removed) into function
bodies with a two-state scan:

    OUTSIDE --declaration--> INSIDE --closing brace--> OUTSIDE

Lines seen while OUTSIDE go to the ``BARE_CODE`` bucket. The declaration
line itself is never stored; the closing-brace line belongs to the body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from . import patterns
from .classifier import function_name, is_function_start


@dataclass
class FunctionExtractor:
    """Incremental extractor. Call ``feed`` once per line, in file order.

    ``functions`` maps each name to its body lines in first-seen order.
    A name declared twice accumulates both bodies under the same key.
    """

    functions: dict[str, list[str]] = field(default_factory=dict)
    active: Optional[str] = None

    @property
    def inside(self) -> bool:
        return self.active is not None

    def feed(self, line: str) -> None:
        if self.active is not None:
            self._feed_inside(self.active, line)
            return

        if is_function_start(line):
            self.active = function_name(line)
            return

        self._append(patterns.BARE_CODE, line)

    def _feed_inside(self, name: str, line: str) -> None:
        self._append(name, line)
        if patterns.FUNCTION_END.search(line) is None:
            return
        if patterns.FUNCTION_NOT_END.search(line) is not None:
            return
        self.active = None

    def _append(self, name: str, line: str) -> None:
        self.functions.setdefault(name, []).append(line)


def extract_functions(code_lines: Iterable[str]) -> dict[str, list[str]]:
    """Group ``code_lines`` into ``{name: body_lines}``.

    An unclosed function keeps collecting until the input ends.
    """
    extractor = FunctionExtractor()
    for line in code_lines:
        extractor.feed(line)
    return extractor.functions
