"""Compiled patterns for the shell heuristics: the single source of truth.

Every regular expression used by the line classifier, the function
extractor and the complexity analyzer lives here. They are compiled once at
import time and never modified afterwards, so they can be shared freely
between threads.
"""

import re as _re

# Sentinel bucket for code outside any function body.
BARE_CODE = "BARE_CODE"

# ── Line classification ────────────────────────────────────────────

# ASCII whitespace only: a leading NBSP is not indentation.
COMMENT = _re.compile(r"^\s*#", _re.ASCII)

# `name() {` / `function name () {`
FUNCTION_START = _re.compile(r"\(\s*\)\s*\{", _re.ASCII)

# ── Function boundaries ────────────────────────────────────────────

FUNCTION_END = _re.compile(r"\}")

# A quote somewhere before the brace: the brace is probably inside a string.
FUNCTION_NOT_END = _re.compile(r"['\"].*\}")

# Tokens removed from a declaration line to obtain the function name.
# "function" goes first so that single characters never split it.
FUNCTION_NAME_NOISE = ("function", "{", "(", ")", " ")

# ── Complexity ─────────────────────────────────────────────────────

# Substring match on purpose: `elif` counts as a branch too.
BRANCH_KEYWORD = _re.compile(r"if|while|for|;;")

# Keyword preceded by a quote on the same line: assume it is string content.
QUOTED_KEYWORD = _re.compile(r"['\"].*(?:if|while|for)")

CONDITION = _re.compile(r"&&|\|\|")

# ── Script discovery ───────────────────────────────────────────────

SHELL_SHEBANG = _re.compile(r"^#!\s*\S*/(?:env\s+)?(?:ba|da|k|z|a)?sh\b")
