"""Public API for shccn.

Example:
    >>> from shccn import analyze
    >>>
    >>> result = analyze(["deploy.sh", "scripts/"])
    >>> for report in result.reports:
    ...     print(report.name, report.file.code_count)
    >>>
    >>> # With customization
    >>> result = analyze(["scripts/"], workers=4, sort_by="ccn")
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional

from .config import AnalysisConfig, load_config
from .exceptions import FileAccessError
from .file_ops import collect_scripts, load_source_file
from .logging_config import get_logger
from .metrics import MetricsAggregator
from .models import AnalysisResult, FileReport

logger = get_logger(__name__)

# Below this many files the thread pool costs more than it saves.
PARALLEL_MIN_FILES = 8


def analyze_file(path: Path, config: Optional[AnalysisConfig] = None) -> FileReport:
    """Load and measure one script.

    Raises:
        FileAccessError: If the script cannot be read
    """
    source = load_source_file(path, config)
    return MetricsAggregator(source).report(str(path))


def analyze(
    paths: Iterable,
    config: Optional[AnalysisConfig] = None,
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze scripts and directories of scripts.

    Files are independent: one that cannot be read is logged, recorded in
    ``AnalysisResult.errors`` and skipped, and the rest still run.
    Reports come back in input order whether or not workers are used.

    Args:
        paths: Script files and/or directories to scan
        config: Ready-made configuration (skips config discovery)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., workers=4)

    Returns:
        AnalysisResult with per-file reports and load errors

    Raises:
        ShccnError: If configuration is invalid
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)

    scripts = collect_scripts(paths, config)
    logger.debug(f"Analyzing {len(scripts)} scripts")

    def _run(path: Path):
        try:
            return analyze_file(path, config)
        except FileAccessError as e:
            return e

    if config.parallel and len(scripts) >= PARALLEL_MIN_FILES:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            outcomes = list(executor.map(_run, scripts))
    else:
        outcomes = [_run(path) for path in scripts]

    result = AnalysisResult()
    for path, outcome in zip(scripts, outcomes):
        if isinstance(outcome, FileAccessError):
            logger.warning(f"Skipping {path}: {outcome.reason}")
            result.errors[str(path)] = outcome.reason
        else:
            result.reports.append(outcome)

    return result
