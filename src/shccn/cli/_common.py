"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console(stderr=True)

VALID_FORMATS = ("text", "rich", "json", "csv")


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    sort_by: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if sort_by is not None:
        overrides["sort_by"] = sort_by
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
