"""Configuration loading and management for shccn.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.shccn.toml)
    3. Project config (./shccn.toml)
    4. Explicit config file (--config)
    5. Environment variables (SHCCN_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
SortKey = Literal["name", "ccn", "code"]

SORT_KEYS = ("name", "ccn", "code")
ENV_PREFIX = "SHCCN_"
CONFIG_FILENAME = "shccn.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        File discovery:
            extensions: Suffixes treated as shell scripts when scanning directories
            exclude_patterns: Glob patterns (relative paths) to skip
            allow_hidden_files: Include dot-files and dot-directories
            follow_symlinks: Follow symbolic links during scanning

        Reading:
            encoding: Text encoding; undecodable bytes are replaced
            max_file_size_mb: Larger files are rejected

        Execution:
            workers: Thread count (None or 1 = sequential)

        Output control:
            sort_by: Function row ordering: name (file order), ccn, code
            verbosity: Logging verbosity level
    """

    # File discovery
    extensions: list[str] = field(default_factory=lambda: [".sh", ".bash", ".ksh", ".zsh"])
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            ".git/*",
            "node_modules/*",
            "vendor/*",
            "venv/*",
            ".venv/*",
            ".tox/*",
        ]
    )
    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    # Reading
    encoding: str = "utf-8"
    max_file_size_mb: float = 10.0

    # Execution
    workers: Optional[int] = None

    # Output control
    sort_by: SortKey = "name"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.extensions:
            raise ValueError("extensions must not be empty")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise ValueError(f"extension {ext!r} must start with '.'")

        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")

        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")

        if self.sort_by not in SORT_KEYS:
            raise ValueError(f"sort_by must be one of: {', '.join(SORT_KEYS)}")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be quiet, normal or verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def parallel(self) -> bool:
        return self.workers is not None and self.workers > 1


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file or value is invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


def _load_env_vars() -> dict[str, Any]:
    """Collect ``SHCCN_<FIELD>`` overrides, e.g. ``SHCCN_SORT_BY=ccn``.

    List fields cannot be set this way and are ignored.
    """
    hints = get_type_hints(AnalysisConfig)
    found: dict[str, Any] = {}

    for name in AnalysisConfig.__dataclass_fields__:
        env_key = ENV_PREFIX + name.upper()
        raw = os.environ.get(env_key)
        if raw is None or name not in hints:
            continue
        try:
            value = _parse_env_value(raw, hints[name])
        except ValueError as e:
            raise InvalidConfigError(env_key, raw, str(e))
        if value is not None:
            found[name] = value

    return found


def _unwrap_optional(hint: Any) -> Any:
    args = getattr(hint, "__args__", ())
    if type(None) in args:
        return next(a for a in args if a is not type(None))
    return hint


def _parse_env_value(raw: str, hint: Any) -> Any:
    """Convert one variable to the field's type; None means unsupported."""
    hint = _unwrap_optional(hint)
    origin = getattr(hint, "__origin__", None)

    if hint is list or origin is list:
        return None
    if hint is bool:
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"expected one of {'/'.join(_TRUE_WORDS + _FALSE_WORDS)}, got '{raw}'")
    if hint is int:
        return int(raw)
    if hint is float:
        return float(raw)
    if hint is str or origin is Literal:
        return raw
    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[tool.shccn]`` table is used when present, so the settings can also
    live in a pyproject.toml.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)

    tool_section = data.get("tool", {})
    if isinstance(tool_section, dict) and "shccn" in tool_section:
        return dict(tool_section["shccn"])
    return data


default_config = AnalysisConfig()
