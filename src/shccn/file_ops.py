"""
File operations for shccn.

Reads scripts into SourceFile objects and discovers shell scripts under
directories. This is the only module that touches the disk.
"""

from collections.abc import Generator, Iterable
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional

from .config import AnalysisConfig, default_config
from .exceptions import FileAccessError
from .logging_config import get_logger
from .models import SourceFile
from .scanning.patterns import SHELL_SHEBANG

logger = get_logger(__name__)


def split_lines(content: str) -> List[str]:
    """Split text into physical lines.

    ``\\n`` ends a line and one trailing ``\\r`` is dropped. A final
    newline does not produce an extra empty line; empty text has no lines.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_script(filepath: Path, config: Optional[AnalysisConfig] = None) -> str:
    """
    Read a script as text.

    Raises:
        FileAccessError: If the file is missing, too large or unreadable
    """
    config = config or default_config

    try:
        size = filepath.stat().st_size
    except FileNotFoundError:
        raise FileAccessError(filepath, "No such file")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")

    if size > config.max_file_size_bytes:
        raise FileAccessError(
            filepath, f"File size {size} exceeds limit of {config.max_file_size_bytes} bytes"
        )

    try:
        with open(filepath, encoding=config.encoding, errors="replace", newline="") as f:
            return f.read()
    except IsADirectoryError:
        raise FileAccessError(filepath, "Is a directory")
    except LookupError as e:
        raise FileAccessError(filepath, f"Unknown encoding: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def load_source_file(filepath, config: Optional[AnalysisConfig] = None) -> SourceFile:
    """Read ``filepath`` into a SourceFile named after its base name."""
    filepath = Path(filepath)
    content = read_script(filepath, config)
    lines = split_lines(content)
    logger.debug(f"Loaded {filepath} ({len(lines)} lines)")
    return SourceFile.from_lines(filepath.name, lines)


def has_shell_shebang(filepath: Path) -> bool:
    """True if the file's first line is a shell ``#!`` line."""
    try:
        with open(filepath, encoding="utf-8", errors="replace") as f:
            first = f.readline()
    except OSError:
        return False
    return SHELL_SHEBANG.match(first) is not None


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def _is_excluded(relative: Path, config: AnalysisConfig) -> bool:
    rel = relative.as_posix()
    return any(fnmatch(rel, pattern) for pattern in config.exclude_patterns)


def scan_directory(
    root_dir: Path, config: Optional[AnalysisConfig] = None
) -> Generator[Path, None, None]:
    """
    Yield shell scripts below ``root_dir`` in sorted order.

    A file qualifies by extension, or, when it has no suffix, by a shell
    shebang on its first line.
    """
    config = config or default_config
    extensions = {ext.lower() for ext in config.extensions}

    for path in sorted(root_dir.rglob("*")):
        relative = path.relative_to(root_dir)
        if not config.allow_hidden_files and _is_hidden(relative):
            continue
        if _is_excluded(relative, config):
            continue
        if path.is_symlink() and not config.follow_symlinks:
            continue
        if not path.is_file():
            continue

        if path.suffix.lower() in extensions:
            yield path
        elif not path.suffix and has_shell_shebang(path):
            yield path


def collect_scripts(paths: Iterable, config: Optional[AnalysisConfig] = None) -> List[Path]:
    """Expand directories into scripts; explicit file paths are kept as given.

    Paths that do not exist are kept too, so the caller reports them as
    load failures.
    """
    config = config or default_config
    result: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = list(scan_directory(path, config))
            logger.debug(f"Found {len(found)} scripts under {path}")
            result.extend(found)
        else:
            result.append(path)
    return result
