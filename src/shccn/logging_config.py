"""
Logging for shccn.

Everything logs under the ``shccn`` namespace. Console output goes to stderr
through rich so that reports written to stdout can be piped.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "shccn"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _console_handler(detailed: bool) -> logging.Handler:
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=detailed,
        markup=False,
        show_time=detailed,
        show_path=detailed,
    )


def _file_handler(log_file: Union[str, Path]) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbosity: str = "normal", log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Install handlers on the ``shccn`` logger for a run.

    Handlers from a previous call are closed and replaced, so each run in
    the same process starts from one console handler and at most one file.

    Args:
        verbosity: ``quiet`` (errors only), ``normal`` or ``verbose`` (debug)
        log_file: Also append records to this file

    Returns:
        The ``shccn`` logger
    """
    if verbosity not in LEVELS:
        raise ValueError(f"verbosity must be one of: {', '.join(LEVELS)}")

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(verbosity == "verbose"))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file))

    logger.setLevel(LEVELS[verbosity])
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, always inside the ``shccn`` namespace."""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
