"""
Logging configuration for git-chronicle.

Log records go to stderr through rich so that stdout stays clean for
``--json`` output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging with a rich stderr handler.

    Args:
        verbosity: One of "quiet" (errors only), "normal" (warnings) or
                   "verbose" (debug, with source paths and traceback locals)
        log_file: Optional file path; records are appended at the same level

    Returns:
        The git_chronicle package logger
    """
    if verbosity not in VERBOSITY_LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity}")
    level = VERBOSITY_LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,  # paths and commit messages may contain [brackets]
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # force=True so a second call (after config files are read) replaces the handlers
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger("git_chronicle")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger for a module, namespaced under ``git_chronicle``.

    Args:
        name: Module name, e.g. ``__name__`` or 'temporal.series'.
              If None, returns the package logger.
    """
    if name is None:
        return logging.getLogger("git_chronicle")

    if not name.startswith("git_chronicle"):
        name = f"git_chronicle.{name}"

    return logging.getLogger(name)
