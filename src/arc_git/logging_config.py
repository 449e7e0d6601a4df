"""
Logging configuration for arc-git.

Log records go to stderr through a rich handler so they never mix with
JSON/YAML summaries written to stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are noisy below WARNING.
_CHATTY_LOGGERS = ("LiteLLM", "httpx", "httpcore")


def _level_for(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Route log records to stderr through rich.

    Args:
        verbose: DEBUG level, with git commands and AI requests
        quiet: ERROR level only (structured and quiet output modes)

    Returns:
        The arc_git package logger
    """
    level = _level_for(verbose, quiet)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )

    # force: the CLI may be invoked several times in one process (tests)
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger("arc_git")
    logger.setLevel(level)

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the arc_git namespace.

    Args:
        name: Module name (e.g., 'arc_git.git.repository'); names outside
            the package are prefixed. None returns the package logger.
    """
    if name is None:
        return logging.getLogger("arc_git")

    if not name.startswith("arc_git"):
        name = f"arc_git.{name}"

    return logging.getLogger(name)
