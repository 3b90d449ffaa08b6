"""
Logging configuration for maat-insight.

Log records go to stderr through a rich handler so that CSV written to
stdout stays machine-readable.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "maat_insight"


def _level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Route maat_insight logging to a rich stderr handler.

    Args:
        verbose: DEBUG level, with timestamps, source paths and
            tracebacks that show locals
        quiet: Only errors; wins over ``verbose``

    Returns:
        The root maat_insight logger
    """
    level = _level(verbose, quiet)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        # Entity paths may contain brackets
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the maat_insight namespace; ``name`` is prefixed when needed."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
