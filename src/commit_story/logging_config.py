"""
Logging configuration for commit-story.

Routes log records through rich so parse summaries and rejected blocks read
cleanly in a terminal.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "commit_story"

# normal shows partial-upload warnings; verbose adds one line per rejected block
_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal") -> logging.Logger:
    """
    Send commit_story log records to stderr through a rich handler.

    Args:
        verbosity: ParserConfig.verbosity value

    Returns:
        The root commit_story logger
    """
    level = _LEVELS[verbosity]
    handler = RichHandler(
        console=Console(stderr=True),
        markup=False,
        show_path=verbosity == "verbose",
    )
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the commit_story namespace; the root one when name is None."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
