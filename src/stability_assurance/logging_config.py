"""Logging for Stability Assurance.

Modules log through ``get_logger``. Only the CLI installs a handler: a
``RichHandler`` on stderr, leaving stdout to the report itself.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "stability_assurance"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Install the stderr handler and return the package logger.

    Warnings and errors are always shown; ``verbose`` adds debug records
    with timestamps and source locations.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        markup=False,
        rich_tracebacks=True,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``stability_assurance`` hierarchy.

    Names outside the package (``"engine"``) are nested below it.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
