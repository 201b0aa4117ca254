"""
Logging configuration for graphprint.

Library modules only call :func:`get_logger`; nothing is printed until the
embedding application calls :func:`setup_logging` (or
:func:`setup_logging_from_config` with a loaded FingerprintConfig).

Levels by verbosity:
    quiet   -> ERROR    (only failures)
    normal  -> WARNING  (numeric fallbacks such as padded signatures)
    verbose -> DEBUG    (one line per pipeline stage and registry decision)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

if TYPE_CHECKING:
    from .config import FingerprintConfig

ROOT_LOGGER = "graphprint"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route graphprint logs through a rich handler on stderr.

    Args:
        verbosity: "quiet", "normal" or "verbose"
        log_file: Optional file that also receives every record, plain-formatted

    Returns:
        The root graphprint logger

    Raises:
        InvalidConfigError: If verbosity is not a known level
    """
    try:
        level = _LEVELS[verbosity]
    except KeyError:
        raise InvalidConfigError("verbosity", verbosity, "must be quiet, normal or verbose")

    verbose = level == logging.DEBUG
    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # No-op when the host application already configured the root logger
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def setup_logging_from_config(config: FingerprintConfig, log_file: Optional[str] = None) -> logging.Logger:
    """:func:`setup_logging` at ``config.verbosity``."""
    return setup_logging(config.verbosity, log_file)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger under the graphprint namespace.

    ``get_logger(__name__)`` inside the package returns the module logger
    unchanged; short names such as "registry" become "graphprint.registry".
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
