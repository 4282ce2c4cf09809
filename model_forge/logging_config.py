"""Logging configuration for model_forge.

All modules obtain loggers through :func:`get_logger` so that they live
under the ``model_forge`` namespace. Nothing is emitted until the CLI (or
an embedding application) calls :func:`setup_logging`.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "model_forge"

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Library default: stay silent unless configured
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``model_forge``.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the package logger with a rich console handler.

    Args:
        level: Logging level name or number.
        log_file: Optional file that additionally receives plain-text records.
        console: Rich console to log to; defaults to stderr.

    Returns:
        The configured ``model_forge`` logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setLevel(level)
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
