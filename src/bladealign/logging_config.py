"""
Logging Configuration
Attaches console and file handlers to the `bladealign` logger.

Library modules only ever call `logging.getLogger(__name__)`; nothing is
emitted until an application calls `setup_logging`.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "bladealign"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the `bladealign.*` log records to stdout and optionally to a file.

    Calling it again replaces the handlers from the previous call, so records
    are never written twice.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("debug").
        log_file: Optional path of a log file, truncated on every call.

    Raises:
        ValueError: If `level` is a name the logging module does not know.

    Returns:
        The configured package logger.
    """
    numeric_level = _resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    _attach(logger, logging.StreamHandler(sys.stdout), numeric_level, formatter)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), numeric_level, formatter)

    logger.info(f"Logging initialized at level {logging.getLevelName(numeric_level)}.")
    return logger
