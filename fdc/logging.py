"""Diagnostic logging for fdc; the scan report itself goes to stdout."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "fdc"


def get_logger(name: str | None = None) -> logging.Logger:
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, debug: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Send warnings (or everything with ``debug``) to stderr, and all records to ``log_file``."""
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # One set of handlers per CLI invocation.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("[fdc] %(levelname)s %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
