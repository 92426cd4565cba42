"""Tests for fdc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from fdc.logging import configure_logging, get_logger


def test_get_logger_uses_fdc_hierarchy() -> None:
    assert get_logger().name == "fdc"
    assert get_logger("catalog").name == "fdc.catalog"


def test_configure_logging_resets_handlers() -> None:
    configure_logging()
    logger = configure_logging(debug=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_configure_logging_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "fdc.log"
    logger = configure_logging(log_file=log_file)

    get_logger("deleter").info("Deleted %s", "x.js")
    for handler in logger.handlers:
        handler.flush()

    assert logger.handlers[0].level == logging.WARNING
    assert "fdc.deleter: Deleted x.js" in log_file.read_text(encoding="utf-8")
    configure_logging()
