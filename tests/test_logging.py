"""Tests for iconcheck.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from iconcheck.logging import configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    assert get_logger().name == "iconcheck"
    assert get_logger("checker").name == "iconcheck.checker"


def test_configure_logging_replaces_handlers_and_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "iconcheck.log"

    configure_logging()
    logger = configure_logging(verbose=False, log_file=log_file)

    assert len(logger.handlers) == 2
    assert logger.handlers[0].level == logging.WARNING

    get_logger("test").debug("collected %d files", 3)
    for handler in logger.handlers:
        handler.flush()

    assert "collected 3 files" in log_file.read_text(encoding="utf-8")

    configure_logging()
