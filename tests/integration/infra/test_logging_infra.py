from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener setup, idempotent configuration and that host
handlers survive reconfiguration.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from assetdata.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove our handlers and listener before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1
    assert isinstance(first[0], QueueHandler)


def test_force_reconfigure_replaces_handler() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    before = _our_handlers()

    root = configure_logging(LoggingConfig(level="DEBUG"), force=True)

    after = _our_handlers()
    assert len(after) == 1
    assert after[0] is not before[0]
    assert root.level == logging.DEBUG


def test_foreign_handlers_are_preserved() -> None:
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO"))
        configure_logging(LoggingConfig(level="INFO"), force=True)
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_file_logging_writes_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "assetdata.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    get_logger("assetdata.test").debug("scan finished")

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    listener.stop()
    setattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None)

    assert "scan finished" in log_file.read_text(encoding="utf-8")


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file), max_bytes=100, backup_count=1))

    logger = get_logger("assetdata.rotate")
    for _ in range(10):
        logger.debug("A long log message used to trigger rotation." * 3)

    time.sleep(0.5)
    assert (tmp_path / "rotate.log.1").exists()


def test_unknown_level_defaults_to_info() -> None:
    root = configure_logging(LoggingConfig(level="chatty", console=True))
    assert root.level == logging.INFO
