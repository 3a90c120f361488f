"""Unit tests for diaglinks.utils.logger."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from diaglinks.utils import logger as logger_module


@pytest.fixture
def package_logger(monkeypatch):
    """Reset configuration state and undo handlers added by a test."""
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    package = logging.getLogger("diaglinks")
    handlers = list(package.handlers)
    level = package.level
    yield package
    for handler in package.handlers:
        if handler not in handlers:
            handler.close()
    package.handlers = handlers
    package.setLevel(level)


def test_configure_logging_writes_rotating_file(package_logger, tmp_path):
    logger_module.configure_logging(home=tmp_path / "home", level="DEBUG")

    added = [h for h in package_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(added) == 1
    assert added[0].maxBytes == 5 * 1024 * 1024
    assert added[0].backupCount == 3
    assert package_logger.level == logging.DEBUG

    logging.getLogger("diaglinks.api.link.LinkScanner").debug("scanned")
    added[0].flush()
    assert "scanned" in (tmp_path / "home" / "diaglinks.log").read_text()


def test_configure_logging_is_idempotent(package_logger, tmp_path):
    logger_module.configure_logging(home=tmp_path)
    count = len(package_logger.handlers)
    logger_module.configure_logging(home=tmp_path)
    assert len(package_logger.handlers) == count

