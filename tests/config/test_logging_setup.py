"""
Logging Setup Tests
"""

import logging
import logging.handlers

import pytest

from config import logging_setup


@pytest.fixture
def clean_root_logger():
    """Restore the root logger after the test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    configured = getattr(root, "_ripeness_configured", False)
    root._ripeness_configured = False

    yield root

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    root._ripeness_configured = configured


@pytest.mark.unit
def test_setup_logging_is_idempotent(clean_root_logger):
    before = len(clean_root_logger.handlers)

    logging_setup.setup_logging(level="DEBUG", log_to_file=False)
    logging_setup.setup_logging(level="DEBUG", log_to_file=False)

    assert len(clean_root_logger.handlers) == before + 1
    assert clean_root_logger.level == logging.DEBUG


@pytest.mark.unit
def test_file_logging_falls_back_to_local_dir(
    clean_root_logger,
    tmp_path,
    monkeypatch,
):
    monkeypatch.setattr(logging_setup, "LOG_DIR", str(tmp_path / "missing" / "dir"))
    monkeypatch.setattr(logging_setup, "LOG_FALLBACK_DIR", str(tmp_path / "logs"))

    logging_setup.setup_logging(log_to_file=True)

    file_handlers = [
        h
        for h in clean_root_logger.handlers
        if isinstance(h, logging.handlers.TimedRotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs" / "client.log").exists()
