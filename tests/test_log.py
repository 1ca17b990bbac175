import logging

import pytest

from sgf_replay.config import ReplayConfig
from sgf_replay.log import setup_logging, setup_logging_from_config


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "replay.log"
    setup_logging("debug", str(log_file))
    assert restore_root_logger.level == logging.DEBUG
    logging.getLogger("sgf_replay.test").debug("hello")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "sgf_replay.test - DEBUG" in log_file.read_text()


def test_setup_logging_from_config(tmp_path, restore_root_logger):
    config = ReplayConfig()
    config.set("logging", "level", "warning")
    setup_logging_from_config(config)
    assert restore_root_logger.level == logging.WARNING
    assert any(isinstance(h, logging.StreamHandler) for h in restore_root_logger.handlers)
