"""Logging setup shared by scripts and viewers built on sgf_replay."""

from __future__ import annotations

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)-8s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, handlers=handlers, force=True)


def setup_logging_from_config(config) -> None:
    """Apply the ``logging`` section of a :class:`ReplayConfig`."""

    setup_logging(config.get_log_level(), config.get_log_file())
