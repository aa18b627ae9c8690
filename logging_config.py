"""Logging configuration for the shader viewer."""

import logging
from pathlib import Path
from typing import Optional

import config as cfg


def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the root logger once.

    Args:
        level: Log level name (DEBUG, INFO, ...). Defaults to cfg.LOG_LEVEL.
        log_file: Optional file to mirror console output into.

    Returns:
        The root logger.
    """
    if level is None:
        level = cfg.LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    formatter = logging.Formatter(cfg.LOG_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root
