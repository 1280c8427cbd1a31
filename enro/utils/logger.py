#!/usr/bin/env python3
"""
Logging utilities for enro
"""

import logging
import sys
from pathlib import Path

_ENGINE_LOGGERS = ("enro.modules", "enro.utils", "enro.application")
_saved_levels: dict[str, int] = {}


def setup_logger(
    name: str = "enro", level: int = logging.INFO, thread_safe: bool = False
) -> logging.Logger:
    """Setup logger with console and file handlers"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # File handler (optional)
    try:
        log_dir = Path.home() / ".enro" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "enro.log", delay=True)
        file_handler.setLevel(logging.DEBUG)

        # Formatter
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        if thread_safe:
            fmt = "%(asctime)s - %(name)s - [%(threadName)s] - %(levelname)s - %(message)s"
        formatter = logging.Formatter(fmt)

        console_handler.setFormatter(formatter)
        file_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    except OSError:
        # Fallback to console only
        formatter = logging.Formatter("%(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "enro") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def configure_batch_logging() -> None:
    """Raise engine loggers to WARNING while many files are scanned in parallel"""
    for name in _ENGINE_LOGGERS:
        engine_logger = logging.getLogger(name)
        _saved_levels.setdefault(name, engine_logger.level)
        engine_logger.setLevel(logging.WARNING)


def reset_logging_levels() -> None:
    """Restore levels saved by configure_batch_logging"""
    for name, level in _saved_levels.items():
        logging.getLogger(name).setLevel(level)
    _saved_levels.clear()
