"""
Diagnostic logging setup.

Log lines meant for operators go through LineLogger. This module configures
the stdlib ``frontline`` logger that reports on the logging machinery itself
(sink initialization, dropped lines) and on startup, writing to the console.
"""

import logging
import os
from typing import Optional


DIAGNOSTIC_LOGGER_NAME = "frontline"


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Единая настройка диагностического логирования.

    Args:
        log_level: level name; defaults to LOG_LEVEL, then WARNING

    Returns:
        logging.Logger: Configured logger instance
    """
    level_name = (log_level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger(DIAGNOSTIC_LOGGER_NAME)
    logger.setLevel(level)

    # Очищаем существующие обработчики
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    return logger
