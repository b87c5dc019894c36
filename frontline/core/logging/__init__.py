"""
Logging infrastructure for frontline.

LineLogger writes operator-facing lines to storage/logs; setup_logging
configures the stdlib diagnostic logger.
"""

from .config import setup_logging
from .levels import Level
from .logger import LineLogger, get_logger, reset_logger

__all__ = ['Level', 'LineLogger', 'get_logger', 'reset_logger', 'setup_logging']
