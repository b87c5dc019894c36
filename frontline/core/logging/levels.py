"""
Severity levels and sink routing for the line logger.
"""

from enum import IntEnum
from typing import Tuple, Union


APP_SINK = "app"
DEBUG_SINK = "debug"
ERROR_SINK = "error"


class Level(IntEnum):
    """Closed, ordered set of severity levels (lowest first)."""

    DEBUG = 100
    INFO = 200
    NOTICE = 250
    WARN = 300
    ERROR = 400
    CRITICAL = 500
    ALERT = 550
    EMERGENCY = 600

    @property
    def label(self) -> str:
        return self.name

    @property
    def sinks(self) -> Tuple[str, ...]:
        """
        Names of the sinks that receive a line of this level.

        The debug sink receives everything; whether it exists at all is
        decided by the logger, not by the level.
        """
        targets = [DEBUG_SINK]
        if self >= Level.INFO:
            targets.append(APP_SINK)
        if self >= Level.ERROR:
            targets.append(ERROR_SINK)
        return tuple(targets)

    @classmethod
    def parse(cls, value: Union["Level", str]) -> "Level":
        """Accept a Level or its case-insensitive name ("warning" maps to WARN)."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Level must be a Level or str, got {type(value).__name__}")
        name = value.strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: {value}") from None
