"""
Line formatting helpers for the line logger.

A line is a sequence of space separated ``key=value`` tokens:

    timestamp=2024-05-01T12:00:00.123456Z level=INFO message="hello" user_id="42"

The first three tokens are always ``timestamp``, ``level`` and ``message``;
context tokens follow in the order the caller supplied them.
"""

import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from ..exceptions import InvalidContextKey
from .levels import Level


CONTEXT_KEY_PATTERN = re.compile(r"[A-Za-z0-9_]+")
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Current UTC time with microseconds and a trailing ``Z``."""
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def validate_context_key(key: Any) -> str:
    text = str(key)
    if not CONTEXT_KEY_PATTERN.fullmatch(text):
        raise InvalidContextKey(text)
    return text


def escape_value(value: Any) -> str:
    """Backslash-escape ``\\`` and ``"`` and wrap the text in double quotes."""
    text = str(value)
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_line(
    timestamp: str,
    level: Level,
    message: str,
    context: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Build one newline-terminated log line.

    Every context key is validated before anything is rendered, so an invalid
    key never yields a partial line.

    Raises:
        InvalidContextKey: if a key contains characters outside [A-Za-z0-9_]
    """
    items = list((context or {}).items())
    keys = [validate_context_key(key) for key, _ in items]

    parts = [
        f"timestamp={timestamp}",
        f"level={level.label}",
        f"message={escape_value(message)}",
    ]
    for key, (_, value) in zip(keys, items):
        parts.append(f"{key}={escape_value(value)}")

    return " ".join(parts) + "\n"
