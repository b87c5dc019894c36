"""
Helpers for reading line logger output in tests.
"""

import re


LINE_PATTERN = re.compile(
    r'^timestamp=\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z level=[A-Z]+ message="(?:[^"\\]|\\.)*"'
    r'(?: [A-Za-z0-9_]+="(?:[^"\\]|\\.)*")*$'
)


def strip_timestamp(line: str) -> str:
    """Drop the leading timestamp token so lines can be compared."""
    return line.split(" ", 1)[1]


def message_of(line: str) -> str:
    match = re.search(r' message="((?:[^"\\]|\\.)*)"', line)
    assert match, f"No message token in line: {line}"
    return match.group(1)
