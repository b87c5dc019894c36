import pytest

from frontline.core.logging import Level
from frontline.core.logging.levels import APP_SINK, DEBUG_SINK, ERROR_SINK


def test_levels_are_ordered_by_severity():
    ordered = [
        Level.DEBUG, Level.INFO, Level.NOTICE, Level.WARN,
        Level.ERROR, Level.CRITICAL, Level.ALERT, Level.EMERGENCY,
    ]
    assert sorted(Level) == ordered


@pytest.mark.parametrize("level, expected", [
    (Level.DEBUG, (DEBUG_SINK,)),
    (Level.INFO, (DEBUG_SINK, APP_SINK)),
    (Level.NOTICE, (DEBUG_SINK, APP_SINK)),
    (Level.WARN, (DEBUG_SINK, APP_SINK)),
    (Level.ERROR, (DEBUG_SINK, APP_SINK, ERROR_SINK)),
    (Level.CRITICAL, (DEBUG_SINK, APP_SINK, ERROR_SINK)),
    (Level.ALERT, (DEBUG_SINK, APP_SINK, ERROR_SINK)),
    (Level.EMERGENCY, (DEBUG_SINK, APP_SINK, ERROR_SINK)),
])
def test_sink_routing(level, expected):
    assert level.sinks == expected


@pytest.mark.parametrize("raw, expected", [
    ("info", Level.INFO),
    (" Error ", Level.ERROR),
    ("WARNING", Level.WARN),
    ("warn", Level.WARN),
    (Level.ALERT, Level.ALERT),
])
def test_parse(raw, expected):
    assert Level.parse(raw) is expected


def test_parse_rejects_unknown_names():
    with pytest.raises(ValueError):
        Level.parse("trace")


def test_parse_rejects_non_strings():
    with pytest.raises(TypeError):
        Level.parse(200)
