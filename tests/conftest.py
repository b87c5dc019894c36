"""
Pytest configuration and fixtures for the frontline test suite.
"""

from pathlib import Path
from typing import Callable, List

import pytest

from frontline.core.logging import LineLogger, reset_logger


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in ("APP_DEBUG", "APP_BASE_DIR", "LOG_LEVEL", "FRONTLINE_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_logger()


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def log_dir(base_dir: Path) -> Path:
    return base_dir / "storage" / "logs"


@pytest.fixture
def make_logger(base_dir: Path):
    created: List[LineLogger] = []

    def factory(debug_enabled: bool = False) -> LineLogger:
        logger = LineLogger(base_dir, debug_enabled=debug_enabled)
        created.append(logger)
        return logger

    yield factory

    for logger in created:
        logger.close()


@pytest.fixture
def read_lines(log_dir: Path) -> Callable[[str], List[str]]:
    """Read storage/logs/<name>.log as a list of lines without newlines."""
    def reader(name: str) -> List[str]:
        path = log_dir / f"{name}.log"
        if not path.exists():
            return []
        return path.read_text(encoding="utf-8").splitlines()
    return reader
