import os
from pathlib import Path
from typing import Optional


TRUE_VALUES = {"true", "1", "yes"}


def parse_bool(value: Optional[str]) -> bool:
    """"true", "1" and "yes" (any case) are True; everything else, None included, is False."""
    if value is None:
        return False
    return value.strip().lower() in TRUE_VALUES


def env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return parse_bool(value)


def project_root() -> Path:
    # frontline/utils/env.py -> repository root
    return Path(__file__).resolve().parents[2]
