"""Environment-variable helpers shared by runtime configuration points."""

from __future__ import annotations

import os


def env_flag(name: str) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def int_env(name: str, default: int, *, minimum: int, maximum: int) -> int:
    """Read an integer setting, clamped to ``[minimum, maximum]``.

    Unset or unparsable values fall back to ``default``.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(maximum, value))


def str_env(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default
