"""
Environment value helpers.
"""

from __future__ import annotations


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and ((value[0] == '"' and value[-1] == '"') or (value[0] == "'" and value[-1] == "'")):
        value = value[1:-1]
    # Guard against literal escaped control chars leaked by some env providers.
    value = value.replace("\\n", "").replace("\\r", "").strip()
    return value or fallback


def parse_int_env(raw: str | None, default: int) -> int:
    """Parse a positive integer setting, falling back to ``default``."""
    value = sanitize_env_value(raw)
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def parse_csv_env(raw: str | None) -> list[str]:
    return [item.strip() for item in sanitize_env_value(raw).split(',') if item.strip()]
