"""Environment helpers shared across components."""

from __future__ import annotations

import os


def add_prompt_metadata_enabled() -> bool:
    return env_flag("ADD_PROMPT_METADATA")


def env_flag(key: str, *, default: bool = False) -> bool:
    value = os.getenv(key, "")
    if not value.strip():
        return default
    return as_boolean(value, key=key)


def first_env(*keys: str) -> str | None:
    for key in keys:
        value = os.getenv(key, "").strip()
        if value:
            return value
    return None


def as_boolean(value: str, *, key: str | None = None) -> bool:
    if not key:
        key = "key"
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(
        f"value {value} for {key} must be one of 1, 0, true, false, yes, no, on, off"
    )
