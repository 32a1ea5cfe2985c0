"""Shared helpers for imagegen and imagemcp."""

from .env import add_prompt_metadata_enabled, as_boolean, env_flag, first_env
from .media import DEFAULT_MIME_TYPE, mime_type_for_path, suffix_for_mime_type

__all__ = [
    "DEFAULT_MIME_TYPE",
    "add_prompt_metadata_enabled",
    "as_boolean",
    "env_flag",
    "first_env",
    "mime_type_for_path",
    "suffix_for_mime_type",
]
