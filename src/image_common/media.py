"""Image file type helpers shared across components."""

from __future__ import annotations

from pathlib import Path

DEFAULT_MIME_TYPE = "image/png"

_MIME_BY_SUFFIX = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".gif": "image/gif",
}
_SUFFIX_BY_MIME = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


def mime_type_for_path(path: Path | str) -> str:
    suffix = Path(path).suffix.lower()
    return _MIME_BY_SUFFIX.get(suffix, DEFAULT_MIME_TYPE)


def suffix_for_mime_type(mime_type: str | None) -> str:
    if not mime_type:
        return ".png"
    lowered = mime_type.split(";", 1)[0].strip().lower()
    return _SUFFIX_BY_MIME.get(lowered, ".png")
