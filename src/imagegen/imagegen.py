"""Generate and edit images with Gemini and persist the results."""

from __future__ import annotations

import base64
import binascii
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from image_common.media import (
    DEFAULT_MIME_TYPE,
    mime_type_for_path,
    suffix_for_mime_type,
)

from . import exif, gemini
from .options import ParsedOptions

TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"


@dataclass
class ImageResult:
    """Outcome of one generate or edit call.

    ``path`` and ``data`` are both None when the model answered without an
    image; ``text`` then carries whatever the model said instead.
    """

    path: Path | None
    data: str | None
    mime_type: str = DEFAULT_MIME_TYPE
    text: str = ""


def generate_image(client: Any, prompt: str, options: ParsedOptions) -> ImageResult:
    """Create a new image from a text prompt and save it with prefix ``generated``."""

    try:
        output = gemini.invoke(
            client,
            options.model,
            prompt,
            kind="generate_image",
            summary={"prompt": prompt},
            quiet=options.quiet,
        )
    except Exception as exc:
        raise RuntimeError(f"API request failed: {exc}") from exc

    return _persist(output, "generated", prompt, options)


def edit_image(
    client: Any, image_path: str, prompt: str, options: ParsedOptions
) -> ImageResult:
    """Send an existing image plus an edit prompt and save the result with prefix ``edited``."""

    clean_path = clean_image_path(image_path)
    try:
        image_bytes = clean_path.read_bytes()
    except OSError as exc:
        raise RuntimeError(f"failed to read image: {exc}") from exc

    mime_type = mime_type_for_path(clean_path)
    contents = gemini.edit_contents(image_bytes, mime_type, prompt)
    try:
        output = gemini.invoke(
            client,
            options.model,
            contents,
            kind="edit_image",
            summary={"image_path": str(clean_path), "prompt": prompt},
            quiet=options.quiet,
        )
    except Exception as exc:
        raise RuntimeError(f"API request failed: {exc}") from exc

    return _persist(output, "edited", prompt, options)


def clean_image_path(image_path: str) -> Path:
    """Normalize a caller-supplied path and reject parent-directory escapes."""

    cleaned = os.path.normpath(image_path)
    if ".." in Path(cleaned).parts:
        raise ValueError("invalid image path: directory traversal not allowed")
    return Path(cleaned)


def save_image(
    base64_data: str,
    prefix: str,
    output_dir: Path | str,
    *,
    suffix: str = ".png",
    now: datetime | None = None,
) -> Path:
    """Decode base64 image data and write it under output_dir.

    The file is named ``<prefix>-<YYYY-MM-DDTHH-MM-SS><suffix>``; the
    directory is created when missing. Returns the absolute path.
    """

    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    try:
        image_bytes = base64.b64decode(base64_data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid base64 image data: {exc}") from exc

    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    path = directory / f"{prefix}-{timestamp}{suffix}"
    path.write_bytes(image_bytes)
    return Path(os.path.abspath(path))


def _persist(
    output: gemini.ModelOutput, prefix: str, prompt: str, options: ParsedOptions
) -> ImageResult:
    if output.image is None:
        return ImageResult(path=None, data=None, text=output.text)

    data = base64.b64encode(output.image).decode("ascii")
    try:
        path = save_image(
            data,
            prefix,
            options.output_dir,
            suffix=suffix_for_mime_type(output.mime_type),
        )
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"failed to save image: {exc}") from exc

    if options.add_prompt_metadata:
        _apply_exif_metadata(path, prompt, options)

    return ImageResult(
        path=path, data=data, mime_type=output.mime_type, text=output.text
    )


def _apply_exif_metadata(path: Path, prompt: str, options: ParsedOptions) -> None:
    description = prompt.strip() or None
    success = exif.set_exif_data(path, description=description, model=options.model)
    if not success:
        print(f"warning: unable to update EXIF data for {path}", file=sys.stderr)


__all__ = [
    "ImageResult",
    "clean_image_path",
    "edit_image",
    "generate_image",
    "save_image",
]
