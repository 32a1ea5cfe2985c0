from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

import piexif  # type: ignore[import-untyped]
from PIL import Image

SOFTWARE = "nano-banana-mcp"


def build_description(prompt: str, model: str | None = None) -> str:
    """Return the single-line ImageDescription text for a prompt."""
    d = ""
    if model:
        d += f"Model: {model} "
    d += f"Prompt: {prompt}"
    return d.replace("\r\n", " ").replace("\n", " ").strip()


def set_exif_data(
    image_path: Path | str,
    *,
    description: str | None = None,
    model: str | None = None,
    file_time: datetime | None = None,
    quiet: bool = True,
) -> bool:
    """Replace the EXIF block of a saved image with prompt metadata.

    Opens the image, builds a fresh EXIF dictionary holding the software
    name, capture timestamps and (optionally) the prompt, and writes it back
    in place.

    Args:
        image_path: Path to the image file to update.
        description: Prompt text to store in the ImageDescription tag.
        model: Model name recorded ahead of the prompt in the description.
        file_time: Timestamp for the date fields. If None, the file's mtime
            is used.
        quiet: If False, status messages are printed to stderr.

    Returns:
        bool: True on success, False on failure (including missing file).
    """
    p = Path(image_path)

    if not p.exists():
        _say(quiet, f"File not found: {p}")
        return False

    zeroth: dict[int, Any] = {}
    exif_section: dict[int, Any] = {}
    exif_dict: dict[str, Any] = {
        "0th": zeroth,
        "Exif": exif_section,
        "GPS": {},
        "Interop": {},
        "1st": {},
        "thumbnail": None,
    }

    if file_time is None:
        file_time = datetime.fromtimestamp(os.path.getmtime(p))
    formatted_date = file_time.strftime("%Y:%m:%d %H:%M:%S")

    zeroth[piexif.ImageIFD.Software] = SOFTWARE.encode()
    zeroth[piexif.ImageIFD.DateTime] = formatted_date.encode()
    if description:
        text = build_description(description, model)
        zeroth[piexif.ImageIFD.ImageDescription] = text.encode(
            "utf-8", errors="ignore"
        )

    exif_section[piexif.ExifIFD.DateTimeOriginal] = formatted_date.encode()
    exif_section[piexif.ExifIFD.DateTimeDigitized] = formatted_date.encode()

    try:
        with Image.open(p) as img:
            exif_bytes = piexif.dump(exif_dict)
            img.info.pop("exif", None)
            img.save(p, format=img.format, exif=exif_bytes)
        _say(quiet, f"Updated EXIF data for {p}")
        return True
    except Exception as e:
        _say(quiet, f"Error updating EXIF data for {p}: {e}")
        return False


def _say(quiet: bool, message: str) -> None:
    if not quiet:
        print(message, file=sys.stderr)
