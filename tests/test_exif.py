from __future__ import annotations

from datetime import datetime

import piexif
from PIL import Image

from imagegen import exif


def test_set_exif_data_rewrites_exif_and_description(tmp_path):
    image_path = tmp_path / "sample.jpg"
    Image.new("RGB", (32, 32), color="white").save(image_path)

    fixed_time = datetime(2024, 1, 2, 3, 4, 5)

    assert exif.set_exif_data(
        image_path,
        description="enchanted forest",
        model="gemini-2.5-flash-image",
        file_time=fixed_time,
    )

    metadata = piexif.load(str(image_path))
    assert (
        metadata["0th"][piexif.ImageIFD.ImageDescription]
        == b"Model: gemini-2.5-flash-image Prompt: enchanted forest"
    )
    assert metadata["0th"][piexif.ImageIFD.Software] == exif.SOFTWARE.encode()
    assert metadata["Exif"][piexif.ExifIFD.DateTimeOriginal] == b"2024:01:02 03:04:05"

    # Running again without a description should fully rewrite EXIF and omit the tag
    assert exif.set_exif_data(image_path, file_time=fixed_time)
    metadata = piexif.load(str(image_path))
    assert piexif.ImageIFD.ImageDescription not in metadata["0th"]


def test_set_exif_data_missing_file(tmp_path):
    assert not exif.set_exif_data(tmp_path / "missing.png", description="x")


def test_set_exif_data_unreadable_image(tmp_path):
    bogus = tmp_path / "bogus.png"
    bogus.write_bytes(b"not an image")

    assert not exif.set_exif_data(bogus, description="x")


def test_build_description_flattens_newlines():
    assert exif.build_description("line one\nline two") == "Prompt: line one line two"
    assert (
        exif.build_description("hat\r\non cat", "m1") == "Model: m1 Prompt: hat on cat"
    )
