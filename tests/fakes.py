"""Stand-ins for the google-genai client and its response objects."""

from __future__ import annotations

import base64
from types import SimpleNamespace

# 1x1 red pixel
PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="
)
PNG_BYTES = base64.b64decode(PNG_BASE64)


class FakeModels:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def generate_content(self, *, model, contents):
        self.calls.append({"model": model, "contents": contents})
        if self.error is not None:
            raise self.error
        return self.response


class FakeClient:
    def __init__(self, response=None, error: Exception | None = None):
        self.models = FakeModels(response, error)


def make_response(*parts):
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))]
    )


def text_part(text: str):
    return SimpleNamespace(text=text, inline_data=None)


def image_part(data: bytes = PNG_BYTES, mime_type: str | None = "image/png"):
    return SimpleNamespace(
        text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type)
    )
