"""Thin wrapper around the google-genai client for image models."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pprint import pprint
from typing import Any

from google import genai
from google.genai import types

from image_common.media import DEFAULT_MIME_TYPE


@dataclass
class ModelOutput:
    """Image and text extracted from a single generate_content reply."""

    image: bytes | None = None
    mime_type: str = DEFAULT_MIME_TYPE
    text: str = ""


def make_client(api_key: str | None = None) -> genai.Client:
    if api_key:
        return genai.Client(api_key=api_key)
    return genai.Client()


def edit_contents(image: bytes, mime_type: str, prompt: str) -> list[types.Part]:
    return [
        types.Part.from_bytes(data=image, mime_type=mime_type),
        types.Part.from_text(text=prompt),
    ]


def invoke(
    client: Any,
    model: str,
    contents: Any,
    *,
    kind: str,
    summary: dict[str, Any] | None = None,
    quiet: bool = False,
) -> ModelOutput:
    """Call generate_content once and collect its image and text parts.

    Errors from the SDK propagate unchanged; the caller decides how to
    report them.
    """

    if not quiet:
        _emit_request_info(model, kind, summary or {})
    start_time = time.perf_counter()

    response = client.models.generate_content(model=model, contents=contents)

    elapsed = time.perf_counter() - start_time
    if not quiet:
        _emit_elapsed(elapsed)

    return extract_output(response)


def extract_output(response: Any) -> ModelOutput:
    """Concatenate text parts and keep the last inline image of the first candidate."""

    output = ModelOutput()
    for part in _first_candidate_parts(response):
        text = getattr(part, "text", None)
        if text:
            output.text += text
            continue
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            output.image = inline.data
            output.mime_type = getattr(inline, "mime_type", None) or DEFAULT_MIME_TYPE
    return output


def _first_candidate_parts(response: Any) -> Sequence[Any]:
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    if content is None:
        return []
    return getattr(content, "parts", None) or []


def _emit_request_info(model: str, kind: str, summary: dict[str, Any]) -> None:
    print("Request:", file=sys.stderr)
    pprint({"model": model, "tool": kind, **summary}, stream=sys.stderr)


def _emit_elapsed(elapsed_seconds: float) -> None:
    formatted = _format_elapsed(elapsed_seconds)
    print(f"Elapsed time: {formatted}", file=sys.stderr)


def _format_elapsed(elapsed_seconds: float) -> str:
    hours, remainder = divmod(elapsed_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{int(hours)}:{int(minutes):02d}:{seconds:06.3f}"


__all__ = [
    "ModelOutput",
    "edit_contents",
    "extract_output",
    "invoke",
    "make_client",
]
