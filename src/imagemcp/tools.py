"""generate_image and edit_image tool handlers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from imagegen.imagegen import ImageResult, edit_image, generate_image
from imagegen.options import ParsedOptions

from .protocol import image_content, text_content, tool_result


def call_generate_image(
    client: Any, arguments: Mapping[str, Any] | None, options: ParsedOptions
) -> dict[str, Any]:
    prompt = _required_string(arguments, "prompt")

    result = generate_image(client, prompt, options)
    if result.path is None:
        return _no_image("No image was generated.", result)

    text = f"Image generated and saved to: {result.path}\n\nPrompt: {prompt}"
    return _with_image(text, result)


def call_edit_image(
    client: Any, arguments: Mapping[str, Any] | None, options: ParsedOptions
) -> dict[str, Any]:
    image_path = _required_string(arguments, "image_path")
    prompt = _required_string(arguments, "prompt")

    result = edit_image(client, image_path, prompt, options)
    if result.path is None:
        return _no_image("No edited image was generated.", result)

    text = (
        f"Image edited and saved to: {result.path}\n\n"
        f"Original: {image_path}\nPrompt: {prompt}"
    )
    return _with_image(text, result)


TOOL_HANDLERS = {
    "generate_image": call_generate_image,
    "edit_image": call_edit_image,
}


def _required_string(arguments: Mapping[str, Any] | None, key: str) -> str:
    value = (arguments or {}).get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} is required")
    return value


def _no_image(message: str, result: ImageResult) -> dict[str, Any]:
    if result.text:
        message += f"\n\nModel response: {result.text}"
    return tool_result([text_content(message)])


def _with_image(text: str, result: ImageResult) -> dict[str, Any]:
    image = image_content(result.data or "", result.mime_type)
    return tool_result([text_content(text), image])
