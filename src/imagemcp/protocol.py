"""JSON-RPC 2.0 envelopes and MCP constants."""

from __future__ import annotations

from typing import Any

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "nano-banana-mcp"
SERVER_VERSION = "2.0.0"

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

NOTIFICATION_PREFIX = "notifications/"

TOOLS: list[dict[str, Any]] = [
    {
        "name": "generate_image",
        "description": "Generate a new image from a text prompt using Google Gemini",
        "inputSchema": {
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "Text description of the image to generate",
                },
            },
            "required": ["prompt"],
        },
    },
    {
        "name": "edit_image",
        "description": "Edit an existing image using a text prompt",
        "inputSchema": {
            "type": "object",
            "properties": {
                "image_path": {
                    "type": "string",
                    "description": "Path to the image file to edit",
                },
                "prompt": {
                    "type": "string",
                    "description": "Text description of the edits to make",
                },
            },
            "required": ["image_path", "prompt"],
        },
    },
]


def result_response(request_id: Any, result: Any) -> dict[str, Any]:
    response: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}
    if request_id is not None:
        response["id"] = request_id
    response["result"] = result
    return response


def error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:
    response: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}
    if request_id is not None:
        response["id"] = request_id
    response["error"] = {"code": code, "message": message}
    return response


def initialize_result() -> dict[str, Any]:
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
    }


def text_content(text: str) -> dict[str, str]:
    return {"type": "text", "text": text}


def image_content(data: str, mime_type: str) -> dict[str, str]:
    return {"type": "image", "data": data, "mimeType": mime_type}


def tool_result(content: list[dict[str, str]], *, is_error: bool = False) -> dict[str, Any]:
    result: dict[str, Any] = {"content": content}
    if is_error:
        result["isError"] = True
    return result


def is_notification(method: str) -> bool:
    return method.startswith(NOTIFICATION_PREFIX)
