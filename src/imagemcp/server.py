"""Line-delimited JSON-RPC server loop."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from typing import Any, TextIO

from imagegen.options import ParsedOptions

from . import protocol
from .tools import TOOL_HANDLERS


class Server:
    """Dispatch MCP requests to the image tools, one request at a time."""

    def __init__(self, client: Any, options: ParsedOptions | None = None) -> None:
        self.client = client
        self.options = options or ParsedOptions()

    def handle_request(self, request: Mapping[str, Any]) -> dict[str, Any] | None:
        """Return the reply for one request, or None for notifications."""

        method = request.get("method")
        request_id = request.get("id")

        if method == "initialize":
            return protocol.result_response(request_id, protocol.initialize_result())
        if isinstance(method, str) and protocol.is_notification(method):
            return None
        if method == "tools/list":
            return protocol.result_response(request_id, {"tools": protocol.TOOLS})
        if method == "tools/call":
            return self.handle_call_tool(request_id, request.get("params"))
        return protocol.error_response(
            request_id, protocol.METHOD_NOT_FOUND, "Method not found"
        )

    def handle_call_tool(self, request_id: Any, params: Any) -> dict[str, Any]:
        if not isinstance(params, Mapping):
            return _invalid_params(request_id)
        name = params.get("name", "")
        arguments = params.get("arguments")
        if not isinstance(name, str):
            return _invalid_params(request_id)
        if arguments is not None and not isinstance(arguments, Mapping):
            return _invalid_params(request_id)

        handler = TOOL_HANDLERS.get(name)
        if handler is None:
            return protocol.error_response(
                request_id, protocol.METHOD_NOT_FOUND, f"Unknown tool: {name}"
            )

        try:
            result = handler(self.client, arguments, self.options)
        except Exception as exc:
            if not self.options.quiet:
                print(f"error: {name}: {exc}", file=sys.stderr)
            result = protocol.tool_result(
                [protocol.text_content(f"Error: {exc}")], is_error=True
            )
        return protocol.result_response(request_id, result)

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
        """Serve requests from stdin until EOF, writing one reply line per request."""

        stdin = _replace_undecodable(stdin if stdin is not None else sys.stdin)
        stdout = stdout if stdout is not None else sys.stdout

        for line in stdin:
            line = line.strip()
            if not line:
                continue
            request = _decode_request(line)
            if request is None:
                continue

            response = self.handle_request(request)
            if response is None:
                continue

            print(json.dumps(response, separators=(",", ":")), file=stdout, flush=True)

        return 0


def _decode_request(line: str) -> Mapping[str, Any] | None:
    try:
        payload = json.loads(line)
    except (ValueError, RecursionError) as exc:
        print(f"warning: skipping malformed request: {exc}", file=sys.stderr)
        return None
    if not isinstance(payload, Mapping) or not isinstance(payload.get("method"), str):
        print("warning: skipping request without a method", file=sys.stderr)
        return None
    return payload


def _replace_undecodable(stream: TextIO) -> TextIO:
    # invalid UTF-8 becomes U+FFFD instead of ending the loop
    reconfigure = getattr(stream, "reconfigure", None)
    if callable(reconfigure):
        reconfigure(errors="replace")
    return stream


def _invalid_params(request_id: Any) -> dict[str, Any]:
    return protocol.error_response(request_id, protocol.INVALID_PARAMS, "Invalid params")
