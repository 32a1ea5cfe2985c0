"""imagemcp package entrypoint.

main() parses command-line options using imagegen.options, builds the Gemini
client and serves MCP requests over stdin/stdout via imagemcp.server.
"""

from __future__ import annotations

import sys

from imagegen.options import parse_args


def main() -> None:
    """CLI entrypoint: parse argv, build the client, and serve until EOF."""

    parsed = parse_args(sys.argv[1:])

    from imagegen import gemini

    try:
        client = gemini.make_client(parsed.api_key)
    except Exception as exc:
        print(f"error: failed to create Gemini client: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from .server import Server

    try:
        status = Server(client, parsed).run()
    except Exception as exc:
        print(f"error: server error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    raise SystemExit(status)
