import io
import json
import sys

import pytest

import imagegen.options as options_module
from imagegen import gemini
from imagemcp import main as imagemcp_main

pytestmark = pytest.mark.usefixtures("test_env_file")


def run_main(argv, monkeypatch, stdin_text=""):
    monkeypatch.setattr(sys, "argv", ["nano-banana-mcp"] + argv)
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin_text))
    with pytest.raises(SystemExit) as excinfo:
        imagemcp_main()
    return excinfo.value.code


def test_main_serves_stdin_until_eof(monkeypatch, capsys):
    """main() builds the client from parsed options and answers each request.

    stdout must carry nothing but JSON-RPC replies so MCP hosts can parse it
    line by line.
    """
    produced = []

    def fake_load_dotenv(path):  # noqa: ARG001 - signature matches load_dotenv
        produced.append("dotenv")
        return True

    monkeypatch.setattr(options_module, "load_dotenv", fake_load_dotenv)
    monkeypatch.setattr(
        gemini, "make_client", lambda api_key: produced.append(("client", api_key))
    )
    requests = [
        {"jsonrpc": "2.0", "id": 1, "method": "initialize"},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
    ]
    stdin_text = "\n".join(json.dumps(request) for request in requests) + "\n"

    code = run_main(["out"], monkeypatch, stdin_text)

    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)["id"] for line in lines] == [1, 2]
    assert produced[0] == "dotenv"
    assert produced[1][0] == "client"


def test_main_exits_when_client_cannot_be_built(monkeypatch, capsys):
    def broken_client(api_key):
        raise ValueError("Missing key inputs argument!")

    monkeypatch.setattr(gemini, "make_client", broken_client)

    code = run_main([], monkeypatch)

    assert code == 1
    err = capsys.readouterr().err
    assert "error: failed to create Gemini client: Missing key inputs argument!" in err
