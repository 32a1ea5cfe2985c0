from __future__ import annotations

from pathlib import Path

import pytest

import imagegen.options as options_module
from imagegen.options import ParsedOptions


@pytest.fixture()
def test_env_file(tmp_path, monkeypatch) -> Path:
    """Provide an isolated .env file for each test that needs CLI parsing."""

    for key in (
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "GEMINI_MODEL",
        "ADD_PROMPT_METADATA",
    ):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    env_path = tmp_path / ".env"
    env_path.write_text("GEMINI_API_KEY=test-key\n")
    monkeypatch.setattr(options_module, "_DOTENV_FILE", env_path)
    return env_path


@pytest.fixture()
def in_tmp_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty working directory."""

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def quiet_options() -> ParsedOptions:
    return ParsedOptions(quiet=True)
