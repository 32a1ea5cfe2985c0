"""Command-line options parser for the nano-banana MCP server.

Usage:
- build_parser() -> argparse.ArgumentParser
- parse_args(argv, parser=None) -> ParsedOptions

The parse result includes:
- output_dir: directory generated and edited images are written to
- model: Gemini model name used for both tools
- api_key: key taken from GEMINI_API_KEY or GOOGLE_API_KEY, if any
- add_prompt_metadata: whether prompts are stored in the saved images' EXIF
- quiet: whether per-request diagnostics on stderr are suppressed

Rules enforced:
- .env in the working directory is loaded first; a missing file is ignored.
- The optional positional argument overrides the default output directory.
- --model falls back to GEMINI_MODEL, then to DEFAULT_MODEL.
- -a/--add-prompt falls back to ADD_PROMPT_METADATA; invalid boolean values
  are reported as usage errors.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from image_common.env import add_prompt_metadata_enabled, first_env

_DOTENV_FILE = Path(".env")

DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_OUTPUT_DIR = "generated"


@dataclass
class ParsedOptions:
    """Structured result of parsing command-line arguments for the server.

    Attributes:
        output_dir: Directory (relative to the working directory unless
            absolute) where images are saved.
        model: Gemini model name passed to every generate_content call.
        api_key: Explicit API key, or None to let the SDK read its own env.
        add_prompt_metadata: Whether to write the prompt into saved images.
        quiet: Whether to suppress request/elapsed diagnostics on stderr.
    """

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    model: str = DEFAULT_MODEL
    api_key: str | None = None
    add_prompt_metadata: bool = False
    quiet: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="nano-banana-mcp",
        description="MCP stdio server for Gemini image generation and editing",
    )
    parser.add_argument(
        "output_dir",
        nargs="?",
        default=DEFAULT_OUTPUT_DIR,
        help=f"directory for saved images (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "-m",
        "--model",
        dest="model",
        default=None,
        help=f"Gemini model name (default: $GEMINI_MODEL or {DEFAULT_MODEL})",
    )
    parser.add_argument(
        "-a",
        "--add-prompt",
        dest="add_prompt_metadata",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="store the prompt in the saved image EXIF metadata",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="store_true",
        help="do not report requests and timings on stderr",
    )
    return parser


def parse_args(
    argv: list[str],
    *,
    parser: argparse.ArgumentParser | None = None,
) -> ParsedOptions:
    """Parse argv into a ParsedOptions object."""

    load_dotenv(_DOTENV_FILE)  # silently ignore if there is none, assume defaults.

    if parser is None:
        parser = build_parser()

    ns = parser.parse_args(argv)

    output_dir = str(ns.output_dir).strip()
    if not output_dir:
        parser.error("output directory must not be empty")

    model = ns.model or os.getenv("GEMINI_MODEL", "").strip() or DEFAULT_MODEL

    add_prompt_metadata = ns.add_prompt_metadata
    if add_prompt_metadata is None:
        try:
            add_prompt_metadata = add_prompt_metadata_enabled()
        except ValueError as exc:
            parser.error(str(exc))

    return ParsedOptions(
        output_dir=Path(output_dir),
        model=model,
        api_key=first_env("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        add_prompt_metadata=bool(add_prompt_metadata),
        quiet=bool(ns.quiet),
    )
