"""
xblock transform command.

SUMMARY: Transform a single host document and print the result
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from xblock.cli import OutputFormatter, add_json_flag, add_repo_root_flag, load_settings
from xblock.core.compose import BuildSession
from xblock.exceptions import XBlockError

SUMMARY = "Transform a single host document and print the result"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("host", help="Path to a host document")
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        settings = load_settings(args)
        host = Path(args.host).expanduser().resolve()
        text = host.read_text(encoding=settings.encoding)
        result = asyncio.run(BuildSession(settings=settings).transform(str(host), text))
    except (XBlockError, OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code="transform_error")
        return 1

    code = text if result is None else result.code
    if formatter.json_mode:
        formatter.json_output({"host": str(host), "changed": result is not None, "code": code})
    else:
        formatter.text(code)
    return 0
