"""
Auto-discovery CLI dispatcher for xblock.

Scans ``xblock/cli/commands`` for command modules and registers them.
Adding a new command = adding a .py file to that folder.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from xblock.exceptions import XBlockError


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"xblock.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered commands."""
    parser = argparse.ArgumentParser(
        prog="xblock",
        description="xblock - merge single-use block fragments into host documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging (sent to stderr)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    try:
        from xblock import __version__
        return __version__
    except ImportError:
        return "unknown"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the xblock CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "_func", None):
        parser.print_help()
        return 0

    _configure_logging(bool(getattr(args, "verbose", False)))

    try:
        return int(args._func(args) or 0)
    except XBlockError as exc:
        # Commands report their own domain errors; this is the last resort.
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


__all__ = ["build_parser", "discover_commands", "main"]
