"""
xblock build command.

SUMMARY: Merge block fragments into every host document under a directory
"""

from __future__ import annotations

import argparse
from pathlib import Path

from xblock.cli import OutputFormatter, add_json_flag, add_repo_root_flag, load_settings
from xblock.core.build import build_tree
from xblock.core.compose import BuildSession
from xblock.core.plugin import XBlockPlugin
from xblock.exceptions import XBlockError

SUMMARY = "Merge block fragments into every host document under a directory"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("source", help="Source directory containing host documents")
    parser.add_argument("output", help="Output directory for transformed documents")
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        settings = load_settings(args)
        source = Path(args.source).expanduser().resolve()
        if not source.is_dir():
            raise NotADirectoryError(f"Source directory not found: {source}")

        plugin = XBlockPlugin(BuildSession(settings=settings))
        report = build_tree(source, Path(args.output).expanduser().resolve(), plugin)
    except (XBlockError, OSError) as e:
        formatter.error(e, error_code="build_error")
        return 1

    if not report.ok:
        if formatter.json_mode:
            formatter.json_output({"status": "failed", **report.to_dict()})
        else:
            for rel, payload in sorted(report.failed.items()):
                formatter.error(RuntimeError(payload["message"]), f"{rel}: {payload['message']}")
        return 1

    formatter.success(
        report.to_dict(),
        f"Transformed {len(report.transformed)} document(s), "
        f"{len(report.unchanged)} unchanged",
    )
    return 0
