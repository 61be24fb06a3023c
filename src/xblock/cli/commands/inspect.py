"""
xblock inspect command.

SUMMARY: Show how a block fragment is split into scripts, styles and template
"""

from __future__ import annotations

import argparse
from pathlib import Path

from xblock.cli import OutputFormatter, add_json_flag, add_repo_root_flag, load_settings
from xblock.core.compose import SegmentParser, extract_variables_from_scripts
from xblock.exceptions import XBlockError

SUMMARY = "Show how a block fragment is split into scripts, styles and template"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("block", help="Path to a block fragment")
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        settings = load_settings(args)
        text = Path(args.block).read_text(encoding=settings.encoding)
    except (XBlockError, OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code="inspect_error")
        return 1

    block = SegmentParser(template_tag=settings.template_tag).parse_block(text)
    data = {
        "block": str(args.block),
        "scripts": [{"attrs": s.attrs, "content": s.content} for s in block.scripts],
        "styles": [{"attrs": s.attrs, "content": s.content} for s in block.styles],
        "template": block.template,
        "variables": sorted(extract_variables_from_scripts(block.scripts)),
    }

    if formatter.json_mode:
        formatter.json_output(data)
        return 0

    formatter.text(f"Block: {data['block']}")
    formatter.text(f"  scripts: {len(block.scripts)}")
    for seg in block.scripts:
        formatter.text(f"    - <script{' ' + seg.attrs if seg.attrs else ''}>")
    formatter.text(f"  styles: {len(block.styles)}")
    for seg in block.styles:
        formatter.text(f"    - <style{' ' + seg.attrs if seg.attrs else ''}>")
    formatter.text(f"  variables: {', '.join(data['variables']) or '(none)'}")
    formatter.text("  template:")
    for line in block.template.splitlines():
        formatter.text(f"    {line}")
    return 0
