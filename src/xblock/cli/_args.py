"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from xblock.core.config import XBlockSettings


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (directory holding xblock.yaml)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Project root used to locate xblock.yaml (default: current directory)",
    )


def get_repo_root(args: argparse.Namespace) -> Path:
    raw = getattr(args, "repo_root", None)
    return Path(raw).expanduser().resolve() if raw else Path.cwd()


def load_settings(args: argparse.Namespace) -> XBlockSettings:
    """Load settings for the project root and apply the configured log level.

    --verbose wins over the configured level.
    """
    settings = XBlockSettings.load(get_repo_root(args))
    if not getattr(args, "verbose", False):
        logging.getLogger().setLevel(settings.log_level)
    return settings


__all__ = ["add_json_flag", "add_repo_root_flag", "get_repo_root", "load_settings"]
