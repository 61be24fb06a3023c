"""
xblock CLI package.

Commands are auto-discovered from ``xblock/cli/commands/*.py``; each module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._output import OutputFormatter, format_json
from ._args import add_json_flag, add_repo_root_flag, get_repo_root, load_settings

__all__ = [
    "OutputFormatter",
    "format_json",
    "add_json_flag",
    "add_repo_root_flag",
    "get_repo_root",
    "load_settings",
]
