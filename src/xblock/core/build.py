"""Directory build runner.

Transforms every host document under a source tree and writes the results
to the same relative paths under an output tree. Block fragments are inputs
only and are never copied.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from xblock.core.plugin import XBlockPlugin
from xblock.exceptions import XBlockError

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Outcome of one directory build."""

    transformed: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "transformed": sorted(self.transformed),
            "unchanged": sorted(self.unchanged),
            "failed": self.failed,
        }


def discover_host_documents(source_root: Path, host_suffix: str) -> List[Path]:
    return sorted(
        p for p in source_root.rglob(f"*{host_suffix}")
        if p.is_file() and p.name.endswith(host_suffix)
    )


def _error_payload(exc: Exception) -> Dict[str, Any]:
    if isinstance(exc, XBlockError):
        return exc.to_json_error()
    return {"message": str(exc), "code": type(exc).__name__, "context": {}}


async def _build_one(
    plugin: XBlockPlugin,
    path: Path,
    source_root: Path,
    output_root: Path,
    report: BuildReport,
) -> None:
    rel = path.relative_to(source_root).as_posix()
    encoding = plugin.session.settings.encoding
    try:
        text = path.read_text(encoding=encoding)
        result = await plugin.transform(text, str(path.resolve()))
    except (XBlockError, OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to transform %s: %s", rel, exc)
        report.failed[rel] = _error_payload(exc)
        return

    target = output_root / rel
    target.parent.mkdir(parents=True, exist_ok=True)
    if result is None:
        target.write_text(text, encoding=encoding)
        report.unchanged.append(rel)
        return

    target.write_text(result.code, encoding=encoding)
    report.transformed.append(rel)
    logger.info("Transformed %s", rel)


async def build_tree_async(
    source_root: Path,
    output_root: Path,
    plugin: Optional[XBlockPlugin] = None,
) -> BuildReport:
    """Transform all host documents under ``source_root`` concurrently."""
    plugin = plugin or XBlockPlugin()
    plugin.build_start()
    source_root = Path(source_root)
    output_root = Path(output_root)

    report = BuildReport()
    documents = discover_host_documents(source_root, plugin.session.settings.host_suffix)
    await asyncio.gather(
        *(_build_one(plugin, path, source_root, output_root, report) for path in documents)
    )
    return report


def build_tree(
    source_root: Path,
    output_root: Path,
    plugin: Optional[XBlockPlugin] = None,
) -> BuildReport:
    return asyncio.run(build_tree_async(source_root, output_root, plugin))


__all__ = ["BuildReport", "build_tree", "build_tree_async", "discover_host_documents"]
