"""Import-reference scanning for host documents.

Recognizes statements shaped exactly like::

    import Alias from "./path/to/Fragment.svelte.xblock";

Single or double quotes are accepted; the terminating semicolon is required.
Anything else is ignored.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import List, Pattern


@dataclass(frozen=True)
class ImportReference:
    """One block import found in a host document.

    ``block_path`` is the path as written in the import (suffix included);
    ``resolved_path`` is absolute, relative to the importing document.
    """

    raw_match: str
    alias: str
    block_path: str
    resolved_path: str


class ImportScanner:
    """Find block imports and resolve them against the importing document."""

    def __init__(self, block_suffix: str = ".svelte.xblock") -> None:
        self.block_suffix = block_suffix
        self.pattern: Pattern[str] = re.compile(
            rf"""import\s+(\w+)\s+from\s+["'](.+?){re.escape(block_suffix)}["'];"""
        )

    def resolve(self, document_id: str, block_path: str) -> str:
        base_dir = os.path.dirname(document_id)
        return os.path.abspath(os.path.join(base_dir, block_path))

    def scan(self, document_id: str, text: str) -> List[ImportReference]:
        """Every import in ``text``, in order of appearance, duplicates kept."""
        refs: List[ImportReference] = []
        for match in self.pattern.finditer(text):
            block_path = f"{match.group(2)}{self.block_suffix}"
            refs.append(
                ImportReference(
                    raw_match=match.group(0),
                    alias=match.group(1),
                    block_path=block_path,
                    resolved_path=self.resolve(document_id, block_path),
                )
            )
        return refs


__all__ = ["ImportReference", "ImportScanner"]
