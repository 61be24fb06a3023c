"""Per-document transform: find block imports and fold them into the host.

Imports are applied strictly in order. Each step reads the text produced by
the previous one, so a block's variables are checked against declarations
introduced by earlier blocks in the same document.

Steps for every import:
1. USAGE     - check-and-record the resolved path (fails on reuse)
2. LOAD      - read and parse the block through the cache
3. CONFLICTS - compare host and block declarations on the current text
4. IMPORT    - drop the import statement
5. MERGE     - scripts, then template at the alias site, then styles
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from xblock.exceptions import VariableConflictError

from .cache import BlockCache
from .imports import ImportReference, ImportScanner
from .merger import merge_scripts, merge_styles, replace_block_in_template
from .usage import UsageRegistry
from .variables import extract_variables, extract_variables_from_scripts, find_conflicting_variables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformResult:
    """Replacement text for a host document. Source maps are not produced."""

    code: str
    map: Optional[Any] = None


class XBlockTransformer:
    """Drive import scanning, validation and merging for one host document."""

    def __init__(self, scanner: ImportScanner, registry: UsageRegistry, cache: BlockCache) -> None:
        self.scanner = scanner
        self.registry = registry
        self.cache = cache

    async def transform(self, document_id: str, text: str) -> Optional[TransformResult]:
        """Return None when ``text`` imports no blocks, else the merged text."""
        refs = self.scanner.scan(document_id, text)
        if not refs:
            return None

        current = text
        for ref in refs:
            current = await self._apply_import(document_id, current, ref)
        return TransformResult(code=current)

    async def _apply_import(self, document_id: str, current: str, ref: ImportReference) -> str:
        self.registry.check_and_record(
            ref.resolved_path, document_id, ref.alias, block_path=ref.block_path
        )

        block = await self.cache.get_block(ref.resolved_path, block_path=ref.block_path)

        conflicts = find_conflicting_variables(
            extract_variables(current), extract_variables_from_scripts(block.scripts)
        )
        if conflicts:
            raise VariableConflictError(
                f'Variable name conflict detected in "{document_id}" when importing '
                f'"{ref.block_path}".\n'
                f"Conflicting variables: {', '.join(conflicts)}",
                document_id=document_id,
                block_path=ref.block_path,
                conflicts=conflicts,
            )

        current = current.replace(ref.raw_match, "", 1)
        current = merge_scripts(current, block.scripts)
        current = replace_block_in_template(current, ref.alias, block.template)
        current = merge_styles(current, block.styles)
        logger.debug("Merged %s into %s as %s", ref.block_path, document_id, ref.alias)
        return current


__all__ = ["TransformResult", "XBlockTransformer"]
