"""Build session: the owner of all state shared across document transforms."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from xblock.core.config import XBlockSettings

from .cache import BlockCache, Reader, file_reader
from .imports import ImportScanner
from .segments import SegmentParser
from .transformer import TransformResult, XBlockTransformer
from .usage import UsageRecord, UsageRegistry

logger = logging.getLogger(__name__)


class BuildSession:
    """One build invocation.

    Holds the usage registry and block cache for every transform in the
    build. Create a new session (or call ``reset``) to start a fresh build;
    state never leaks between sessions.

    Example:
        session = BuildSession()
        result = await session.transform("/src/App.svelte", source)
    """

    def __init__(self, settings: Optional[XBlockSettings] = None, reader: Optional[Reader] = None) -> None:
        self.settings = settings or XBlockSettings()
        self.registry = UsageRegistry()
        self.cache = BlockCache(
            reader=reader or file_reader(self.settings.encoding),
            parser=SegmentParser(template_tag=self.settings.template_tag),
        )
        self.transformer = XBlockTransformer(
            scanner=ImportScanner(block_suffix=self.settings.block_suffix),
            registry=self.registry,
            cache=self.cache,
        )

    async def transform(self, document_id: str, text: str) -> Optional[TransformResult]:
        result = await self.transformer.transform(document_id, text)
        if result is None:
            logger.debug("No block imports in %s", document_id)
        return result

    def usages(self) -> List[Tuple[str, UsageRecord]]:
        return self.registry.items()

    def reset(self) -> None:
        """Forget all recorded usages and cached blocks."""
        self.registry.clear()
        self.cache.clear()


__all__ = ["BuildSession"]
