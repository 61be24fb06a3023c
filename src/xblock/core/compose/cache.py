"""Content cache for block fragments, keyed by resolved path.

Raw reads are delegated to a reader collaborator. Only successful reads are
cached; a failed read raises BlockReadError and leaves no entry behind so a
later attempt can succeed once the file is fixed.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from pathlib import Path
from typing import Awaitable, Callable, Dict, Optional, Union

from xblock.exceptions import BlockReadError

from .segments import ParsedBlock, SegmentParser

logger = logging.getLogger(__name__)

Reader = Callable[[str], Union[str, Awaitable[str]]]


def file_reader(encoding: str = "utf-8") -> Reader:
    """Reader that loads files from disk off the event loop."""

    async def read(resolved_path: str) -> str:
        return await asyncio.to_thread(Path(resolved_path).read_text, encoding=encoding)

    return read


class BlockCache:
    """Resolve a block path to its raw text and parsed form once."""

    def __init__(self, reader: Optional[Reader] = None, parser: Optional[SegmentParser] = None) -> None:
        self.reader: Reader = reader or file_reader()
        self.parser = parser or SegmentParser()
        self._raw: Dict[str, str] = {}
        self._parsed: Dict[str, ParsedBlock] = {}

    def __contains__(self, resolved_path: str) -> bool:
        return resolved_path in self._raw

    async def load(self, resolved_path: str, *, block_path: Optional[str] = None) -> str:
        """Raw text of the block at ``resolved_path``."""
        cached = self._raw.get(resolved_path)
        if cached is not None:
            logger.debug("Block cache hit: %s", resolved_path)
            return cached

        logger.debug("Block cache miss: %s", resolved_path)
        display = block_path or resolved_path
        try:
            result = self.reader(resolved_path)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.error("Error reading XBlock file: %s (%s)", resolved_path, exc)
            raise BlockReadError(
                f"Failed to read XBlock file: {display}. "
                "Please ensure the file exists and is accessible.",
                block_path=display,
                resolved_path=resolved_path,
            ) from exc

        self._raw[resolved_path] = result
        return result

    async def get_block(self, resolved_path: str, *, block_path: Optional[str] = None) -> ParsedBlock:
        """Parsed form of the block, parsing on first access only."""
        parsed = self._parsed.get(resolved_path)
        if parsed is not None:
            return parsed
        raw = await self.load(resolved_path, block_path=block_path)
        parsed = self.parser.parse_block(raw)
        self._parsed[resolved_path] = parsed
        return parsed

    def clear(self) -> None:
        self._raw.clear()
        self._parsed.clear()


__all__ = ["BlockCache", "Reader", "file_reader"]
