"""Build-tool hook around a BuildSession.

Mirrors the shape build pipelines expect from a pre-transform plugin: a
name, an ordering hint, and an async ``transform(code, id)`` that returns
None for documents it does not touch.
"""
from __future__ import annotations

from typing import Optional

from xblock.core.compose import BuildSession, TransformResult


class XBlockPlugin:
    """Pre-transform hook that merges block fragments into host documents."""

    name = "svelte-xblock"
    enforce = "pre"

    def __init__(self, session: Optional[BuildSession] = None) -> None:
        self.session = session or BuildSession()

    def accepts(self, document_id: str) -> bool:
        return document_id.endswith(self.session.settings.host_suffix)

    def build_start(self) -> None:
        """Start a fresh build: previous usages and cached blocks are dropped."""
        self.session.reset()

    async def transform(self, code: str, id: str) -> Optional[TransformResult]:  # noqa: A002
        if not self.accepts(id):
            return None
        return await self.session.transform(id, code)


__all__ = ["XBlockPlugin"]
