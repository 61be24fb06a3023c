"""Single-use tracking for block fragments.

Each resolved block path may be consumed once per build session. Recording
is a one-way latch: a usage stays recorded even if a later step for the same
import fails.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from xblock.exceptions import DuplicateUsageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsageRecord:
    """Who consumed a block and under which alias."""

    used_by: str
    alias: str


class UsageRegistry:
    """Session-wide map of resolved block path -> first usage."""

    def __init__(self) -> None:
        self._usages: Dict[str, UsageRecord] = {}

    def __contains__(self, resolved_path: str) -> bool:
        return resolved_path in self._usages

    def __len__(self) -> int:
        return len(self._usages)

    def get(self, resolved_path: str) -> UsageRecord | None:
        return self._usages.get(resolved_path)

    def items(self) -> List[Tuple[str, UsageRecord]]:
        return list(self._usages.items())

    def check_and_record(
        self,
        resolved_path: str,
        consumer_id: str,
        alias: str,
        *,
        block_path: str | None = None,
    ) -> None:
        """Record a usage, or raise DuplicateUsageError if one exists.

        Must stay synchronous: no suspension point may sit between the check
        and the write, otherwise concurrent transforms can both pass.
        """
        current = UsageRecord(used_by=consumer_id, alias=alias)
        original = self._usages.get(resolved_path)
        if original is None:
            self._usages[resolved_path] = current
            logger.debug("Recorded usage of %s by %s as %r", resolved_path, consumer_id, alias)
            return

        display = block_path or resolved_path
        usages = self.items()
        listing = "\n".join(
            f'  - {path} (imported as "{u.alias}" in {u.used_by})' for path, u in usages
        )
        raise DuplicateUsageError(
            f'XBlock file "{display}" is already used.\n'
            f'Current file: {consumer_id} (trying to import as "{alias}")\n'
            f'Previous usage: {original.used_by} (imported as "{original.alias}")\n'
            "\n"
            "All XBlock usages:\n"
            f"{listing}\n"
            "\n"
            "XBlocks can only be used once. Please ensure you're not accidentally "
            "importing the same XBlock multiple times.",
            block_path=display,
            current=current,
            original=original,
            usages=usages,
        )

    def clear(self) -> None:
        self._usages.clear()


__all__ = ["UsageRecord", "UsageRegistry"]
