"""Tests for single-use enforcement."""
from __future__ import annotations

import pytest

from xblock.core.compose.usage import UsageRecord, UsageRegistry
from xblock.exceptions import DuplicateUsageError

BLOCK = "/proj/src/Card.svelte.xblock"


class TestCheckAndRecord:
    def test_first_usage_is_recorded(self) -> None:
        registry = UsageRegistry()

        registry.check_and_record(BLOCK, "/proj/src/App.svelte", "Card")

        assert registry.get(BLOCK) == UsageRecord(used_by="/proj/src/App.svelte", alias="Card")
        assert len(registry) == 1

    def test_second_usage_fails(self) -> None:
        registry = UsageRegistry()
        registry.check_and_record(BLOCK, "/proj/src/App.svelte", "Card")

        with pytest.raises(DuplicateUsageError) as exc_info:
            registry.check_and_record(
                BLOCK, "/proj/src/Other.svelte", "MyCard", block_path="./Card.svelte.xblock"
            )

        err = exc_info.value
        assert err.current == UsageRecord(used_by="/proj/src/Other.svelte", alias="MyCard")
        assert err.original == UsageRecord(used_by="/proj/src/App.svelte", alias="Card")
        message = str(err)
        assert 'XBlock file "./Card.svelte.xblock" is already used.' in message
        assert 'Current file: /proj/src/Other.svelte (trying to import as "MyCard")' in message
        assert 'Previous usage: /proj/src/App.svelte (imported as "Card")' in message

    def test_error_lists_every_recorded_usage(self) -> None:
        registry = UsageRegistry()
        registry.check_and_record("/proj/A.svelte.xblock", "/proj/One.svelte", "A")
        registry.check_and_record("/proj/B.svelte.xblock", "/proj/Two.svelte", "B")

        with pytest.raises(DuplicateUsageError) as exc_info:
            registry.check_and_record("/proj/B.svelte.xblock", "/proj/Three.svelte", "B2")

        message = str(exc_info.value)
        assert '  - /proj/A.svelte.xblock (imported as "A" in /proj/One.svelte)' in message
        assert '  - /proj/B.svelte.xblock (imported as "B" in /proj/Two.svelte)' in message
        assert [u["path"] for u in exc_info.value.context["usages"]] == [
            "/proj/A.svelte.xblock",
            "/proj/B.svelte.xblock",
        ]

    def test_failed_attempt_does_not_replace_original(self) -> None:
        registry = UsageRegistry()
        registry.check_and_record(BLOCK, "/proj/App.svelte", "Card")

        with pytest.raises(DuplicateUsageError):
            registry.check_and_record(BLOCK, "/proj/Other.svelte", "Card")

        assert registry.get(BLOCK).used_by == "/proj/App.svelte"

    def test_same_document_twice_fails(self) -> None:
        registry = UsageRegistry()
        registry.check_and_record(BLOCK, "/proj/App.svelte", "Card")

        with pytest.raises(DuplicateUsageError):
            registry.check_and_record(BLOCK, "/proj/App.svelte", "Card")

    def test_clear_forgets_usages(self) -> None:
        registry = UsageRegistry()
        registry.check_and_record(BLOCK, "/proj/App.svelte", "Card")

        registry.clear()
        registry.check_and_record(BLOCK, "/proj/Other.svelte", "Card")

        assert registry.get(BLOCK).used_by == "/proj/Other.svelte"

    def test_json_error_payload(self) -> None:
        registry = UsageRegistry()
        registry.check_and_record(BLOCK, "/proj/App.svelte", "Card")

        with pytest.raises(DuplicateUsageError) as exc_info:
            registry.check_and_record(BLOCK, "/proj/Other.svelte", "Card")

        payload = exc_info.value.to_json_error()
        assert payload["code"] == "DuplicateUsageError"
        assert payload["context"]["original"] == {"used_by": "/proj/App.svelte", "alias": "Card"}
