"""Tests for block import scanning and path resolution."""
from __future__ import annotations

from xblock.core.compose.imports import ImportReference, ImportScanner

DOC = "/proj/src/App.svelte"


class TestImportScanner:
    def test_finds_import_and_resolves_against_document_dir(self) -> None:
        text = '<script>\n  import Card from "./blocks/Card.svelte.xblock";\n</script>'

        refs = ImportScanner().scan(DOC, text)

        assert refs == [
            ImportReference(
                raw_match='import Card from "./blocks/Card.svelte.xblock";',
                alias="Card",
                block_path="./blocks/Card.svelte.xblock",
                resolved_path="/proj/src/blocks/Card.svelte.xblock",
            )
        ]

    def test_parent_directories_are_normalized(self) -> None:
        refs = ImportScanner().scan(DOC, "import Nav from '../shared/Nav.svelte.xblock';")

        assert refs[0].resolved_path == "/proj/shared/Nav.svelte.xblock"

    def test_ignores_other_imports(self) -> None:
        text = "\n".join(
            [
                'import Button from "./Button.svelte";',
                'import { onMount } from "svelte";',
                'import Card from "./Card.svelte.xblock"',
            ]
        )

        assert ImportScanner().scan(DOC, text) == []

    def test_keeps_order_and_duplicates(self) -> None:
        text = (
            'import A from "./A.svelte.xblock";\n'
            'import B from "./B.svelte.xblock";\n'
            'import Again from "./A.svelte.xblock";\n'
        )

        refs = ImportScanner().scan(DOC, text)

        assert [r.alias for r in refs] == ["A", "B", "Again"]
        assert refs[0].resolved_path == refs[2].resolved_path

    def test_custom_block_suffix(self) -> None:
        scanner = ImportScanner(block_suffix=".vue.xblock")
        text = 'import Card from "./Card.vue.xblock";\nimport Other from "./Other.svelte.xblock";'

        refs = scanner.scan("/proj/App.vue", text)

        assert [r.block_path for r in refs] == ["./Card.vue.xblock"]
        assert refs[0].resolved_path == "/proj/Card.vue.xblock"
