"""Tests for segment merging and template substitution."""
from __future__ import annotations

from xblock.core.compose.merger import (
    merge_scripts,
    merge_styles,
    replace_block_in_template,
)
from xblock.core.compose.segments import Segment


class TestMergeScripts:
    def test_merges_into_tag_with_identical_attrs(self) -> None:
        host = '<script lang="ts">\nlet a = 1;\n</script>\n<div/>'

        result = merge_scripts(host, [Segment(attrs='lang="ts"', content="let c = 3;")])

        assert result == '<script lang="ts">\nlet a = 1;\n\nlet c = 3;</script>\n<div/>'

    def test_host_attrs_are_compared_trimmed(self) -> None:
        host = '<script  lang="ts" >let a = 1;</script>'

        result = merge_scripts(host, [Segment(attrs='lang="ts"', content="let b = 2;")])

        assert result == '<script lang="ts">let a = 1;\nlet b = 2;</script>'

    def test_host_attrs_with_byte_order_mark_still_match(self) -> None:
        host = '<script\ufeff lang="ts">let a = 1;</script>'

        result = merge_scripts(host, [Segment(attrs='lang="ts"', content="let b = 2;")])

        assert result == '<script lang="ts">let a = 1;\nlet b = 2;</script>'

    def test_appends_when_no_attrs_match(self) -> None:
        host = '<script lang="ts">let a = 1;</script>'

        result = merge_scripts(host, [Segment(attrs="", content="let b = 2;")])

        assert result == '<script lang="ts">let a = 1;</script>\n<script>let b = 2;</script>'

    def test_merges_into_first_matching_tag_only(self) -> None:
        host = "<script>one</script><script>two</script>"

        result = merge_scripts(host, [Segment(attrs="", content="three")])

        assert result == "<script>one\nthree</script><script>two</script>"

    def test_later_segments_see_earlier_merges(self) -> None:
        host = "<p/>"
        segments = [
            Segment(attrs='context="module"', content="export const a = 1;"),
            Segment(attrs='context="module"', content="export const b = 2;"),
        ]

        result = merge_scripts(host, segments)

        assert result == '<p/>\n<script context="module">export const a = 1;\nexport const b = 2;</script>'


class TestMergeStyles:
    def test_merges_and_appends_styles(self) -> None:
        host = "<style>p { margin: 0; }</style>"
        styles = [
            Segment(attrs="", content="b { color: red; }"),
            Segment(attrs='lang="scss"', content="i { color: blue; }"),
        ]

        result = merge_styles(host, styles)

        assert result == (
            "<style>p { margin: 0; }\nb { color: red; }</style>"
            '\n<style lang="scss">i { color: blue; }</style>'
        )

    def test_scripts_are_left_alone(self) -> None:
        host = "<script>let a;</script>"

        assert merge_styles(host, []) == host


class TestReplaceBlockInTemplate:
    def test_self_closing_forms(self) -> None:
        host = "<Foo/>|<Foo />|<Foo>"

        assert replace_block_in_template(host, "Foo", "<p>Hi</p>") == "<p>Hi</p>|<p>Hi</p>|<p>Hi</p>"

    def test_every_occurrence_is_replaced(self) -> None:
        host = "<div><Foo /></div><span><Foo /></span>"

        result = replace_block_in_template(host, "Foo", "<p>Hi</p>")

        assert result == "<div><p>Hi</p></div><span><p>Hi</p></span>"

    def test_paired_usage_leaves_closing_tag(self) -> None:
        # Known limitation: the closing tag of a paired usage is not removed.
        result = replace_block_in_template("<Foo></Foo>", "Foo", "<p>Hi</p>")

        assert result == "<p>Hi</p></Foo>"

    def test_tags_with_attributes_or_longer_names_are_untouched(self) -> None:
        host = '<FooBar /><Foo class="x" />'

        assert replace_block_in_template(host, "Foo", "<p/>") == host

    def test_template_is_inserted_literally(self) -> None:
        result = replace_block_in_template("<Foo />", "Foo", r"<p>\1 \g<0></p>")

        assert result == r"<p>\1 \g<0></p>"
