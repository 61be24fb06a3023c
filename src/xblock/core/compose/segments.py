"""Segment parsing for host documents and block fragments.

A document is split into three groups:
- script segments: <script ...>...</script>
- style segments:  <style ...>...</style>
- the template: whatever remains once those regions are removed

Matching is text-based and non-recursive. Nested tags of the same name inside
a script or style body are not handled.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple

SCRIPT_TAG = "script"
STYLE_TAG = "style"

# ECMAScript WhiteSpace and LineTerminator code points. Unlike str.isspace()
# this includes U+FEFF and excludes U+001C..U+001F and U+0085.
TRIM_CHARS = (
    "\t\n\x0b\x0c\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    """Strip ECMAScript whitespace, including a byte order mark, from both ends."""
    return text.strip(TRIM_CHARS)


def tag_pattern(tag: str) -> Pattern[str]:
    """Pattern capturing (attrs, content) of every ``<tag ...>...</tag>`` pair."""
    name = re.escape(tag)
    return re.compile(rf"<{name}([^>]*)>([\s\S]*?)</{name}>")


SCRIPT_PATTERN = tag_pattern(SCRIPT_TAG)
STYLE_PATTERN = tag_pattern(STYLE_TAG)


@dataclass(frozen=True)
class Segment:
    """One script or style region.

    ``attrs`` is the trimmed raw attribute string of the enclosing tag and is
    used as the merge key; ``content`` is the trimmed inner text.
    """

    attrs: str
    content: str

    def render(self, tag: str) -> str:
        return render_tag(tag, self.attrs, self.content)


@dataclass(frozen=True)
class ParsedBlock:
    """Decomposition of one block fragment."""

    scripts: Tuple[Segment, ...]
    styles: Tuple[Segment, ...]
    template: str


def render_tag(tag: str, attrs: str, content: str) -> str:
    opening = f"<{tag} {attrs}>" if attrs else f"<{tag}>"
    return f"{opening}{content}</{tag}>"


class SegmentParser:
    """Split raw text into script segments, style segments and a template."""

    def __init__(self, template_tag: str = "template") -> None:
        name = re.escape(template_tag)
        self.wrapper_pattern = re.compile(rf"^<{name}>([\s\S]*)</{name}>$")

    def find_segments(self, text: str, pattern: Pattern[str]) -> List[Segment]:
        return [
            Segment(attrs=trim(match.group(1)), content=trim(match.group(2)))
            for match in pattern.finditer(text)
        ]

    def residual(self, text: str) -> str:
        """Text with every script and style region removed, trimmed."""
        return trim(STYLE_PATTERN.sub("", SCRIPT_PATTERN.sub("", text)))

    def unwrap(self, residual: str) -> str:
        """Strip a single enclosing template wrapper, if the whole residual is one."""
        match = self.wrapper_pattern.match(residual)
        if match:
            return trim(match.group(1))
        return residual

    def parse_block(self, text: str) -> ParsedBlock:
        return ParsedBlock(
            scripts=tuple(self.find_segments(text, SCRIPT_PATTERN)),
            styles=tuple(self.find_segments(text, STYLE_PATTERN)),
            template=self.unwrap(self.residual(text)),
        )

    def parse_document(self, text: str) -> ParsedBlock:
        """Split a host document. The residual is never unwrapped."""
        return ParsedBlock(
            scripts=tuple(self.find_segments(text, SCRIPT_PATTERN)),
            styles=tuple(self.find_segments(text, STYLE_PATTERN)),
            template=self.residual(text),
        )


__all__ = [
    "SCRIPT_TAG",
    "STYLE_TAG",
    "SCRIPT_PATTERN",
    "STYLE_PATTERN",
    "Segment",
    "ParsedBlock",
    "SegmentParser",
    "render_tag",
    "tag_pattern",
    "trim",
    "TRIM_CHARS",
]
