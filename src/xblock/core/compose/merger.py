"""Merge a block's segments and template into host text.

Each function takes the host's current text and returns the new text; none
of them mutate shared state.
"""
from __future__ import annotations

import re
from typing import Iterable

from .segments import SCRIPT_PATTERN, SCRIPT_TAG, STYLE_PATTERN, STYLE_TAG, Segment, render_tag, trim


def merge_segments(text: str, segments: Iterable[Segment], *, tag: str, pattern: re.Pattern[str]) -> str:
    """Merge each segment into the first host tag with identical attrs.

    Host content and block content are joined with a newline. When no host tag
    carries the same attribute string a new tag is appended to the text.
    """
    for segment in segments:
        host_match = next(
            (m for m in pattern.finditer(text) if trim(m.group(1)) == segment.attrs),
            None,
        )
        if host_match is not None:
            merged = render_tag(tag, segment.attrs, f"{host_match.group(2)}\n{segment.content}")
            text = text[: host_match.start()] + merged + text[host_match.end():]
        else:
            text += "\n" + segment.render(tag)
    return text


def merge_scripts(text: str, scripts: Iterable[Segment]) -> str:
    return merge_segments(text, scripts, tag=SCRIPT_TAG, pattern=SCRIPT_PATTERN)


def merge_styles(text: str, styles: Iterable[Segment]) -> str:
    return merge_segments(text, styles, tag=STYLE_TAG, pattern=STYLE_PATTERN)


def replace_block_in_template(text: str, alias: str, template: str) -> str:
    """Replace every ``<Alias>``, ``<Alias/>`` or ``<Alias />`` with the template.

    A closing ``</Alias>`` from a paired usage is not matched and stays in the
    output.
    """
    usage = re.compile(rf"<{re.escape(alias)}\s*/?>")
    return usage.sub(lambda _m: template, text)


__all__ = ["merge_segments", "merge_scripts", "merge_styles", "replace_block_in_template"]
