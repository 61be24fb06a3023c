"""Declared-variable extraction for script bodies.

This is a light lexical scan, not a parser. It recognizes:
- let/const/var NAME followed by ``=``, ``;`` or end of text
- let/const/var { a, b: c, d = 1 } (object destructuring)
- let/const/var [ a, b = 2 ] (array destructuring)

For destructuring patterns the leftmost identifier of each comma-separated
piece is kept, after dropping ``: ...`` and ``= ...`` tails.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Set

from .segments import Segment, trim

# Line comments preceded by ":" (or a backslash) are left alone so URLs such as
# "https://example.com" survive stripping.
COMMENT_PATTERN = re.compile(r"/\*[\s\S]*?\*/|([^:\\]|^)//.*$", re.MULTILINE)

SIMPLE_DECLARATION = re.compile(r"\b(?:let|const|var)\s+(\w+)(?:\s*=|\s*;|\s*\Z)")
OBJECT_DESTRUCTURING = re.compile(r"\b(?:let|const|var)\s+\{([^}]+)\}")
ARRAY_DESTRUCTURING = re.compile(r"\b(?:let|const|var)\s+\[([^\]]+)\]")

DECLARATION_PATTERNS = (SIMPLE_DECLARATION, OBJECT_DESTRUCTURING, ARRAY_DESTRUCTURING)


def strip_comments(code: str) -> str:
    return COMMENT_PATTERN.sub(lambda m: m.group(1) or "", code)


def extract_variables(code: str) -> Set[str]:
    """Return the set of names declared in ``code``."""
    code = strip_comments(code)

    variables: Set[str] = set()
    for pattern in DECLARATION_PATTERNS:
        for match in pattern.finditer(code):
            for piece in match.group(1).split(","):
                name = trim(trim(piece).split(":")[0].split("=")[0])
                if name:
                    variables.add(name)
    return variables


def extract_variables_from_scripts(scripts: Iterable[Segment]) -> Set[str]:
    """Union of the names declared across every script segment."""
    variables: Set[str] = set()
    for script in scripts:
        variables |= extract_variables(script.content)
    return variables


def find_conflicting_variables(host: Set[str], block: Set[str]) -> List[str]:
    """Names declared on both sides, sorted for stable reporting."""
    return sorted(host & block)


__all__ = [
    "strip_comments",
    "extract_variables",
    "extract_variables_from_scripts",
    "find_conflicting_variables",
]
