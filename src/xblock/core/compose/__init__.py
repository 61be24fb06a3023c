"""Block merge engine.

Components (leaves first):
- segments:    split text into script/style segments and a template
- variables:   declared-name scan of script text
- usage:       single-use registry for block paths
- cache:       raw/parsed block cache over a reader collaborator
- merger:      segment and template merging
- imports:     import-reference scanning and path resolution
- transformer: per-document fold over import references
- session:     owner of the registry and cache for one build
"""
from .cache import BlockCache, Reader, file_reader
from .imports import ImportReference, ImportScanner
from .merger import merge_scripts, merge_segments, merge_styles, replace_block_in_template
from .segments import ParsedBlock, Segment, SegmentParser
from .session import BuildSession
from .transformer import TransformResult, XBlockTransformer
from .usage import UsageRecord, UsageRegistry
from .variables import (
    extract_variables,
    extract_variables_from_scripts,
    find_conflicting_variables,
    strip_comments,
)

__all__ = [
    "BlockCache",
    "Reader",
    "file_reader",
    "ImportReference",
    "ImportScanner",
    "merge_scripts",
    "merge_segments",
    "merge_styles",
    "replace_block_in_template",
    "ParsedBlock",
    "Segment",
    "SegmentParser",
    "BuildSession",
    "TransformResult",
    "XBlockTransformer",
    "UsageRecord",
    "UsageRegistry",
    "extract_variables",
    "extract_variables_from_scripts",
    "find_conflicting_variables",
    "strip_comments",
]
