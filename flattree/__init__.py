"""
flattree — flatten a source tree into a single markdown document.

This package provides simple, composable tools to:
- render a directory structure as an indented outline,
- collect the content of selected files as labeled, fenced blocks,
- assemble both into one document, README and manifests first.

The API is based on ``pathlib.Path``. Traversal is sequential, depth-first
and deterministic.
"""

from __future__ import annotations

from .config import FlattenConfig
from .content import collect_contents, get_files_content, read_file_content
from .document import build_tree_and_contents, render_document, write_document
from .errors import DirectoryReadError, FlattenError
from .rules import DEFAULT_IGNORED_PATTERNS, is_ignored, is_priority, should_include
from .tree import build_and_draw_tree, build_tree, draw_tree

__all__ = [
    "DEFAULT_IGNORED_PATTERNS",
    "DirectoryReadError",
    "FlattenConfig",
    "FlattenError",
    "build_and_draw_tree",
    "build_tree",
    "build_tree_and_contents",
    "collect_contents",
    "draw_tree",
    "get_files_content",
    "is_ignored",
    "is_priority",
    "read_file_content",
    "render_document",
    "should_include",
    "write_document",
]
