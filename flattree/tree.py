# flattree/tree.py

"""
Directory tree building and rendering.

:func:`build_tree` turns a filtered depth-first walk into an ``anytree`` node
hierarchy, and :func:`draw_tree` renders that hierarchy as the indented
outline used in the "Directory Structure" section of the document:

.. code-block:: text

    README.md
    src/
      index.ts

Every non-ignored entry is listed, whether or not its content is later
selected. A directory whose children are all ignored still shows up as an
empty node.
"""


from __future__ import annotations

from pathlib import Path
from typing import Iterable

from anytree import Node, PreOrderIter

from flattree.rules import DEFAULT_IGNORED_PATTERNS
from flattree.walk import iter_entries

INDENT = "  "


def build_tree(
    root: Path,
    patterns: Iterable[str] = DEFAULT_IGNORED_PATTERNS,
    *,
    follow_symlinks: bool = False,
) -> Node:
    """
    Build an ``anytree`` hierarchy of the non-ignored entries under ``root``.

    Each node carries ``fs_path``, ``is_dir`` and ``is_symlink`` attributes.
    The returned root node represents ``root`` itself.

    Parameters
    ----------
    root : pathlib.Path
        Directory to scan.
    patterns : Iterable[str], optional
        Ignore rule set. Defaults to the built-in patterns; pass ``()`` to
        disable exclusion.
    follow_symlinks : bool, default=False
        Whether to descend into symlinked directories.

    Returns
    -------
    anytree.Node
        Root node of the tree.

    Raises
    ------
    ValueError
        If ``root`` is not a directory.
    DirectoryReadError
        If a directory cannot be listed. No partial tree is returned.
    """

    root = root.resolve()
    top = Node(root.name or str(root), fs_path=root, is_dir=True, is_symlink=False)

    # Pre-order guarantees a directory's node exists before its children.
    parents: dict[Path, Node] = {root: top}
    for entry in iter_entries(root, patterns, follow_symlinks=follow_symlinks):
        node = Node(
            entry.name,
            parent=parents[entry.path.parent],
            fs_path=entry.path,
            is_dir=entry.is_dir,
            is_symlink=entry.is_symlink,
        )
        if entry.is_dir:
            parents[entry.path] = node
    return top


def draw_tree(node: Node) -> str:
    """
    Render the descendants of ``node`` as an indented outline.

    Lines follow pre-order, are indented by two spaces per level below
    ``node``, and directories are suffixed with ``/``. ``node`` itself is not
    printed.
    """

    lines = []
    for child in PreOrderIter(node):
        if child is node:
            continue
        level = child.depth - node.depth - 1
        suffix = "/" if child.is_dir else ""
        lines.append(f"{INDENT * level}{child.name}{suffix}")
    return "\n".join(lines)


def build_and_draw_tree(
    root: Path,
    patterns: Iterable[str] = DEFAULT_IGNORED_PATTERNS,
    *,
    follow_symlinks: bool = False,
) -> str:
    """Shortcut for ``draw_tree(build_tree(...))``."""

    return draw_tree(build_tree(root, patterns, follow_symlinks=follow_symlinks))
