# flattree/document.py

"""
Document assembly: tree section followed by content sections.
"""


from __future__ import annotations

import logging
from pathlib import Path

from flattree.config import FlattenConfig
from flattree.content import ContentSections, collect_contents
from flattree.tree import build_and_draw_tree

logger = logging.getLogger(__name__)

TREE_HEADING = "# Directory Structure"


def render_document(tree_text: str, sections: ContentSections) -> str:
    """
    Concatenate the fenced tree and the content blocks into one document.

    Parameters
    ----------
    tree_text : str
        Output of :func:`~flattree.tree.draw_tree`.
    sections : ContentSections
        Collected blocks; priority blocks are emitted before ordinary ones.

    Returns
    -------
    str
        The complete markdown document.
    """

    parts = [f"{TREE_HEADING}\n\n```\n{tree_text}\n```\n\n"]
    parts.extend(sections.blocks())
    return "".join(parts)


def build_tree_and_contents(root: Path, config: FlattenConfig | None = None) -> str:
    """
    Build the whole document for ``root`` in memory.

    Both stages use ``config.effective_patterns``, so ``include_ignored``
    affects the tree and the content alike. A
    :class:`~flattree.errors.DirectoryReadError` from either stage aborts the
    build.
    """

    config = config or FlattenConfig()
    patterns = config.effective_patterns

    tree_text = build_and_draw_tree(
        root, patterns, follow_symlinks=config.follow_symlinks
    )
    sections = collect_contents(
        root,
        patterns,
        config.max_lines,
        follow_symlinks=config.follow_symlinks,
        encoding=config.encoding,
    )
    logger.debug(
        "Collected %d priority and %d ordinary blocks",
        len(sections.priority),
        len(sections.ordinary),
    )
    return render_document(tree_text, sections)


def write_document(root: Path, config: FlattenConfig | None = None) -> Path:
    """
    Build the document for ``root`` and write it to ``config.output``.

    Nothing is written if building the document fails.

    Returns
    -------
    pathlib.Path
        The path written to.
    """

    config = config or FlattenConfig()
    document = build_tree_and_contents(root, config)
    config.output.write_text(document, encoding=config.encoding)
    logger.info("Wrote %s (%d characters)", config.output, len(document))
    return config.output
