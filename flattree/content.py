# flattree/content.py

"""
File content collection.

This module selects the files whose content goes into the document, reads
them and formats each one as a labeled, fenced markdown block:

.. code-block:: text

    ## src/index.ts

    ```ts
    <content>
    ```

Features include:
- a single ordered walk bucketing files into a priority section (README and
  manifests) and an ordinary section,
- a line-count guard replacing oversized bodies with a placeholder,
- non-fatal per-file read errors rendered inline instead of raised.
"""


from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from flattree.config import DEFAULT_MAX_LINES
from flattree.rules import (
    DEFAULT_IGNORED_PATTERNS,
    is_priority,
    language_for,
    should_include,
)
from flattree.walk import iter_entries

logger = logging.getLogger(__name__)

OVERSIZE_MESSAGE = "File exceeds {max_lines} lines. Skipped."
READ_ERROR_MESSAGE = "Error reading file: {error}"


def count_lines(text: str) -> int:
    r"""
    Number of ``\n``-separated segments in ``text``.

    Only ``\n`` splits lines, and a trailing newline opens one more (empty)
    line, so ``"1\n2\n"`` counts as 3.
    """

    return text.count("\n") + 1


def read_file_content(
    path: Path,
    max_lines: int = DEFAULT_MAX_LINES,
    *,
    encoding: str = "utf-8",
) -> str:
    """
    Read a file for inclusion in the document.

    Per-file problems never raise. The returned string is one of:
    - the file's full text,
    - ``"File exceeds {max_lines} lines. Skipped."`` when the file has more
      than ``max_lines`` lines,
    - ``"Error reading file: {error}"`` when the file cannot be read or
      decoded.

    Parameters
    ----------
    path : pathlib.Path
        File to read.
    max_lines : int, default=1000
        Line-count ceiling.
    encoding : str, default="utf-8"
        Text encoding used to decode the file.

    Returns
    -------
    str
        Body of the content block.
    """

    try:
        # newline="" keeps \r\n and lone \r exactly as stored.
        with path.open(encoding=encoding, newline="") as f:
            data = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return READ_ERROR_MESSAGE.format(error=exc)

    if count_lines(data) > max_lines:
        logger.debug("Skipping body of %s: more than %d lines", path, max_lines)
        return OVERSIZE_MESSAGE.format(max_lines=max_lines)
    return data


def file_to_block(
    path: Path,
    relative: str,
    max_lines: int = DEFAULT_MAX_LINES,
    *,
    encoding: str = "utf-8",
) -> str:
    """
    Format a file as a markdown section headed by its relative path.

    The fence label is derived from the file's extension even when the body
    is a placeholder.
    """

    body = read_file_content(path, max_lines, encoding=encoding)
    return f"## {relative}\n\n```{language_for(path)}\n{body}\n```\n\n"


@dataclass
class ContentSections:
    """Content blocks split into the priority and ordinary sections."""

    priority: list[str] = field(default_factory=list)
    ordinary: list[str] = field(default_factory=list)

    def blocks(self) -> list[str]:
        """All blocks in output order: priority first."""
        return self.priority + self.ordinary

    def __len__(self) -> int:
        return len(self.priority) + len(self.ordinary)


def collect_contents(
    root: Path,
    patterns: Iterable[str] = DEFAULT_IGNORED_PATTERNS,
    max_lines: int = DEFAULT_MAX_LINES,
    *,
    follow_symlinks: bool = False,
    encoding: str = "utf-8",
) -> ContentSections:
    """
    Collect content blocks for every eligible file under ``root``.

    The directory is walked once, depth-first. Each non-ignored file that
    passes :func:`~flattree.rules.should_include` is formatted and appended to
    either the priority or the ordinary section, so a file can never appear
    twice. Walk order is preserved inside each section.

    Parameters
    ----------
    root : pathlib.Path
        Directory to scan.
    patterns : Iterable[str], optional
        Ignore rule set; ignored directories are never entered.
    max_lines : int, default=1000
        Line-count ceiling passed to :func:`read_file_content`.
    follow_symlinks : bool, default=False
        Whether to descend into symlinked directories.
    encoding : str, default="utf-8"
        Text encoding used when reading files.

    Returns
    -------
    ContentSections
        Formatted blocks, bucketed by section.

    Raises
    ------
    ValueError
        If ``root`` is not a directory.
    DirectoryReadError
        If a directory cannot be listed.
    """

    sections = ContentSections()
    for entry in iter_entries(root, patterns, follow_symlinks=follow_symlinks):
        if entry.is_dir or not should_include(entry.name):
            continue
        block = file_to_block(entry.path, entry.relative, max_lines, encoding=encoding)
        bucket = sections.priority if is_priority(entry.name) else sections.ordinary
        bucket.append(block)
        logger.debug("Collected %s", entry.relative)
    return sections


def get_files_content(
    root: Path,
    patterns: Iterable[str] = DEFAULT_IGNORED_PATTERNS,
    max_lines: int = DEFAULT_MAX_LINES,
    **kwargs,
) -> str:
    """Concatenated content blocks under ``root``, priority files first."""

    return "".join(collect_contents(root, patterns, max_lines, **kwargs).blocks())
