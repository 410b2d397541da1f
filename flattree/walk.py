# flattree/walk.py

"""
Depth-first directory traversal shared by the tree and content stages.

The walk is strictly sequential and pre-order. Ignored entries are pruned
before any descent, so an excluded directory is never enumerated.

Entries of a directory are sorted case-insensitively by name (ties broken by
the exact name) so that two runs over the same tree produce identical output.
"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from flattree.errors import DirectoryReadError
from flattree.rules import is_ignored

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathEntry:
    """
    A filesystem node met during one walk step.

    Attributes
    ----------
    path : pathlib.Path
        Absolute path of the entry.
    relative : str
        Path relative to the scan root, in POSIX form.
    is_dir : bool
        Whether the entry is a directory (symlinks to directories included).
    is_symlink : bool
        Whether the entry itself is a symbolic link.
    depth : int
        Nesting level; direct children of the root have depth 0.
    """

    path: Path
    relative: str
    is_dir: bool
    is_symlink: bool
    depth: int

    @property
    def name(self) -> str:
        return self.path.name


def is_dir(p: Path) -> bool:
    """Like ``Path.is_dir`` but ``False`` when the status can't be read."""

    try:
        return p.is_dir()
    except OSError:
        return False


def list_dir(d: Path) -> list[Path]:
    """
    Return the children of ``d`` in stable order.

    Raises
    ------
    DirectoryReadError
        If the directory cannot be enumerated.
    """

    try:
        children = list(d.iterdir())
    except OSError as exc:
        raise DirectoryReadError(d, exc) from exc
    children.sort(key=lambda p: (p.name.casefold(), p.name))
    return children


def iter_entries(
    root: Path,
    patterns: Iterable[str] = (),
    *,
    follow_symlinks: bool = False,
) -> Iterator[PathEntry]:
    """
    Yield every non-ignored entry under ``root`` in depth-first pre-order.

    Parameters
    ----------
    root : pathlib.Path
        Directory to walk. It is resolved before walking.
    patterns : Iterable[str], optional
        Ignore rule set matched against each entry's relative path.
    follow_symlinks : bool, default=False
        Whether to descend into symlinked directories. When ``False`` they
        are still yielded, as leaves.

    Yields
    ------
    PathEntry
        One entry per surviving file or directory.

    Raises
    ------
    ValueError
        If ``root`` is not a directory.
    DirectoryReadError
        If any directory along the walk cannot be listed.
    """

    root = root.resolve()
    if not root.is_dir():
        raise ValueError(f"Not a directory: {root}")
    patterns = tuple(patterns)

    def rec(d: Path, depth: int) -> Iterator[PathEntry]:
        for child in list_dir(d):
            relative = child.relative_to(root).as_posix()
            if is_ignored(relative, patterns):
                logger.debug("Ignoring %s", relative)
                continue

            entry = PathEntry(
                path=child,
                relative=relative,
                is_dir=is_dir(child),
                is_symlink=child.is_symlink(),
                depth=depth,
            )
            yield entry

            if entry.is_dir and (follow_symlinks or not entry.is_symlink):
                yield from rec(child, depth + 1)

    yield from rec(root, 0)
