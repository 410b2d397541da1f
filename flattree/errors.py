# flattree/errors.py

"""
Exception types raised by the traversal core.

Only directory enumeration failures escape the core. Per-file problems
(unreadable, undecodable or oversized files) are turned into inline text by
:mod:`flattree.content` and never raise.
"""


from __future__ import annotations

from pathlib import Path


class FlattenError(Exception):
    """Base class for errors raised while flattening a directory."""


class DirectoryReadError(FlattenError):
    """
    A directory's entries could not be enumerated.

    This aborts the whole run: no partial tree or document is produced.

    Parameters
    ----------
    path : pathlib.Path
        Directory that could not be listed.
    reason : OSError
        Underlying filesystem error.
    """

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason
