# flattree/config.py

"""Run configuration for a single flatten operation."""


from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from flattree.rules import DEFAULT_IGNORED_PATTERNS

DEFAULT_MAX_LINES = 1000
DEFAULT_OUTPUT = Path("combined_repo.md")


@dataclass(frozen=True)
class FlattenConfig:
    """
    Immutable options for one run.

    Parameters
    ----------
    max_lines : int, default=1000
        Files with more lines than this are listed with a placeholder body.
        ``0`` replaces every body; negative values are rejected.
    include_ignored : bool, default=False
        If ``True``, the ignore rule set is treated as empty for both the tree
        and the content sections.
    ignored_patterns : tuple[str, ...]
        Substring patterns excluding paths (and whole subtrees).
    follow_symlinks : bool, default=False
        Whether to descend into symlinked directories.
    encoding : str, default="utf-8"
        Encoding used to read files and to write the document.
    output : pathlib.Path, default="combined_repo.md"
        Destination of the rendered document.
    """

    max_lines: int = DEFAULT_MAX_LINES
    include_ignored: bool = False
    ignored_patterns: tuple[str, ...] = DEFAULT_IGNORED_PATTERNS
    follow_symlinks: bool = False
    encoding: str = "utf-8"
    output: Path = DEFAULT_OUTPUT

    def __post_init__(self) -> None:
        if self.max_lines < 0:
            raise ValueError(f"max_lines must be >= 0, got {self.max_lines}")
        # Accept any iterable / path-like but store the canonical types.
        object.__setattr__(self, "ignored_patterns", tuple(self.ignored_patterns))
        object.__setattr__(self, "output", Path(self.output))

    @property
    def effective_patterns(self) -> tuple[str, ...]:
        """Ignore rule set actually applied during the run."""
        return () if self.include_ignored else self.ignored_patterns
