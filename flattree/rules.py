# flattree/rules.py

"""
Selection rules applied while flattening a directory.

Three independent predicates live here:

- :func:`is_ignored` decides whether a relative path is excluded (pure
  substring containment against an ignore rule set),
- :func:`should_include` decides whether a file's content is eligible for the
  output, based on its basename only,
- :func:`is_priority` decides whether an eligible file is emitted in the
  priority section, before all other files.

:func:`language_for` derives the fence label of a content block.
"""


from __future__ import annotations

from pathlib import PurePath
from typing import Iterable

DEFAULT_IGNORED_PATTERNS: tuple[str, ...] = (
    # JavaScript / Node
    "node_modules",
    "package-lock.json",
    "npm-debug.log",
    "yarn.lock",
    "yarn-error.log",
    "pnpm-lock.yaml",
    "bun.lockb",
    "deno.lock",
    # PHP
    "vendor",
    "composer.lock",
    # Python
    "__pycache__",
    ".pyc",
    ".pyo",
    ".pyd",
    ".Python",
    "pip-log.txt",
    "pip-delete-this-directory.txt",
    ".venv",
    "venv",
    "ENV",
    "env",
    # Ruby
    "Gemfile.lock",
    ".bundle",
    # JVM / .NET
    "target",
    ".class",
    ".gradle",
    "build",
    "pom.xml.tag",
    "pom.xml.releaseBackup",
    "pom.xml.versionsBackup",
    "pom.xml.next",
    "bin",
    "obj",
    ".suo",
    ".user",
    # Go / Rust
    "go.sum",
    "Cargo.lock",
    # VCS and OS noise
    ".git",
    ".svn",
    ".hg",
    ".DS_Store",
    "Thumbs.db",
    # Environment files
    ".env",
    ".env.local",
    ".env.development.local",
    ".env.test.local",
    ".env.production.local",
    # Framework caches and output
    ".svelte-kit",
    ".next",
    ".nuxt",
    ".vuepress",
    ".cache",
    "dist",
    "tmp",
    ".expo",
)

DOC_FILENAME = "readme.md"
MANIFEST_FILENAMES: frozenset[str] = frozenset(
    {"package.json", "requirements.txt", "pyproject.toml"}
)
SOURCE_EXTENSIONS: tuple[str, ...] = (".py", ".js", ".jsx", ".ts", ".tsx", ".json")
PRIORITY_FILENAMES: frozenset[str] = frozenset({DOC_FILENAME} | MANIFEST_FILENAMES)

FALLBACK_LANGUAGE = "text"


def is_ignored(relative_path: str, patterns: Iterable[str]) -> bool:
    """
    Return ``True`` if any pattern occurs as a substring of ``relative_path``.

    Matching is case-sensitive and has no glob or regex semantics: the
    pattern ``"env"`` excludes ``"src/environment.py"`` just as well as
    ``"env/"``.

    Parameters
    ----------
    relative_path : str
        Path relative to the scan root, in POSIX form.
    patterns : Iterable[str]
        Ignore rule set. An empty iterable never excludes anything.

    Returns
    -------
    bool
        ``True`` if the path is excluded.
    """

    return any(pattern in relative_path for pattern in patterns)


def should_include(filename: str) -> bool:
    """
    Return ``True`` if a file's content is eligible for the output.

    A basename is eligible when its lowercased form is the documentation
    filename, when it is exactly one of the manifest filenames, or when it
    ends with one of the source extensions. Directory context plays no role.

    Parameters
    ----------
    filename : str
        Basename of the file (not a path).

    Returns
    -------
    bool
        ``True`` if the file's content should be collected.
    """

    return (
        filename.lower() == DOC_FILENAME
        or filename in MANIFEST_FILENAMES
        or filename.endswith(SOURCE_EXTENSIONS)
    )


def is_priority(filename: str) -> bool:
    """Return ``True`` if ``filename`` belongs to the priority section."""

    return filename.lower() in PRIORITY_FILENAMES


def language_for(path: PurePath | str) -> str:
    """
    Return the fence label for a file: its lowercased extension without the
    dot, or ``"text"`` when it has none.
    """

    suffix = PurePath(path).suffix
    return suffix[1:].lower() or FALLBACK_LANGUAGE
