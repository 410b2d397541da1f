# flattree/cli.py

"""Command-line entry point: ``flattree [ROOT] [--max-lines N] ...``."""


from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from flattree.config import DEFAULT_MAX_LINES, DEFAULT_OUTPUT, FlattenConfig
from flattree.document import write_document
from flattree.errors import FlattenError

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for the ``flattree`` command.

    Returns
    -------
    argparse.ArgumentParser
        Parser accepting an optional root directory plus the run options.
    """

    parser = argparse.ArgumentParser(
        prog="flattree",
        description=(
            "Flatten a source tree into a single markdown document: "
            "a directory listing followed by the content of selected files."
        ),
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to flatten (default: current directory)",
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=DEFAULT_MAX_LINES,
        metavar="N",
        help=(
            "Replace files longer than N lines with a placeholder; "
            f"0 replaces every file (default: {DEFAULT_MAX_LINES})"
        ),
    )
    parser.add_argument(
        "--include-ignored",
        action="store_true",
        help="Disable the built-in ignore patterns",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        metavar="FILE",
        help=f"Output file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Flatten a directory and write the markdown document.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command-line arguments, without the program name. ``None`` reads
        ``sys.argv``.

    Returns
    -------
    int
        ``0`` on success, ``1`` when the root cannot be flattened or an
        option is invalid.
    """

    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    root = args.root if args.root is not None else Path.cwd()
    try:
        config = FlattenConfig(
            max_lines=args.max_lines,
            include_ignored=args.include_ignored,
            follow_symlinks=args.follow_symlinks,
            output=args.output,
        )
        output = write_document(root, config)
    except (FlattenError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print(f"Markdown file created: {output}")
    return 0
