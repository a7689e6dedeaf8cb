"""Command-line argument parsing for dirwalker.

This module defines the command-line interface for dirwalker,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirwalker import __version__
from dirwalker.config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ENTRIES


def non_negative_int(value: str) -> int:
    """Argparse type for --max-depth."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or greater, got {number}")
    return number


def positive_int(value: str) -> int:
    """Argparse type for --max-entries."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirwalker's options.
    """
    description = """
    dirwalker: bounded, deterministic directory traversal.

    Walks a directory without following symbolic links and prints its entries
    directories first, then files, each group sorted by path. The same
    filesystem state and options always produce the same output.
    """

    epilog = """
    Examples:
      # Print a tree of the current directory
      dirwalker .

      # Skip dotfiles and a build directory, two levels deep
      dirwalker -d -x ./target -m 1 .

      # Exclude files with gitignore-style patterns
      dirwalker -i "*.pyc" -i "__pycache__/" src

      # Depth-first listing, one "<depth><TAB><path>" line per entry
      dirwalker -f flat .

      # JSON document of the first 500 entries
      dirwalker -f json -n 500 .

      # Locate the first file named lib.rs and print its subtree
      dirwalker --find lib.rs .
    """

    parser = argparse.ArgumentParser(
        prog="dirwalker",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirwalker {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "root",
        type=Path,
        help="The directory or file to walk. Relative paths are resolved against the working directory.",
    )
    parser.add_argument(
        "-d",
        "--skip-dotted",
        action="store_true",
        help="Skip files and directories with a path component starting with a dot.",
    )
    parser.add_argument(
        "-x",
        "--skip-dir",
        type=Path,
        metavar="DIR",
        action="append",
        default=[],
        help="Directory to skip together with everything below it (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action="append",
        default=[],
        help=(
            "Gitignore-style pattern, matched relative to the root, of paths to skip. Can be specified "
            "multiple times; later patterns take precedence."
        ),
    )
    parser.add_argument(
        "-m",
        "--max-depth",
        type=non_negative_int,
        metavar="N",
        default=DEFAULT_MAX_DEPTH,
        help=f"Deepest level to include; the root's children are level 0 (default: {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "-n",
        "--max-entries",
        type=positive_int,
        metavar="N",
        default=DEFAULT_MAX_ENTRIES,
        help=f"Maximum number of entries to collect below the root (default: {DEFAULT_MAX_ENTRIES}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["tree", "flat", "json"],
        default="tree",
        help="Output format (default: tree).",
    )
    parser.add_argument(
        "--find",
        metavar="NAME",
        help="Print only the first entry named NAME, with its subtree. Exits with status 1 if none is found.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory and file counts to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and limits to stderr.",
    )

    return parser
