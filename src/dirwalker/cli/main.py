"""Command-line interface for dirwalker.

This module provides the ``dirwalker`` command, which walks a directory with
the library's filters and limits and prints the result as a tree, as a flat
depth-first listing, or as JSON.

Exit Codes:
    0: Successful completion
    1: Walk error, or --find matched nothing
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Tree of a project without dotfiles
    $ dirwalker -d /path/to/project

    # Display version information
    $ dirwalker --version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from dirwalker.cli.argparser import create_parser
from dirwalker.cli.signal_handler import setup_signal_handling, signal_handler
from dirwalker.entry_tree.entry_node import EntryNode
from dirwalker.exceptions import WalkError
from dirwalker.rendering import stream_tree_representation, to_json
from dirwalker.walker import Walker

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_walker(args: argparse.Namespace) -> Walker:
    """Translate parsed arguments into a configured Walker.

    Raises:
        WalkIOError: If a --skip-dir path can't be resolved.
    """
    walker = Walker(args.root).max_depth(args.max_depth).max_entries(args.max_entries)
    if args.skip_dotted:
        walker = walker.skip_dotted()
    if args.skip_dir:
        walker = walker.skip_directories(args.skip_dir)
    if args.ignore:
        walker = walker.skip_patterns(args.ignore)
    return walker


def format_flat(tree: EntryNode) -> Iterator[str]:
    """One ``<depth>\\t<path>`` line per entry, in depth-first order."""
    for item in tree:
        yield f"{item.depth}\t{item.entry.path}"


def format_output(tree: EntryNode, output_format: str, top_label: Optional[str] = None) -> Iterator[str]:
    if output_format == "json":
        yield to_json(tree, indent=2)
    elif output_format == "flat":
        yield from format_flat(tree)
    else:
        yield from stream_tree_representation(tree, top_label)


def format_counts(tree: EntryNode) -> str:
    """Format directory and file totals for the summary report."""
    return f"Directories: {tree.directory_count()}\nFiles: {tree.file_count()}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dirwalker command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        tree = build_walker(args).walk()
    except WalkError as e:
        logger.debug("Walk failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.find is not None:
        found = tree.find(args.find)
        if found is None:
            print(f"Error: no entry named {args.find!r} under {args.root}", file=sys.stderr)
            sys.exit(1)
        tree = found

    try:
        top_label = Path(args.root).resolve().name or None
        for line in format_output(tree, args.format, top_label):
            if signal_handler.interrupted():
                break
            print(line)
        sys.stdout.flush()
    except BrokenPipeError:
        signal_handler.sigpipe_received.set()

    if args.summary and not signal_handler.interrupted():
        print(format_counts(tree), file=sys.stderr)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
