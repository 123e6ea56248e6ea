"""Command-line interface for dirlog.

This module provides the command-line interface for dirlog, allowing users to rebuild a
directory tree from a terminal log and report its sizes. It handles argument parsing,
log loading, report formatting and error reporting.

Exit Codes:
    0: Successful completion
    1: Error while reading or parsing the log
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on Unix-like systems

Example:
    # Total size plus the sum of small directories
    $ dirlog -a 100000 terminal.log

    # Display version information
    $ dirlog --version
"""

import argparse
import logging
import os
import sys
from typing import Iterator, List, Optional

from humanfriendly import format_size

from dirlog.capacity import smallest_at_least, space_to_free, sum_at_most
from dirlog.cli.argparser import create_parser, validate_args
from dirlog.exceptions import DirLogError
from dirlog.file_system_tree.file_system_tree import FileSystemTree
from dirlog.parser import parse_lines
from dirlog.size_aggregator import subtree_sizes
from dirlog.types import RootParentAction

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_log(source: str) -> Iterator[str]:
    """Yield the lines of a command log.

    Args:
        source: Path to the log, or '-' for stdin.

    Yields:
        Lines of the log, including their line endings.
    """
    if source == "-":
        yield from sys.stdin
        return

    with open(source, encoding="utf-8") as log_file:
        yield from log_file


def format_value(size: Optional[int], human_readable: bool = False) -> str:
    """Format a size for display.

    Args:
        size: Size in bytes, or None when there is nothing to report.
        human_readable: Use humanfriendly's decimal units instead of raw bytes.

    Returns:
        The formatted size, or 'none' for None.
    """
    if size is None:
        return "none"
    if human_readable:
        return str(format_size(size))
    return str(size)


def build_report(tree: FileSystemTree, args: argparse.Namespace) -> List[str]:
    """Build the report lines requested on the command line.

    Args:
        tree: The reconstructed tree.
        args: Validated command-line arguments.

    Returns:
        Report lines, the total size first.
    """
    human = args.human_readable
    total = tree.get_size()
    report = [
        f"Total: {format_value(total, human)}",
        f"Directories: {tree.get_directory_count() + 1}",
        f"Files: {tree.get_file_count()}",
    ]

    if args.at_most is not None:
        small_total = sum_at_most(subtree_sizes(tree.root), args.at_most)
        limit = format_value(args.at_most, human)
        report.append(f"Directories of at most {limit}: {format_value(small_total, human)}")

    if args.capacity is not None:
        needed = space_to_free(total, args.capacity, args.required)
        smallest = smallest_at_least(subtree_sizes(tree.root), needed)
        report.append(f"Space to free: {format_value(needed, human)}")
        report.append(f"Smallest directory to delete: {format_value(smallest, human)}")

    return report


def main() -> None:
    """Main entry point for the dirlog command-line interface.

    Exit codes:
        0: Successful completion
        1: Error while reading or parsing the log
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on Unix-like systems
    """
    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
        args = parser.parse_args()

        # Perform additional validation beyond what argparse supports directly
        validate_args(args)
        configure_logging(args.verbose)

        tree = parse_lines(read_log(args.log), root_parent_action=RootParentAction(args.root_parent))

        if args.tree:
            for line in tree.stream_tree_representation():
                print(line)

        for line in build_report(tree, args):
            print(line)
        sys.stdout.flush()

    except DirLogError as e:
        if e.line is not None:
            logger.debug("Offending line: %r", e.line)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        # Keep the interpreter from complaining again when it flushes stdout at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
