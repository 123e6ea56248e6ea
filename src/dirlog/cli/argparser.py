"""Command-line argument parsing for dirlog.

This module defines the command-line interface for dirlog,
handling argument parsing and validation.
"""

import argparse

from dirlog import __version__
from dirlog.capacity import parse_size
from dirlog.types import RootParentAction


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirlog's options.
    """
    description = """
    dirlog: Rebuild a directory tree from a terminal log and report its sizes.

    The log is a transcript of shell commands and their output, one line at a time:

      $ cd <name>      change directory ("/" for the root, ".." for the parent)
      $ ls             list the current directory
      dir <name>       a directory in the listing
      <size> <name>    a file in the listing, with its size in bytes

    The total size of the tree is always reported. Directory sizes include the
    sizes of everything below them.
    """

    epilog = """
    Examples:
      # Total size of the reconstructed tree
      dirlog terminal.log

      # Read the log from stdin
      cat terminal.log | dirlog

      # Sum of all directories of at most 100000 bytes
      dirlog -a 100000 terminal.log

      # Smallest directory to delete to get 30000000 bytes free on a 70000000 byte disk
      dirlog -c 70000000 -r 30000000 terminal.log
      dirlog -c 70MB -r 30MB terminal.log

      # Print the tree with human-readable sizes
      dirlog -t -H terminal.log

      # Fail on "cd .." at the root instead of staying there
      dirlog -R raise terminal.log

      # Display version information and exit
      dirlog -V
    """

    parser = argparse.ArgumentParser(
        prog="dirlog",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"dirlog {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "log",
        nargs="?",
        default="-",
        help="The command log to read. Use '-' or omit to read from stdin.",
    )
    parser.add_argument(
        "-a",
        "--at-most",
        type=parse_size,
        metavar="SIZE",
        help="Report the sum of the sizes of all directories of at most SIZE bytes.",
    )
    parser.add_argument(
        "-c",
        "--capacity",
        type=parse_size,
        metavar="SIZE",
        help="Total disk capacity. Requires -r/--required.",
    )
    parser.add_argument(
        "-r",
        "--required",
        type=parse_size,
        metavar="SIZE",
        help=(
            "Free space needed on the disk. Reports the smallest directory whose deletion "
            "frees enough space. Requires -c/--capacity."
        ),
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Print the reconstructed tree before the report.",
    )
    parser.add_argument(
        "-R",
        "--root-parent",
        choices=[action.value for action in RootParentAction],
        default=RootParentAction.STAY.value,
        help='What "cd .." does at the root: stay there, or raise an error (default: stay).',
    )
    parser.add_argument(
        "-H",
        "--human-readable",
        action="store_true",
        help="Print sizes in human-readable form (e.g. 48.38 MB).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every tree operation to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    # Capacity and required free space only make sense together
    if (args.capacity is None) != (args.required is None):
        raise ValueError("-c/--capacity and -r/--required must be specified together")
    if args.capacity is not None and args.required > args.capacity:
        raise ValueError("--required cannot exceed --capacity")
