"""Command log parser.

This module replays a log of ``cd``/``ls`` commands and their directory listings
against a FileSystemTree, one line at a time. The grammar, per whitespace-tokenized
line, is:

    $ cd <arg>      change the current directory
    $ ls            no-op; the listing follows on the next lines
    dir <name>      a directory in the current directory
    <size> <name>   a file in the current directory

Every other two-token line is read as a file listing, so a command such as ``$ pwd``
fails with an invalid size. Lines with any other number of tokens are ignored.
Processing stops at the first error, which is raised with the offending line number
attached.

Example:
    >>> tree = parse('''
    ... $ cd /
    ... $ ls
    ... dir a
    ... 1200 b.txt
    ... $ cd a
    ... $ ls
    ... 300 c.dat
    ... ''')
    >>> tree.get_size()
    1500
"""

import logging
from typing import Iterable

from dirlog.exceptions import DirLogError, InvalidSizeError
from dirlog.file_system_tree.file_system_node import MAX_FILE_SIZE
from dirlog.file_system_tree.file_system_tree import FileSystemTree
from dirlog.types import RootParentAction

logger = logging.getLogger(__name__)

PROMPT = "$"


def parse_size(token: str) -> int:
    """Parse the size column of a file listing.

    Only plain ASCII decimal digits are accepted, and the value must fit in an
    unsigned 64-bit integer.

    Args:
        token: The size token, e.g. '14848514'.

    Returns:
        The size in bytes.

    Raises:
        InvalidSizeError: If the token is not a valid size.

    Example:
        >>> parse_size("584")
        584
        >>> parse_size("-1")
        Traceback (most recent call last):
        ...
        dirlog.exceptions.InvalidSizeError: Invalid size specified: '-1'
    """
    if not (token.isascii() and token.isdigit()):
        raise InvalidSizeError(token)

    size = int(token)
    if size > MAX_FILE_SIZE:
        raise InvalidSizeError(token)
    return size


def apply_line(tree: FileSystemTree, line: str) -> None:
    """Apply a single command log line to a tree.

    Args:
        tree: The tree being built.
        line: One line of the command log.

    Raises:
        NavigationError: If a ``cd`` target cannot be resolved.
        InvalidSizeError: If a file listing has an invalid size.
    """
    tokens = line.split()

    if len(tokens) == 3 and tokens[0] == PROMPT and tokens[1] == "cd":
        tree.change_dir(tokens[2])
    elif tokens == [PROMPT, "ls"]:
        pass
    elif len(tokens) == 2 and tokens[0] == "dir":
        tree.create_directory(tokens[1])
    elif len(tokens) == 2:
        tree.create_file(tokens[1], parse_size(tokens[0]))
    elif tokens:
        logger.debug("Ignoring unrecognized line: %r", line)


def parse_lines(lines: Iterable[str], root_parent_action: RootParentAction = RootParentAction.STAY) -> FileSystemTree:
    """Build a tree by replaying command log lines in order.

    Args:
        lines: Lines of the command log. Trailing newlines are allowed.
        root_parent_action: How ``cd ..`` behaves at the root. Defaults to STAY.

    Returns:
        The fully built tree.

    Raises:
        NavigationError: If a ``cd`` target cannot be resolved.
        InvalidSizeError: If a file listing has an invalid size.
            Both carry line_number and line attributes.
    """
    tree = FileSystemTree(root_parent_action=root_parent_action)

    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            apply_line(tree, line)
        except DirLogError as e:
            e.line_number = line_number
            e.line = line.rstrip("\r\n")
            raise

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Parsed %d lines: %d directories, %d files, %d bytes",
            line_number,
            tree.get_directory_count() + 1,
            tree.get_file_count(),
            tree.get_size(),
        )
    return tree


def parse(text: str, root_parent_action: RootParentAction = RootParentAction.STAY) -> FileSystemTree:
    """Build a tree from the full text of a command log.

    Args:
        text: The command log.
        root_parent_action: How ``cd ..`` behaves at the root. Defaults to STAY.

    Returns:
        The fully built tree.

    Raises:
        NavigationError: If a ``cd`` target cannot be resolved.
        InvalidSizeError: If a file listing has an invalid size.
    """
    return parse_lines(text.splitlines(), root_parent_action=root_parent_action)
