"""Directory trees reconstructed from shell command logs.

This package rebuilds an in-memory directory tree from a log of ``cd``/``ls``
commands and their listings, and reports the aggregate size of every
directory in it.
"""

from importlib.metadata import PackageNotFoundError, version

from dirlog.file_system_tree.file_system_tree import FileSystemTree
from dirlog.parser import parse, parse_lines
from dirlog.size_aggregator import size_of, subtree_sizes

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirlog")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["FileSystemTree", "parse", "parse_lines", "size_of", "subtree_sizes", "__version__"]
