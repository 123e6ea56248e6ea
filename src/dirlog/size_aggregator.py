"""Size aggregation over a reconstructed directory tree."""

from typing import Iterator

from dirlog.file_system_tree.file_system_node import FileSystemNode


def size_of(node: FileSystemNode) -> int:
    """Get the size of a node: its declared size for a file, the sum of its contents for a directory."""
    return node.get_size()


def subtree_sizes(node: FileSystemNode) -> Iterator[int]:
    """Yield the size of node and of every directory below it.

    The size of node comes first, followed by the sizes produced for each directory
    child in creation order. Files are counted in their parent's size but yield nothing
    of their own. The result is a generator, so it can be consumed only once. The walk
    keeps its own stack, so deeply nested trees are fine.

    Args:
        node: The node to start from, usually the root directory.

    Yields:
        One size per directory in the subtree, in pre-order.

    Example:
        >>> root = FileSystemNode.new_directory("/")
        >>> a = FileSystemNode.new_directory("a", parent=root)
        >>> _ = FileSystemNode.new_file("b.txt", 10, parent=a)
        >>> _ = FileSystemNode.new_file("c.dat", 5, parent=root)
        >>> list(subtree_sizes(root))
        [15, 10]
    """
    yield node.get_size()
    for descendant in node.iter_pre_order():
        if descendant is not node and descendant.is_dir:
            yield descendant.get_size()
