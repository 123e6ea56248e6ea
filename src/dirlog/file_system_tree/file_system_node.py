"""Node representation for directories and files in a reconstructed tree."""

from typing import Any, Iterator, Optional

from anytree import Node, TreeError

from dirlog.types import NodeType

# Largest size a file listing may declare (unsigned 64-bit)
MAX_FILE_SIZE = 2**64 - 1


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in a reconstructed tree.

    Extends anytree.Node with a node type and, for files, the size declared by the
    command log. anytree keeps the ordered children tuple and the parent back-reference
    consistent, and refuses attachments that would create a loop. Attaching a child to
    a file node raises anytree.TreeError.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The enclosing directory, None for the root.
        node_type (NodeType): Whether this node is a file or a directory.
        declared_size (int): Size declared for a file. Always 0 for directories.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode.new_directory("/")
        >>> notes = FileSystemNode.new_file("notes.txt", 120, parent=root)
        >>> root.get_size()
        120
        >>> notes.is_dir
        False
        >>> notes.get_path()
        '/notes.txt'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        node_type: NodeType = NodeType.FILE,
        declared_size: int = 0,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Prefer new_file() and new_directory(), which validate their arguments.

        Args:
            name: The name of the file or directory.
            parent: The parent directory node. Defaults to None.
            node_type: Whether this node is a file or a directory. Defaults to FILE.
            declared_size: Size of a file node. Defaults to 0.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        self.node_type = node_type
        self.declared_size = declared_size
        super().__init__(name, parent, **kwargs)

    @classmethod
    def new_file(cls, name: str, size: int, parent: Optional["FileSystemNode"] = None) -> "FileSystemNode":
        """Create a file node with a declared size.

        Args:
            name: The file name.
            size: The declared size in bytes.
            parent: Directory to attach the new node to. Defaults to None.

        Returns:
            The new file node.

        Raises:
            ValueError: If size is not an integer between 0 and 2**64 - 1.
            anytree.TreeError: If parent is a file node.
        """
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"File size must be an integer, got {type(size).__name__}")
        if not 0 <= size <= MAX_FILE_SIZE:
            raise ValueError(f"File size out of range: {size}")
        return cls(name, parent=parent, node_type=NodeType.FILE, declared_size=size)

    @classmethod
    def new_directory(cls, name: str, parent: Optional["FileSystemNode"] = None) -> "FileSystemNode":
        """Create an empty directory node.

        Raises:
            anytree.TreeError: If parent is a file node.
        """
        return cls(name, parent=parent, node_type=NodeType.DIRECTORY)

    @property
    def is_dir(self) -> bool:
        """True if this node represents a directory."""
        return self.node_type is NodeType.DIRECTORY

    def get_size(self) -> int:
        """Get the size of this node.

        A file reports its declared size. A directory reports the sum of the sizes of all
        files below it, recomputed on every call.

        Returns:
            The size in bytes.
        """
        if not self.is_dir:
            return self.declared_size
        return sum(node.declared_size for node in self.iter_pre_order() if not node.is_dir)

    def iter_pre_order(self) -> Iterator["FileSystemNode"]:
        """Yield this node and every node below it in pre-order, siblings in creation order.

        The walk keeps its own stack, so it is not bounded by the interpreter recursion limit.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def get_path(self) -> str:
        """Get the absolute path of this node, with "/" as the root.

        Example:
            >>> root = FileSystemNode.new_directory("/")
            >>> FileSystemNode.new_directory("e", parent=FileSystemNode.new_directory("a", parent=root)).get_path()
            '/a/e'
        """
        names = [node.name for node in self.path[1:]]
        return "/" + "/".join(names)

    def _pre_attach(self, parent: "FileSystemNode") -> None:
        # Called by anytree before the back-reference is set
        if not getattr(parent, "is_dir", False):
            raise TreeError(f"Files cannot have children: cannot attach {self.name!r} to {parent.name!r}")

    def __repr__(self) -> str:
        if self.is_dir:
            return f"{self.__class__.__name__}({self.get_path()!r}, dir)"
        return f"{self.__class__.__name__}({self.get_path()!r}, size={self.declared_size})"
