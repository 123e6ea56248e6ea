"""Tree manager for directory structures replayed from a command log.

This module provides the FileSystemTree class, which owns the root directory node,
tracks the current directory and exposes creation, navigation and size queries.
"""

import logging
from typing import Iterator, Optional

from dirlog.exceptions import AlreadyAtRootError, NotDirectoryError, NotFoundError
from dirlog.file_system_tree.file_system_node import FileSystemNode
from dirlog.types import RootParentAction

logger = logging.getLogger(__name__)

ROOT_NAME = "/"


class FileSystemTree:
    """An in-memory directory tree with a current working directory.

    The tree starts with a single root directory named "/", which is also the initial
    current directory. Nodes are only ever appended; nothing is renamed, moved or removed.

    Navigation Behavior:
        change_dir resolves a single name against the current directory. "/" always
        resolves to the root, ".." to the parent of the current directory, and any other
        name to the first immediate child with exactly that name. What ".." does at the
        root is fixed per tree by root_parent_action:
        - STAY (default): Remain at the root
        - RAISE: Raise AlreadyAtRootError

    Attributes:
        root (FileSystemNode): The root directory node.
        current_dir (FileSystemNode): The directory that relative operations apply to.
        root_parent_action (RootParentAction): How ".." behaves at the root.

    Example:
        >>> tree = FileSystemTree()
        >>> home = tree.create_directory("home")
        >>> tree.change_dir("home")
        >>> _ = tree.create_file(".bashrc", 10)
        >>> tree.get_size()
        10
        >>> tree.current_dir is home
        True
    """

    def __init__(self, root_parent_action: RootParentAction = RootParentAction.STAY) -> None:
        """Initialize an empty FileSystemTree.

        Args:
            root_parent_action: How ".." behaves when already at the root.
                Defaults to STAY.
        """
        self.root = FileSystemNode.new_directory(ROOT_NAME)
        self.current_dir = self.root
        self.root_parent_action = RootParentAction(root_parent_action)

    def create_directory(self, name: str, parent: Optional[FileSystemNode] = None) -> FileSystemNode:
        """Create an empty directory as the last child of parent.

        Args:
            name: The directory name.
            parent: Directory to create it in. Defaults to the current directory.

        Returns:
            The new directory node.

        Raises:
            anytree.TreeError: If parent is a file node.
        """
        target = self.current_dir if parent is None else parent
        directory = FileSystemNode.new_directory(name, parent=target)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Created directory %s", directory.get_path())
        return directory

    def create_file(self, name: str, size: int, parent: Optional[FileSystemNode] = None) -> FileSystemNode:
        """Create a file as the last child of parent.

        Args:
            name: The file name.
            size: The declared size in bytes.
            parent: Directory to create it in. Defaults to the current directory.

        Returns:
            The new file node.

        Raises:
            ValueError: If size is not a non-negative 64-bit integer.
            anytree.TreeError: If parent is a file node.
        """
        target = self.current_dir if parent is None else parent
        file = FileSystemNode.new_file(name, size, parent=target)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Created file %s (%d bytes)", file.get_path(), size)
        return file

    def change_dir(self, name: str) -> None:
        """Change the current directory.

        The current directory is left untouched when resolution fails.

        Args:
            name: "/", "..", or the name of an immediate child of the current directory.

        Raises:
            NotFoundError: If the current directory has no child with that name.
            NotDirectoryError: If the name resolves to a file.
            AlreadyAtRootError: If name is ".." at the root and root_parent_action is RAISE.
        """
        target = self._resolve_path(name)

        if not target.is_dir:
            raise NotDirectoryError(name, target.get_path())

        self.current_dir = target
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Changed directory to %s", target.get_path())

    def _resolve_path(self, path: str) -> FileSystemNode:
        if path == ROOT_NAME:
            return self.root

        if path == "..":
            parent: Optional[FileSystemNode] = self.current_dir.parent
            if parent is not None:
                return parent
            if self.root_parent_action == RootParentAction.RAISE:
                raise AlreadyAtRootError()
            return self.root

        child = self.find_child(path)
        if child is None:
            raise NotFoundError(path, self.current_dir.get_path())
        return child

    def find_child(self, name: str, directory: Optional[FileSystemNode] = None) -> Optional[FileSystemNode]:
        """Find the first immediate child of directory with the given name.

        Names are compared exactly and case-sensitively. Duplicate names are allowed,
        in which case the earliest created child wins.

        Args:
            name: The child name to look for.
            directory: Directory to search. Defaults to the current directory.

        Returns:
            The matching node, or None if there is none.
        """
        searched = self.current_dir if directory is None else directory
        return next((child for child in searched.children if child.name == name), None)

    def get_size(self) -> int:
        """Get the total size of all files in the tree."""
        return self.root.get_size()

    def iterate_directories(self) -> Iterator[FileSystemNode]:
        """Iterate over every directory in the tree, root first.

        Directories are yielded in pre-order, siblings in creation order.
        """
        yield from (node for node in self.root.iter_pre_order() if node.is_dir)

    def get_file_count(self) -> int:
        """Get the total number of files in the tree."""
        return sum(1 for node in self.root.iter_pre_order() if not node.is_dir)

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding root)."""
        return sum(1 for _ in self.iterate_directories()) - 1

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation one line at a time.

        Each line shows a node and its size, children in creation order, using the
        same connectors as the Unix 'tree' command.

        Yields:
            Lines of the tree representation.

        Example:
            >>> tree = FileSystemTree()
            >>> _ = tree.create_directory("a")
            >>> _ = tree.create_file("b.txt", 14848514)
            >>> for line in tree.stream_tree_representation():
            ...     print(line)
            / (dir, size=14848514)
            ├── a/ (dir, size=0)
            └── b.txt (file, size=14848514)
        """
        # Pending (node, prefix, is_last, is_root) entries, next node on top
        stack = [(self.root, "", True, True)]
        while stack:
            node, prefix, is_last, is_root = stack.pop()
            kind = "dir" if node.is_dir else "file"
            label = f"{node.name}/" if node.is_dir and not is_root else node.name
            details = f"({kind}, size={node.get_size()})"

            if is_root:
                yield f"{label} {details}"
            else:
                connector = "└── " if is_last else "├── "
                yield f"{prefix}{connector}{label} {details}"

            # Direct children of root get no leading indentation
            if is_root:
                child_prefix = ""
            else:
                child_prefix = prefix + ("    " if is_last else "│   ")

            children = node.children
            for i in reversed(range(len(children))):
                stack.append((children[i], child_prefix, i == len(children) - 1, False))

    def get_tree_representation(self) -> str:
        """Get a complete string representation of the tree."""
        return "\n".join(self.stream_tree_representation())
