from enum import Enum


class NodeType(Enum):
    """Enumeration of node kinds in a reconstructed directory tree.

    Attributes:
        FILE: Leaf node carrying a declared size
        DIRECTORY: Node owning an ordered collection of children
    """

    FILE = "file"
    DIRECTORY = "directory"


class RootParentAction(str, Enum):
    """Action to take when ``cd ..`` is requested while already at the root.

    Values:
        STAY: Remain at the root silently (default behavior)
        RAISE: Raise an AlreadyAtRootError and leave the current directory unchanged
    """

    STAY = "stay"
    RAISE = "raise"
