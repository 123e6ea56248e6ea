from typing import Optional


class DirLogError(Exception):
    """
    Base class for recoverable errors raised while building or navigating a tree.

    When the error is raised while parsing a command log, the parser records the
    1-based line number and the offending line on the exception before it propagates.

    Attributes:
        message (str): Human-readable description of the error.
        line_number (Optional[int]): Line of the command log that caused the error, if known.
        line (Optional[str]): Text of that line, if known.

    Example:
        >>> error = DirLogError("something went wrong")
        >>> str(error)
        'something went wrong'
        >>> error.line_number is None
        True
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.line_number: Optional[int] = None
        self.line: Optional[str] = None
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class NavigationError(DirLogError):
    """
    Exception raised when ``change_dir`` cannot resolve its target.

    Attributes:
        target (str): The name that was passed to ``change_dir``.
    """

    def __init__(self, target: str, message: str) -> None:
        self.target = target
        super().__init__(message)


class NotFoundError(NavigationError, LookupError):
    """
    Exception raised when the current directory has no child with the requested name.

    Example:
        >>> error = NotFoundError("src", "/home")
        >>> str(error)
        "No entry named 'src' in /home"
    """

    def __init__(self, target: str, directory: str) -> None:
        self.directory = directory
        super().__init__(target, f"No entry named {target!r} in {directory}")


class NotDirectoryError(NavigationError):
    """
    Exception raised when the requested name resolves to a file.

    Example:
        >>> error = NotDirectoryError("notes.txt", "/home")
        >>> str(error)
        'Not a directory: /home/notes.txt'
    """

    def __init__(self, target: str, path: str) -> None:
        self.path = path
        super().__init__(target, f"Not a directory: {path}")


class AlreadyAtRootError(NavigationError):
    """
    Exception raised for ``cd ..`` at the root when the tree uses RootParentAction.RAISE.

    Example:
        >>> str(AlreadyAtRootError())
        'Already at root directory'
    """

    def __init__(self) -> None:
        super().__init__("..", "Already at root directory")


class InvalidSizeError(DirLogError, ValueError):
    """
    Exception raised when a file listing carries a size that is not a non-negative 64-bit integer.

    Attributes:
        size_token (str): The token that failed to parse.

    Example:
        >>> error = InvalidSizeError("12k")
        >>> str(error)
        "Invalid size specified: '12k'"
    """

    def __init__(self, size_token: str) -> None:
        self.size_token = size_token
        super().__init__(f"Invalid size specified: {size_token!r}")
