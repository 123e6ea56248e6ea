"""Tests for custom exceptions."""

from dirlog.exceptions import (
    AlreadyAtRootError,
    DirLogError,
    InvalidSizeError,
    NavigationError,
    NotDirectoryError,
    NotFoundError,
)


class TestNavigationErrors:
    """Test the errors raised by change_dir."""

    def test_not_found_error(self):
        error = NotFoundError("src", "/home")
        assert error.target == "src"
        assert error.directory == "/home"
        assert str(error) == "No entry named 'src' in /home"
        assert isinstance(error, NavigationError)
        assert isinstance(error, LookupError)

    def test_not_directory_error(self):
        error = NotDirectoryError("notes.txt", "/home/notes.txt")
        assert error.target == "notes.txt"
        assert error.path == "/home/notes.txt"
        assert str(error) == "Not a directory: /home/notes.txt"
        assert isinstance(error, NavigationError)
        assert not isinstance(error, OSError)

    def test_already_at_root_error(self):
        error = AlreadyAtRootError()
        assert error.target == ".."
        assert str(error) == "Already at root directory"
        assert isinstance(error, DirLogError)


class TestInvalidSizeError:
    """Test InvalidSizeError."""

    def test_invalid_size_error(self):
        error = InvalidSizeError("1.5")
        assert error.size_token == "1.5"
        assert str(error) == "Invalid size specified: '1.5'"
        assert isinstance(error, ValueError)
        assert isinstance(error, DirLogError)


class TestLineInformation:
    """Test line information attached by the parser."""

    def test_without_line_number(self):
        error = DirLogError("boom")
        assert error.line_number is None
        assert error.line is None
        assert str(error) == "boom"

    def test_with_line_number(self):
        error = NotFoundError("b", "/")
        error.line_number = 7
        error.line = "$ cd b"
        assert str(error) == "line 7: No entry named 'b' in /"
        assert error.message == "No entry named 'b' in /"
