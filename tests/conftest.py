"""Test configuration and fixtures for dirlog."""

import pytest

SAMPLE_LOG = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_log():
    """The well-known example terminal log."""
    return SAMPLE_LOG


@pytest.fixture
def sample_log_file(tmp_path):
    """The example terminal log written to a temporary file."""
    log_file = tmp_path / "terminal.log"
    log_file.write_text(SAMPLE_LOG)
    return log_file


@pytest.fixture
def deep_log():
    """A log nesting 1500 directories, one file of 5 bytes in the innermost."""
    depth = 1500
    lines = ["$ cd /"]
    for level in range(depth):
        lines += ["$ ls", f"dir d{level}", f"$ cd d{level}"]
    lines += ["$ ls", "5 leaf"]
    return "\n".join(lines) + "\n"
