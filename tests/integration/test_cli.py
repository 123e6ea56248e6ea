"""Integration tests for the command-line interface.

These tests run dirlog in a subprocess, covering:
- Reading the log from a file and from stdin
- Capacity reports
- Exit codes for parse and usage errors
- Version information
"""

import subprocess
import sys

import pytest

# Skip all tests in this module unless --run-cli-tests is given
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, input_text=None):
    """Run the dirlog CLI with the given arguments."""
    return subprocess.run(
        [sys.executable, "-m", "dirlog.cli.main", *args],
        input=input_text,
        capture_output=True,
        text=True,
    )


def test_cli_file(sample_log_file):
    result = run_cli("-a", "100K", "-c", "70MB", "-r", "30MB", str(sample_log_file))
    assert result.returncode == 0
    assert result.stdout.splitlines() == [
        "Total: 48381165",
        "Directories: 4",
        "Files: 10",
        "Directories of at most 100000: 95437",
        "Space to free: 8381165",
        "Smallest directory to delete: 24933642",
    ]


def test_cli_stdin(sample_log):
    result = run_cli(input_text=sample_log)
    assert result.returncode == 0
    assert result.stdout.startswith("Total: 48381165")


def test_cli_parse_error():
    result = run_cli(input_text="$ cd missing\n")
    assert result.returncode == 1
    assert result.stderr.strip() == "Error: line 1: No entry named 'missing' in /"


def test_cli_verbose_logging(sample_log):
    result = run_cli("-v", input_text=sample_log)
    assert result.returncode == 0
    assert "DEBUG dirlog.file_system_tree.file_system_tree: Created directory /a" in result.stderr


def test_cli_usage_error():
    result = run_cli("--capacity")
    assert result.returncode == 2


def test_cli_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("dirlog ")
