"""Unit tests for the CLI main module."""

import argparse
import io
from unittest.mock import patch

import pytest

from dirlog import parse
from dirlog.cli.main import build_report, format_value, main, read_log


def run_main(argv, stdin_text=None):
    """Run main() with the given arguments, returning its exit code (0 when it returns normally)."""
    stdin = io.StringIO(stdin_text or "")
    with patch("sys.argv", ["dirlog", *argv]), patch("sys.stdin", stdin):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_main_total_from_file(sample_log_file, capsys):
    assert run_main([str(sample_log_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Total: 48381165", "Directories: 4", "Files: 10"]


def test_main_reads_stdin(sample_log, capsys):
    assert run_main([], stdin_text=sample_log) == 0
    assert capsys.readouterr().out.startswith("Total: 48381165\n")


def test_main_capacity_reports(sample_log_file, capsys):
    assert run_main(["-a", "100000", "-c", "70000000", "-r", "30000000", str(sample_log_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Directories of at most 100000: 95437" in out
    assert "Space to free: 8381165" in out
    assert "Smallest directory to delete: 24933642" in out


def test_main_tree(sample_log_file, capsys):
    assert run_main(["-t", str(sample_log_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "/ (dir, size=48381165)"
    assert "├── a/ (dir, size=94853)" in out
    assert out[-3] == "Total: 48381165"


def test_main_human_readable(sample_log_file, capsys):
    assert run_main(["-H", str(sample_log_file)]) == 0
    assert capsys.readouterr().out.startswith("Total: 48.38 MB\n")


def test_main_parse_error(capsys):
    assert run_main([], stdin_text="$ ls\n12k bad\n") == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error: line 2: Invalid size specified: '12k'"


def test_main_root_parent_raise(capsys):
    assert run_main(["-R", "raise"], stdin_text="$ cd ..\n") == 1
    assert "Already at root directory" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert run_main([str(tmp_path / "missing.log")]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_main_invalid_argument_combination(sample_log_file, capsys):
    assert run_main(["-c", "70000000", str(sample_log_file)]) == 1
    assert "must be specified together" in capsys.readouterr().err


def test_main_usage_error():
    assert run_main(["--no-such-option"]) == 2


def test_main_interrupted(sample_log_file):
    with patch("dirlog.cli.main.parse_lines", side_effect=KeyboardInterrupt):
        assert run_main([str(sample_log_file)]) == 130


def test_read_log_file(sample_log_file, sample_log):
    assert "".join(read_log(str(sample_log_file))) == sample_log


def test_format_value():
    assert format_value(None) == "none"
    assert format_value(584) == "584"
    assert format_value(48381165, human_readable=True) == "48.38 MB"


def test_build_report_capacity():
    tree = parse("$ ls\n10 a\n")
    args = argparse.Namespace(human_readable=False, at_most=None, capacity=100, required=100)
    assert build_report(tree, args) == [
        "Total: 10",
        "Directories: 1",
        "Files: 1",
        "Space to free: 10",
        "Smallest directory to delete: 10",
    ]
