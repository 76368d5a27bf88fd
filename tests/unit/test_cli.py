"""
Unit tests for the betwixt command-line interface.
"""

import io
import json

import pytest

from betwixt import __version__
from betwixt.cli import create_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_no_command_prints_help(self, run_cli):
        """Test that running without a command shows usage."""
        code, out, _ = run_cli()
        assert code == 0
        assert "usage" in out

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_split_exclude_pairs(self):
        """Test that exclusion pairs are collected."""
        args = create_parser().parse_args(["split", " ", "-x", "{", "}", "-x", '"', '"'])
        assert args.exclude == [["{", "}"], ['"', '"']]

    def test_replace_defaults(self):
        """Test replace command defaults."""
        args = create_parser().parse_args(["replace", "l"])
        assert args.replacement == ""
        assert args.which == "first"


class TestExtractionCommands:
    """Tests for the between and find-all commands."""

    def test_between(self, run_cli):
        """Test extracting between markers."""
        code, out, _ = run_cli("between", "{", "}", "--text", "a {b} c")
        assert code == 0
        assert out == "b\n"

    def test_between_alias_and_trim(self, run_cli):
        """Test the short alias with trimming."""
        code, out, _ = run_cli("b", "[", "]", "--trim", "--text", "x [  y  ]")
        assert code == 0
        assert out == "y\n"

    def test_between_after_mark(self, run_cli):
        """Test scoping the extraction after an anchor."""
        _, out, _ = run_cli("between", "{", "}", "--mark", "payload:", "--text", "{one} payload: {two}")
        assert out == "two\n"

    def test_between_multiple_json(self, run_cli):
        """Test repeated extraction printed as JSON."""
        _, out, _ = run_cli("between", "{", "}", "--multiple", "--json", "--text", "{a}{b}")
        assert json.loads(out) == ["a", "b"]

    def test_find_all_lines(self, run_cli):
        """Test one result per line."""
        _, out, _ = run_cli("find-all", "{", "}", "--include-markers", "--text", "{a} and {b}")
        assert out.splitlines() == ["{a}", "{b}"]

    def test_reads_stdin(self, run_cli, monkeypatch):
        """Test that text is read from stdin without its final newline."""
        monkeypatch.setattr("sys.stdin", io.StringIO("say \"hi there\"\n"))
        _, out, _ = run_cli("between", '"', '"', "--json")
        assert json.loads(out) == "hi there"


class TestMutationCommands:
    """Tests for the removal and replacement commands."""

    def test_remove_between(self, run_cli):
        """Test removing spaces inside a zone."""
        _, out, _ = run_cli("remove-between", "{", "}", " ", "--text", "x {'P', 'Q'} y")
        assert out == "x {'P','Q'} y\n"

    def test_replace_first_and_last(self, run_cli):
        """Test replacing the first and last occurrences."""
        _, out, _ = run_cli(
            "replace", "l", "a588", "--which", "first-and-last", "--text", "let sleeping dogs lie"
        )
        assert out == "a588et sleeping dogs a588ie\n"

    def test_replace_word(self, run_cli):
        """Test whole-word replacement."""
        _, out, _ = run_cli("replace-word", "islands", "villages", "--text", "the islands and islanders")
        assert out == "the villages and islanders\n"

    def test_remove(self, run_cli):
        """Test removing several patterns."""
        _, out, _ = run_cli("remove", "cats", "dogs", "--text", "It's raining cats and dogs")
        assert out == "It's raining  and \n"


class TestSplitCommand:
    """Tests for the split command."""

    def test_split_with_exclusion(self, run_cli):
        """Test splitting around a zone."""
        code, out, _ = run_cli("split", " ", "-x", "{", "}", "--json", "--text", "hello {a b} world")
        assert code == 0
        assert json.loads(out) == ["hello", "{a b}", "world"]

    def test_split_options(self, run_cli):
        """Test trimming and empty removal."""
        _, out, _ = run_cli("s", ",", "--trim", "--remove-empty", "--json", "--text", "a, ,b,")
        assert json.loads(out) == ["a", "b"]


class TestErrors:
    """Tests for error reporting."""

    def test_order_violation_exit_code(self, run_cli):
        """Test that library errors give exit code 1."""
        code, out, err = run_cli("between", "{", "}", "--text", "}x{")
        assert code == 1
        assert out == ""
        assert "Error:" in err
        assert "End string cannot appear earlier than beginning string" in err

    def test_argument_error_exit_code(self, run_cli):
        """Test that invalid arguments give exit code 1."""
        code, _, err = run_cli("replace", "x", "--text", "")
        assert code == 1
        assert "argument 'text'" in err
