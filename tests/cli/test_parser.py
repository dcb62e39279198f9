"""
Tests for CLI argument parser.
"""

import pytest

from goswitch.cli.parser import CLI
from goswitch.core.exceptions import UsageError


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        cli = CLI()
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        result = CLI().run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            CLI().run(["--version"])

        assert exc_info.value.code == 0
        assert "goswitch" in capsys.readouterr().out

    @pytest.mark.parametrize("alias", ["help", "-h", "-help", "--help"])
    def test_help_aliases(self, alias, capsys):
        result = CLI().run([alias])

        assert result == 0
        out = capsys.readouterr().out
        assert "download" in out
        assert "GOSWITCH_ROOT" in out


class TestParsing:
    def test_init(self):
        args = CLI().parse_args(["init"])
        assert args.command == "init"

    def test_list(self):
        args = CLI().parse_args(["list"])
        assert args.command == "list"

    def test_download_version(self):
        args = CLI().parse_args(["download", "1.16"])

        assert args.command == "download"
        assert args.version == "1.16"

    def test_use_version_with_verbose(self):
        args = CLI().parse_args(["-v", "use", "1.21.5"])

        assert args.command == "use"
        assert args.version == "1.21.5"
        assert args.verbose is True

    @pytest.mark.parametrize("command", ["download", "use"])
    def test_version_required(self, command):
        with pytest.raises(UsageError, match="version"):
            CLI().parse_args([command])

    def test_version_named_help(self):
        args = CLI().parse_args(["download", "help"])

        assert args.command == "download"
        assert args.version == "help"

    @pytest.mark.parametrize(
        "argv", [["-v", "help"], ["use", "-h"], ["--help", "list"], ["-help"]]
    )
    def test_help_selected(self, argv):
        assert CLI().parse_args(argv).command == "help"

    def test_unknown_command(self):
        with pytest.raises(UsageError, match="invalid choice"):
            CLI().parse_args(["uninstall"])


class TestUsageErrors:
    @pytest.mark.parametrize("command", ["download", "use"])
    def test_missing_version_exits_1(self, command, capsys):
        result = CLI().run([command])

        assert result == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_unknown_command_prints_error_and_help(self, capsys):
        result = CLI().run(["frobnicate"])

        assert result == 1
        err = capsys.readouterr().err
        assert "ERROR:" in err
        assert "usage:" in err.lower()
