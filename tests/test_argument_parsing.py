"""
Tests for CLI argument parsing and validation.
"""
import sys
from unittest import mock
import pytest
from linesorter.cli import CLIApplication
from linesorter.core.models import SortDirection, SortMode


class TestArgumentParsing:
    """Test CLI argument parsing with argparse."""

    def test_input_defaults_to_stdin(self):
        app = CLIApplication()
        with mock.patch.object(sys, 'argv', ['linesorter']):
            args = app.parse_args()
        assert args.input == "-"
        assert args.mode == "lexicographic"
        assert args.descending is False
        assert args.in_place is False
        assert args.output is None
        assert args.encoding == "utf-8"

    def test_mode_flag_variants(self):
        """Test both long (--mode) and short (-s) forms."""
        app = CLIApplication()

        with mock.patch.object(sys, 'argv', ['linesorter', 'data.txt', '--mode', 'integer']):
            args = app.parse_args()
        assert args.mode == "integer"
        assert args.input == "data.txt"

        with mock.patch.object(sys, 'argv', ['linesorter', 'data.txt', '-s', 'dot']):
            args = app.parse_args()
        assert args.mode == "dot"

    def test_all_mode_aliases_accepted(self):
        app = CLIApplication()
        for mode in ["lexicographic", "lex", "integer", "int",
                     "decimal-comma", "comma", "decimal-dot", "dot"]:
            args = app.parse_args(['--mode', mode])
            assert args.mode == mode

    def test_invalid_mode_flag(self):
        """Test that invalid mode values are rejected by argparse."""
        app = CLIApplication()
        with pytest.raises(SystemExit) as exc_info:
            app.parse_args(['--mode', 'natural'])
        assert exc_info.value.code == 2

    def test_descending_flag_variants(self):
        app = CLIApplication()
        assert app.parse_args(['--descending']).descending is True
        assert app.parse_args(['-d']).descending is True

    def test_output_and_in_place_flags(self):
        app = CLIApplication()
        args = app.parse_args(['in.txt', '-o', 'out.txt'])
        assert args.output == "out.txt"

        args = app.parse_args(['in.txt', '-i', '--no-backup'])
        assert args.in_place is True
        assert args.no_backup is True

    def test_version_flag(self, capsys):
        app = CLIApplication()
        with pytest.raises(SystemExit) as exc_info:
            app.parse_args(['--version'])
        assert exc_info.value.code == 0
        assert "linesorter" in capsys.readouterr().out

    def test_help_names_encoding_value(self, capsys):
        app = CLIApplication()
        with pytest.raises(SystemExit) as exc_info:
            app.parse_args(["--help"])
        assert exc_info.value.code == 0
        assert "--encoding ENCODING" in capsys.readouterr().out


class TestArgumentValidation:
    """validate_args() rejects inconsistent combinations before any work is done."""

    def _validate(self, argv):
        app = CLIApplication()
        args = app.parse_args(argv)
        app.validate_args(args)
        return app, args

    def test_in_place_needs_file(self):
        with pytest.raises(SystemExit) as exc_info:
            self._validate(['--in-place'])
        assert exc_info.value.code == 1

    def test_in_place_with_output_rejected(self, text_files):
        with pytest.raises(SystemExit):
            self._validate([str(text_files["words"]), '-i', '-o', 'out.txt'])

    def test_no_backup_requires_in_place(self, text_files):
        with pytest.raises(SystemExit):
            self._validate([str(text_files["words"]), '--no-backup'])

    def test_missing_input_file(self, temp_dir, capsys):
        with pytest.raises(SystemExit):
            self._validate([str(temp_dir / "missing.txt")])
        assert "File not found" in capsys.readouterr().err

    def test_directory_as_input(self, temp_dir, capsys):
        with pytest.raises(SystemExit):
            self._validate([str(temp_dir)])
        assert "not a file" in capsys.readouterr().err

    def test_valid_combination(self, text_files):
        _, args = self._validate([str(text_files["integers"]), '-s', 'int', '-d', '-i'])
        assert args.in_place is True


class TestParameterCreation:
    """create_params() maps aliases to core enums."""

    @pytest.mark.parametrize("alias, mode", [
        ("lex", SortMode.LEXICOGRAPHIC),
        ("int", SortMode.INTEGER),
        ("comma", SortMode.DECIMAL_COMMA),
        ("decimal-dot", SortMode.DECIMAL_DOT),
    ])
    def test_mode_aliases(self, alias, mode):
        app = CLIApplication()
        params = app.create_params(app.parse_args(['--mode', alias]))
        assert params.mode is mode
        assert params.direction is SortDirection.ASCENDING

    def test_descending_direction(self):
        app = CLIApplication()
        params = app.create_params(app.parse_args(['-d']))
        assert params.direction is SortDirection.DESCENDING
