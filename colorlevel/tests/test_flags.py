"""Tests for command-line flag scanning."""

import sys

from colorlevel.flags import flag_token, has_any_flag, has_flag


class TestFlagToken:
    """Tests for flag name to token conversion."""

    def test_long_flag(self):
        assert flag_token("no-color") == "--no-color"

    def test_short_flag(self):
        assert flag_token("c") == "-c"

    def test_already_prefixed(self):
        assert flag_token("--color=256") == "--color=256"
        assert flag_token("-c") == "-c"


class TestHasFlag:
    """Tests for has_flag()."""

    def test_present(self):
        assert has_flag("no-color", ["cli", "--no-color"])

    def test_absent(self):
        assert not has_flag("no-color", ["cli", "--color"])

    def test_exact_match_only(self):
        assert not has_flag("color", ["cli", "--color=256"])

    def test_short_flag(self):
        assert has_flag("c", ["cli", "-c"])
        assert not has_flag("c", ["cli", "--c"])

    def test_before_terminator(self):
        assert has_flag("no-color", ["cli", "--no-color", "--", "file"])

    def test_after_terminator(self):
        assert not has_flag("no-color", ["cli", "--foo", "--", "--no-color"])

    def test_absent_with_terminator(self):
        assert not has_flag("no-color", ["cli", "--"])

    def test_program_name_ignored(self):
        assert not has_flag("no-color", ["--no-color"])

    def test_empty_argv(self):
        assert not has_flag("no-color", [])

    def test_defaults_to_sys_argv(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["prog", "--colors"])
        assert has_flag("colors")
        monkeypatch.setattr(sys, "argv", ["prog"])
        assert not has_flag("colors")


class TestHasAnyFlag:
    """Tests for has_any_flag()."""

    def test_any_match(self):
        assert has_any_flag(("no-color", "no-colors"), ["cli", "--no-colors"])

    def test_no_match(self):
        assert not has_any_flag(("no-color", "no-colors"), ["cli", "--color"])
