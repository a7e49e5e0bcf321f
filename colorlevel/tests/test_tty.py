"""Tests for interactive terminal detection."""

import io
import os

import pytest

from colorlevel.tty import descriptor_of, is_terminal


class TestDescriptorOf:
    """Tests for descriptor_of()."""

    def test_integer(self):
        assert descriptor_of(7) == 7

    def test_file_object(self, tmp_path):
        with open(tmp_path / "out.txt", "w") as f:
            assert descriptor_of(f) == f.fileno()

    def test_string_io_has_no_descriptor(self):
        assert descriptor_of(io.StringIO()) is None

    def test_closed_file(self, tmp_path):
        f = open(tmp_path / "out.txt", "w")
        f.close()
        assert descriptor_of(f) is None

    def test_object_without_fileno(self):
        assert descriptor_of(object()) is None


class TestIsTerminal:
    """Tests for is_terminal()."""

    def test_regular_file_is_not_terminal(self, tmp_path):
        with open(tmp_path / "out.txt", "w") as f:
            assert is_terminal(f) is False

    def test_pipe_is_not_terminal(self):
        read_fd, write_fd = os.pipe()
        try:
            assert is_terminal(write_fd) is False
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_string_io_is_not_terminal(self):
        assert is_terminal(io.StringIO()) is False

    def test_invalid_descriptor(self):
        assert is_terminal(-1) is False

    @pytest.mark.skipif(not hasattr(os, "openpty"), reason="Requires a pseudo-terminal")
    def test_pseudo_terminal(self):
        master, slave = os.openpty()
        try:
            assert is_terminal(slave) is True
        finally:
            os.close(master)
            os.close(slave)
