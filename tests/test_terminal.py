"""Tests for the controlling-terminal input source."""

from __future__ import annotations

import os
import sys

import pytest

from iotex_setup.terminal import TerminalInput

needs_pty = pytest.mark.skipif(not hasattr(os, "openpty"), reason="requires a pseudo-terminal")


@pytest.fixture
def pty_device():
    """Open a pseudo-terminal pair; yields (master_fd, slave_device_path)."""
    master, slave = os.openpty()
    try:
        yield master, os.ttyname(slave)
    finally:
        os.close(master)
        os.close(slave)


@pytest.fixture
def piped_stdin(monkeypatch):
    """Replace stdin with a pipe that carries an unrelated answer."""
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"sk-from-stdin\n")
    os.close(write_fd)
    stdin = os.fdopen(read_fd, "r", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)
    yield stdin
    stdin.close()


def test_missing_device_is_non_interactive(tmp_path):
    terminal = TerminalInput(device=str(tmp_path / "no-such-tty"))

    assert terminal.interactive is False
    assert terminal.read_line("API key: ") == ""


def test_default_device_is_dev_tty():
    assert TerminalInput().device == "/dev/tty"


@needs_pty
def test_read_line_reads_from_terminal_device_not_stdin(pty_device, piped_stdin):
    master, device = pty_device
    os.write(master, b"sk-typed\r")
    terminal = TerminalInput(device=device)

    assert terminal.interactive is True
    assert terminal.read_line("API key: ") == "sk-typed"
    assert piped_stdin.read() == "sk-from-stdin\n"


@needs_pty
def test_end_of_input_on_terminal_is_empty_answer(pty_device, piped_stdin):
    master, device = pty_device
    os.write(master, b"\x04")
    terminal = TerminalInput(device=device)

    assert terminal.read_line("API key: ") == ""
