"""Interactive input source bound to the controlling terminal.

The setup is commonly run as ``curl ... | python -`` style pipelines, where
stdin is the pipe carrying the program itself. Prompts therefore open the
terminal device directly instead of reading stdin.
"""

from __future__ import annotations

from functools import cached_property
from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_input
from prompt_toolkit.output import create_output

from .constants import TTY_DEVICE


class LineReader(Protocol):
    @property
    def interactive(self) -> bool: ...

    def read_line(self, message: str) -> str: ...


class TerminalInput:
    """Read prompt answers from the controlling terminal device.

    When the device cannot be opened (no terminal, e.g. cron or CI) the input
    is non-interactive and every read returns an empty answer.
    """

    def __init__(self, device: str = TTY_DEVICE) -> None:
        self.device = device

    @cached_property
    def interactive(self) -> bool:
        try:
            with open(self.device, "r", encoding="utf-8"):
                return True
        except OSError:
            return False

    def read_line(self, message: str) -> str:
        """Prompt on the terminal and return the stripped answer.

        EOF and an unavailable terminal both yield an empty string.
        KeyboardInterrupt propagates to the caller.
        """
        if not self.interactive:
            return ""
        try:
            tty_in = open(self.device, "r", encoding="utf-8")
        except OSError:
            return ""
        with tty_in:
            try:
                tty_out = open(self.device, "w", encoding="utf-8")
            except OSError:
                return ""
            with tty_out:
                session: PromptSession[str] = PromptSession(
                    input=create_input(tty_in),
                    output=create_output(stdout=tty_out),
                )
                try:
                    return session.prompt(message).strip()
                except EOFError:
                    return ""
