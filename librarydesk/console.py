"""Line-oriented terminal input and output used by the interactive menus."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Reads answers to prompts and writes messages on a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Write a line of text."""
        self._out.write(f"{text}\n")
        self._out.flush()

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the next input line without its line ending.

        Raises EOFError when the input is exhausted.
        """
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> int:
        """Ask for a whole number; raises ValueError if the answer is not one."""
        answer = self.ask(prompt).strip()
        try:
            return int(answer)
        except ValueError:
            raise ValueError(f"expected a whole number, got {answer!r}") from None

    def ask_float(self, prompt: str) -> float:
        """Ask for a number; raises ValueError if the answer is not one."""
        answer = self.ask(prompt).strip()
        try:
            return float(answer)
        except ValueError:
            raise ValueError(f"expected a number, got {answer!r}") from None