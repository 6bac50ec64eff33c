"""Line-oriented terminal input and output."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Prompts for and prints text on a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Print ``text`` followed by a newline."""
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input line, stripped.

        Raises EOFError when the input is exhausted.
        """
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("input exhausted")
        return line.strip()

    def ask_int(self, prompt: str) -> int:
        """Ask for a whole number; raises ValueError if the answer is not one."""
        return int(self.ask(prompt))

    def ask_float(self, prompt: str) -> float:
        """Ask for a number; raises ValueError if the answer is not one."""
        return float(self.ask(prompt))