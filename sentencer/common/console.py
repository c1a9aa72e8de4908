"""Interactive console used for prompts and progress output.

The input and output streams are passed in explicitly so that prompts can
be scripted (tests feed an io.StringIO as stdin).
"""

import sys
from typing import Optional, TextIO

from sentencer.common.utils import clamp, parse_leading_int


class Console:
    """Line-based console over explicit input/output streams."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Write a full line."""
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def emit(self, text: str) -> None:
        """Write text without a trailing newline (progress, prompts)."""
        self.stdout.write(text)
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        """Show prompt and read one stripped line. Returns "" on EOF."""
        self.emit(prompt)
        line = self.stdin.readline()
        return line.strip()

    def select_number(self, prompt: str, low: int, high: int) -> int:
        """Ask for a number in [low, high].

        Out-of-range and non-numeric answers are clamped rather than
        re-prompted: "99" picks high, "" or "abc" picks low.
        """
        return clamp(parse_leading_int(self.ask(prompt)), low, high)

    def confirm(self, prompt: str) -> bool:
        """Yes/no question defaulting to yes."""
        answer = self.ask(prompt).lower()
        return answer in ("y", "")
