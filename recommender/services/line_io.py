"""
Line I/O abstraction.

Supplies input lines to the preference reader and session, and receives the
text they print. Implementations: console (stdin/stdout, production) and
scripted (in-memory lines, tests and replays). Both raise EndOfInputError when
no more input is available, so prompt loops always have an exit.
"""

import sys
from typing import Iterable, List, Optional, Protocol, TextIO

from ..errors import EndOfInputError


class LineIO(Protocol):
    """Protocol for line-oriented interaction. Implement for console or scripted input."""

    def read_line(self) -> str:
        """
        Return the next input line without its trailing newline.
        Raises EndOfInputError when the input stream is closed.
        """
        ...

    def write(self, text: str = "") -> None:
        """Emit one line of output."""
        ...


class ConsoleIO:
    """Line I/O over text streams (stdin/stdout by default)."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def read_line(self) -> str:
        line = self._stdin.readline()
        # readline() returns "" only at end of stream; a blank line is "\n"
        if line == "":
            raise EndOfInputError("Input stream closed")
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        print(text, file=self._stdout, flush=True)


class ScriptedIO:
    """
    Line I/O over a fixed list of input lines, capturing everything written.
    Used by tests and for replaying recorded sessions.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: List[str] = list(lines)
        self._position = 0
        self.output: List[str] = []

    def read_line(self) -> str:
        if self._position >= len(self._lines):
            raise EndOfInputError("Scripted input exhausted")
        line = self._lines[self._position]
        self._position += 1
        return line

    def write(self, text: str = "") -> None:
        self.output.append(text)

