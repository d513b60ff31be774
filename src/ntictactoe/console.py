"""
Console input/output used by the interactive game and setup prompts.

Input is read token-wise (whitespace separated, across lines), so
"2 3" on one line and "2" / "3" on two lines are equivalent.
"""
from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Optional, TextIO, Tuple

from .errors import InputError

COORDINATES_PROMPT = "Enter row and column (e.g., 1 1): "


class ConsoleIO:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens: Deque[str] = deque()

    def show(self, text: str) -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def ask(self, prompt: str) -> None:
        self._out.write(prompt)
        self._out.flush()

    def next_token(self) -> str:
        while not self._tokens:
            line = self._in.readline()
            if line == "":
                raise InputError("Unexpected end of input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def read_int(self, prompt: str) -> int:
        self.ask(prompt)
        token = self.next_token()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"Expected an integer, got {token!r}") from None

    def read_token(self, prompt: str) -> str:
        self.ask(prompt)
        return self.next_token()

    def request_coordinates(self) -> Tuple[int, int]:
        """Read a 1-based (row, col) pair and return it 0-based."""
        self.ask(COORDINATES_PROMPT)
        row_tok = self.next_token()
        col_tok = self.next_token()
        try:
            row, col = int(row_tok), int(col_tok)
        except ValueError:
            raise InputError(
                f"Coordinates must be integers, got {row_tok!r} {col_tok!r}"
            ) from None
        return row - 1, col - 1
