"""Character reader that tracks line and column positions."""

from __future__ import annotations

import os


class Reader:
    """Reads source text one character at a time.

    ``current_char`` is ``None`` once the end of input is reached.
    On creation the first character is already read, so ``line_no`` is 1
    and ``col_no`` is the column of ``current_char``.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.line_no = 1
        self.col_no = 0
        self.current_char: str | None = None
        self.read_char()

    def read_char(self) -> str | None:
        """Advance to the next character and return it, or ``None`` at end."""
        if self._pos < len(self._text):
            self.current_char = self._text[self._pos]
            self._pos += 1
        else:
            self.current_char = None
        self.col_no += 1
        if self.current_char == "\n":
            self.line_no += 1
            self.col_no = 0
        return self.current_char


def open_source(path: str | os.PathLike[str]) -> Reader:
    """Read the file at ``path`` and return a reader positioned at its start.

    Each byte of the file is one character. Raises ``OSError`` if the file
    cannot be read.
    """
    with open(path, encoding="latin-1") as stream:
        return Reader(stream.read())