# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character-level scanning primitive used by the lexer."""

# ###############
# Public Interface
# ###############

NUL = "\0"


class Cursor:
    """Scans a string one character at a time while tracking 1-based line and column.

    The line/column pair always describes the position of the *next* character
    to be consumed. Consuming a newline moves to column 1 of the following line.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def line(self) -> int:
        """1-based line of the next character."""
        return self._line

    @property
    def column(self) -> int:
        """1-based column of the next character."""
        return self._column

    @property
    def is_at_end(self) -> bool:
        """Return True if at most one character remains to be consumed."""
        return self._pos >= len(self._text) - 1

    @property
    def is_past_end(self) -> bool:
        """Return True if every character has been consumed."""
        return self._pos >= len(self._text)

    def advance(self) -> str:
        """Consume the next character and return it.

        Raises:
            IndexError: If the cursor has already consumed the whole text.
        """
        if self.is_past_end:
            raise IndexError("Attempted to advance past the end of the text")
        ch = self._text[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals *expected*."""
        if self.is_past_end or self._text[self._pos] != expected:
            return False
        self.advance()
        return True

    def peek(self) -> str:
        """Return the next character without consuming it, or NUL at the end."""
        if self.is_past_end:
            return NUL
        return self._text[self._pos]
