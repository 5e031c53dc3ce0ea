# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Located error values reported by the module map lexer and parser."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from modulemap.parser.tokens import TokenType

# ###############
# Public Interface
# ###############

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Located(Generic[T]):
    """A value paired with the line and column where it originated.

    Attribute access not satisfied by the wrapper itself is forwarded to the
    wrapped value, so ``located.lexeme`` reads ``located.value.lexeme``.

    Attributes:
        value: The wrapped value.
        line: 1-based line number.
        column: 1-based column number.
    """

    value: T
    line: int
    column: int

    def map(self, transform: Callable[[T], U]) -> Located[U]:
        """Return a new Located holding ``transform(value)`` at the same position."""
        return Located(transform(self.value), self.line, self.column)

    def __getattr__(self, name: str) -> Any:
        if name == "value" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.value, name)

    def __str__(self) -> str:
        return f"Line {self.line}, column {self.column}: {self.value}"


@dataclass(frozen=True)
class UnterminatedString:
    """A string literal reached a newline or the end of input before its closing quote."""

    lexeme: str

    def __str__(self) -> str:
        return f"Unterminated string literal {self.lexeme}"


@dataclass(frozen=True)
class UnrecognizedCharacter:
    """A character that cannot start any token."""

    character: str

    def __str__(self) -> str:
        return f"Unrecognized character {self.character!r}"


@dataclass(frozen=True)
class FailedToMakeIntegerFromLexeme:
    """An integer literal whose digits do not fit a signed 64-bit integer."""

    lexeme: str

    def __str__(self) -> str:
        return f"Integer literal {self.lexeme} is out of range"


@dataclass(frozen=True)
class UnexpectedToken:
    """A token that does not satisfy the grammar at its position.

    Attributes:
        token_type: The type of the offending token.
        lexeme: The source text of the offending token.
        message: What the parser expected instead.
    """

    token_type: TokenType
    lexeme: str
    message: str

    def __str__(self) -> str:
        if self.token_type == TokenType.EOF:
            return f"{self.message}, got end of file"
        return f"{self.message}, got {self.lexeme!r}"


ParseError = UnterminatedString | UnrecognizedCharacter | FailedToMakeIntegerFromLexeme | UnexpectedToken


class ModuleMapParseError(Exception):
    """Raised when module map source text contains lexical or syntax errors.

    Attributes:
        errors: Every error found in the source, each with its location, in the
            order they were detected.
    """

    def __init__(self, errors: list[Located[ParseError]]) -> None:
        super().__init__("\n".join(str(error) for error in errors))
        self.errors = errors
