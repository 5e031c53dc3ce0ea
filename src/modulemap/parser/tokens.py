# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds and token records produced by the module map lexer."""

import enum
from dataclasses import dataclass
from types import MappingProxyType

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the module map lexer."""

    # Symbols
    DOT = "."
    COMMA = ","
    BANG = "!"
    STAR = "*"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    # Literals
    STRING = "STRING"
    INTEGER = "INTEGER"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # Keywords
    CONFIG_MACROS = "config_macros"
    EXPORT_AS = "export_as"
    PRIVATE = "private"
    CONFLICT = "conflict"
    FRAMEWORK = "framework"
    REQUIRES = "requires"
    EXCLUDE = "exclude"
    HEADER = "header"
    TEXTUAL = "textual"
    EXPLICIT = "explicit"
    LINK = "link"
    UMBRELLA = "umbrella"
    EXTERN = "extern"
    MODULE = "module"
    USE = "use"
    EXPORT = "export"

    # End of file
    EOF = "EOF"

    # Reserved for scanners that surface bad input in-band; the lexer reports
    # lexical errors out-of-band and never emits this type.
    LEXER_ERROR = "LEXER_ERROR"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        lexeme: The raw source text of the token. String literals keep their
            surrounding quotes; the EOF token has an empty lexeme.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    lexeme: str
    line: int
    column: int

    @property
    def string_value(self) -> str:
        """The content of a string literal with the surrounding quotes removed.

        Raises:
            ValueError: If the token is not a string literal.
        """
        if self.type != TokenType.STRING:
            raise ValueError(f"Token {self.lexeme!r} is not a string literal")
        return self.lexeme[1:-1]


# Reserved words, matched case-sensitively against complete identifiers.
KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "config_macros": TokenType.CONFIG_MACROS,
        "export_as": TokenType.EXPORT_AS,
        "private": TokenType.PRIVATE,
        "conflict": TokenType.CONFLICT,
        "framework": TokenType.FRAMEWORK,
        "requires": TokenType.REQUIRES,
        "exclude": TokenType.EXCLUDE,
        "header": TokenType.HEADER,
        "textual": TokenType.TEXTUAL,
        "explicit": TokenType.EXPLICIT,
        "link": TokenType.LINK,
        "umbrella": TokenType.UMBRELLA,
        "extern": TokenType.EXTERN,
        "module": TokenType.MODULE,
        "use": TokenType.USE,
        "export": TokenType.EXPORT,
    }
)
