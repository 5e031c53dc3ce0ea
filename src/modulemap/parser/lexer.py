# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for module map files.

Converts raw source text into a sequence of tokens for subsequent parsing.
Scanning never stops early: malformed input is reported as located errors
alongside the tokens that could be recognised.
"""

import logging

from modulemap.parser.cursor import Cursor
from modulemap.parser.errors import Located, ParseError, UnrecognizedCharacter, UnterminatedString
from modulemap.parser.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def scan_all_tokens(text: str) -> tuple[list[Token], list[Located[ParseError]]]:
    """Tokenize module map source text.

    Comments and whitespace are consumed and not included in the output.

    Args:
        text: The full text of a module map file.

    Returns:
        A pair of the token list and the lexical errors. The token list always
        ends with exactly one EOF token whose lexeme is empty. Characters that
        belong to an erroneous construct produce no token.
    """
    return _Lexer(text).scan()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    "!": TokenType.BANG,
    "*": TokenType.STAR,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

_NEWLINES = "\r\n"


def _is_digit(ch: str) -> bool:
    # ASCII only; str.isdecimal() also accepts digits from other scripts.
    return "0" <= ch <= "9"


def _is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_identifier_part(ch: str) -> bool:
    return ch.isalpha() or _is_digit(ch) or ch == "_"


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, text: str) -> None:
        self._cursor = Cursor(text)
        self._tokens: list[Token] = []
        self._errors: list[Located[ParseError]] = []

    def scan(self) -> tuple[list[Token], list[Located[ParseError]]]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while not self._cursor.is_past_end:
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._cursor.line, self._cursor.column))
        return self._tokens, self._errors

    def _add_token(self, token_type: TokenType, lexeme: str, line: int, column: int) -> None:
        self._tokens.append(Token(token_type, lexeme, line, column))

    def _add_error(self, error: ParseError, line: int, column: int) -> None:
        logger.debug("Lexical error at %d:%d: %s", line, column, error)
        self._errors.append(Located(error, line, column))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one token's worth of input starting at the current character."""
        line = self._cursor.line
        column = self._cursor.column
        ch = self._cursor.advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch], ch, line, column)
        elif ch == '"':
            self._scan_string(line, column)
        elif ch == "/":
            if self._cursor.match("/"):
                self._skip_line_comment()
            elif self._cursor.match("*"):
                self._skip_block_comment()
            else:
                self._add_error(UnrecognizedCharacter(ch), line, column)
        elif _is_digit(ch):
            self._scan_integer(ch, line, column)
        elif _is_identifier_start(ch):
            self._scan_identifier_or_keyword(ch, line, column)
        elif ch.isspace():
            pass
        else:
            self._add_error(UnrecognizedCharacter(ch), line, column)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        """Consume from '//' through the end of the line, newline included."""
        while not self._cursor.is_past_end:
            if self._cursor.advance() == "\n":
                return

    def _skip_block_comment(self) -> None:
        """Consume from '/*' through the first '*/'.

        Block comments do not nest. An unterminated comment runs to the end of input.
        """
        while not self._cursor.is_past_end:
            if self._cursor.advance() == "*" and self._cursor.match("/"):
                return

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self, line: int, column: int) -> None:
        """Scan a double-quoted string literal, keeping escapes and quotes verbatim.

        A backslash escapes the following character, including a newline.
        """
        chars = ['"']
        escaped = False
        while not self._cursor.is_past_end:
            ch = self._cursor.advance()
            if escaped:
                chars.append(ch)
                if ch == "\r" and self._cursor.match("\n"):
                    chars.append("\n")
                escaped = False
            elif ch == "\\":
                chars.append(ch)
                escaped = True
            elif ch == '"':
                chars.append(ch)
                self._add_token(TokenType.STRING, "".join(chars), line, column)
                return
            elif ch in _NEWLINES:
                self._add_error(UnterminatedString("".join(chars)), line, column)
                return
            else:
                chars.append(ch)
        self._add_error(UnterminatedString("".join(chars)), line, column)

    def _scan_integer(self, first: str, line: int, column: int) -> None:
        """Scan a run of decimal digits. Range checking is left to the parser."""
        chars = [first]
        while _is_digit(self._cursor.peek()):
            chars.append(self._cursor.advance())
        self._add_token(TokenType.INTEGER, "".join(chars), line, column)

    def _scan_identifier_or_keyword(self, first: str, line: int, column: int) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        chars = [first]
        while _is_identifier_part(self._cursor.peek()):
            chars.append(self._cursor.advance())
        lexeme = "".join(chars)
        self._add_token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER), lexeme, line, column)
