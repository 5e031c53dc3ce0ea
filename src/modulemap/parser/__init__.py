# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for module map files."""

from modulemap.parser.errors import (
    FailedToMakeIntegerFromLexeme,
    Located,
    ModuleMapParseError,
    ParseError,
    UnexpectedToken,
    UnrecognizedCharacter,
    UnterminatedString,
)
from modulemap.parser.lexer import scan_all_tokens
from modulemap.parser.parser import parse
from modulemap.parser.tokens import KEYWORDS, Token, TokenType

__all__ = [
    "parse",
    "scan_all_tokens",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Located",
    "ParseError",
    "ModuleMapParseError",
    "UnterminatedString",
    "UnrecognizedCharacter",
    "FailedToMakeIntegerFromLexeme",
    "UnexpectedToken",
]
