# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for located error values and the parse failure exception."""

from dataclasses import dataclass

import pytest

from modulemap.parser.errors import (
    FailedToMakeIntegerFromLexeme,
    Located,
    ModuleMapParseError,
    UnexpectedToken,
    UnrecognizedCharacter,
    UnterminatedString,
)
from modulemap.parser.tokens import TokenType


@dataclass(frozen=True)
class _Point:
    x: int
    y: int


class TestLocated:
    def test_map_preserves_line_and_column(self) -> None:
        first = Located("foo", 12, 34)
        second = first.map(lambda _: 0)
        assert second == Located(0, 12, 34)

    def test_attribute_access_is_forwarded_to_value(self) -> None:
        located = Located(_Point(x=2, y=3), 1, 1)
        assert located.x == 2
        assert located.y == 3

    def test_own_fields_take_precedence(self) -> None:
        located = Located(_Point(x=2, y=3), 7, 9)
        assert located.line == 7
        assert located.column == 9

    def test_missing_attribute_raises(self) -> None:
        located = Located(_Point(x=2, y=3), 1, 1)
        with pytest.raises(AttributeError):
            _ = located.z

    def test_equality_includes_location(self) -> None:
        assert Located("a", 1, 1) != Located("a", 1, 2)

    def test_str_includes_location(self) -> None:
        located = Located(UnrecognizedCharacter("@"), 3, 5)
        assert str(located) == "Line 3, column 5: Unrecognized character '@'"


class TestErrorDescriptions:
    def test_unterminated_string(self) -> None:
        assert "Unterminated string literal" in str(UnterminatedString('"abc'))

    def test_integer_out_of_range(self) -> None:
        assert "99999999999999999999" in str(FailedToMakeIntegerFromLexeme("99999999999999999999"))

    def test_unexpected_token(self) -> None:
        error = UnexpectedToken(TokenType.IDENTIFIER, "oops", "Expected a module member declaration")
        assert str(error) == "Expected a module member declaration, got 'oops'"

    def test_unexpected_end_of_file(self) -> None:
        error = UnexpectedToken(TokenType.EOF, "", "Expected '}' after module members block")
        assert str(error) == "Expected '}' after module members block, got end of file"

    def test_errors_are_value_types(self) -> None:
        assert UnterminatedString('"a') == UnterminatedString('"a')
        assert hash(UnrecognizedCharacter("$")) == hash(UnrecognizedCharacter("$"))


class TestModuleMapParseError:
    def test_carries_all_errors(self) -> None:
        errors = [
            Located(UnrecognizedCharacter("@"), 1, 3),
            Located(UnexpectedToken(TokenType.RBRACE, "}", "Expected module identifier"), 2, 8),
        ]
        exc = ModuleMapParseError(errors)
        assert exc.errors == errors

    def test_message_lists_every_error(self) -> None:
        exc = ModuleMapParseError(
            [
                Located(UnrecognizedCharacter("@"), 1, 3),
                Located(UnrecognizedCharacter("$"), 4, 1),
            ]
        )
        assert str(exc).splitlines() == [
            "Line 1, column 3: Unrecognized character '@'",
            "Line 4, column 1: Unrecognized character '$'",
        ]
