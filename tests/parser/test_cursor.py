# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the character-level scanning cursor."""

import pytest

from modulemap.parser.cursor import NUL, Cursor


class TestAdvance:
    def test_returns_characters_in_order(self) -> None:
        cursor = Cursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"

    def test_column_increments(self) -> None:
        cursor = Cursor("ab")
        cursor.advance()
        assert (cursor.line, cursor.column) == (1, 2)

    def test_newline_moves_to_next_line(self) -> None:
        cursor = Cursor("a\nb")
        cursor.advance()
        cursor.advance()
        assert (cursor.line, cursor.column) == (2, 1)

    def test_advance_past_end_raises(self) -> None:
        cursor = Cursor("a")
        cursor.advance()
        with pytest.raises(IndexError):
            cursor.advance()

    def test_advance_on_empty_text_raises(self) -> None:
        with pytest.raises(IndexError):
            Cursor("").advance()


class TestPeekAndMatch:
    def test_peek_does_not_consume(self) -> None:
        cursor = Cursor("xy")
        assert cursor.peek() == "x"
        assert cursor.peek() == "x"
        assert cursor.column == 1

    def test_peek_at_end_returns_nul(self) -> None:
        cursor = Cursor("x")
        cursor.advance()
        assert cursor.peek() == NUL

    def test_match_consumes_on_success(self) -> None:
        cursor = Cursor("/*")
        assert cursor.match("/")
        assert cursor.peek() == "*"

    def test_match_leaves_position_on_failure(self) -> None:
        cursor = Cursor("/*")
        assert not cursor.match("*")
        assert cursor.peek() == "/"
        assert cursor.column == 1

    def test_match_at_end_is_false(self) -> None:
        cursor = Cursor("")
        assert not cursor.match("a")

    def test_match_newline_updates_line(self) -> None:
        cursor = Cursor("\nx")
        assert cursor.match("\n")
        assert (cursor.line, cursor.column) == (2, 1)


class TestBoundaries:
    def test_fresh_cursor_over_two_chars(self) -> None:
        cursor = Cursor("ab")
        assert not cursor.is_at_end
        assert not cursor.is_past_end

    def test_last_character_remaining(self) -> None:
        cursor = Cursor("ab")
        cursor.advance()
        assert cursor.is_at_end
        assert not cursor.is_past_end

    def test_fully_consumed(self) -> None:
        cursor = Cursor("ab")
        cursor.advance()
        cursor.advance()
        assert cursor.is_at_end
        assert cursor.is_past_end

    def test_empty_text_is_past_end(self) -> None:
        cursor = Cursor("")
        assert cursor.is_past_end
        assert (cursor.line, cursor.column) == (1, 1)
