# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the SimCom lexical scanner."""

import pytest

from simcom.compiler.errors import LexerError, ParseError
from simcom.compiler.scanner import Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = tokenize(source)
    assert result[-1].type == TokenType.EOF
    return result[:-1]


def _types(source: str) -> list[TokenType]:
    """Return the token types for all tokens except EOF."""
    return [tok.type for tok in _tokens_no_eof(source)]


def _values(source: str) -> list[str]:
    """Return the token values for all tokens except EOF."""
    return [tok.value for tok in _tokens_no_eof(source)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].value == ""

    def test_whitespace_only_produces_eof(self) -> None:
        tokens = tokenize("   \t\n  ")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_eof_position_after_trailing_newline(self) -> None:
        tokens = tokenize("tipo\n")
        assert tokens[-1].line == 2
        assert tokens[-1].column == 1


# ###############
# Symbols and keywords
# ###############


class TestSymbols:
    def test_all_symbols(self) -> None:
        assert _types("():;,") == [
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.COLON,
            TokenType.SEMICOLON,
            TokenType.COMMA,
        ]

    def test_whitespace_between_symbols_is_ignored(self) -> None:
        assert _types("(     :    )") == [TokenType.LPAREN, TokenType.COLON, TokenType.RPAREN]

    def test_keyword_is_recognized_between_symbols(self) -> None:
        assert _types("tipo:: tipo)") == [
            TokenType.TIPO,
            TokenType.COLON,
            TokenType.COLON,
            TokenType.TIPO,
            TokenType.RPAREN,
        ]

    def test_keyword_prefix_is_an_identifier(self) -> None:
        assert _types("tipos tiipo") == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]


# ###############
# Identifiers
# ###############


class TestIdentifiers:
    @pytest.mark.parametrize("name", ["Punto", "x", "_private", "pal4abra", "castaña", "a_b_1"])
    def test_valid_identifiers(self, name: str) -> None:
        tokens = _tokens_no_eof(name)
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == name

    def test_identifier_sequence(self) -> None:
        assert _values("tipo pal4abra castaña") == ["tipo", "pal4abra", "castaña"]

    def test_digit_cannot_start_identifier(self) -> None:
        with pytest.raises(LexerError, match="Invalid identifier: '1abc'"):
            tokenize("1abc")

    @pytest.mark.parametrize("name", ["x²", "a½", "n₁"])
    def test_non_identifier_characters_are_rejected(self, name: str) -> None:
        """Word characters outside the identifier alphabet would not compile as C."""
        with pytest.raises(LexerError, match="Invalid identifier") as exc_info:
            tokenize(f"tipo A({name}: Entero);")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 8

    def test_identifier_after_multiline_comment_has_correct_position(self) -> None:
        tokens = _tokens_no_eof("/* one\n two */ tipo")
        assert tokens[0].line == 2
        assert tokens[0].column == 9


# ###############
# Comments
# ###############


class TestComments:
    def test_line_comment_is_skipped(self) -> None:
        assert _values("tipo // a comment\nPunto") == ["tipo", "Punto"]

    def test_block_comment_is_skipped(self) -> None:
        assert _values("tipo /* a\nmulti-line\ncomment */ Punto") == ["tipo", "Punto"]

    def test_unterminated_block_comment(self) -> None:
        with pytest.raises(LexerError, match="Unterminated block comment") as exc_info:
            tokenize("tipo /* never closed")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 6


# ###############
# Positions and errors
# ###############


class TestPositions:
    def test_line_and_column_tracking(self) -> None:
        tokens = _tokens_no_eof("tipo A(\n  x: Entero);")
        x_token = tokens[3]
        assert x_token.value == "x"
        assert x_token.line == 2
        assert x_token.column == 3


class TestErrors:
    @pytest.mark.parametrize("source", ["( ! tipo", "tipo A{x: Entero};", "a-b", "#"])
    def test_illegal_character(self, source: str) -> None:
        with pytest.raises(LexerError, match="Unexpected character"):
            tokenize(source)

    def test_error_reports_location(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("tipo\n  !")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 3
        assert "Line 2, column 3" in str(exc_info.value)

    def test_lexer_error_is_a_parse_error(self) -> None:
        with pytest.raises(ParseError):
            tokenize("?")
