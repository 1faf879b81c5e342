# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for SimCom declaration files.

The token set is small enough to be described by one alternation of named
groups; the scanner walks its matches and only tracks source positions.
"""

import enum
import logging
import re
from dataclasses import dataclass

from simcom.compiler.errors import LexerError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the SimCom scanner."""

    TIPO = "tipo"
    LPAREN = "("
    RPAREN = ")"
    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","
    IDENTIFIER = "IDENTIFIER"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


def tokenize(source: str) -> list[Token]:
    """Tokenize SimCom source text into a sequence of tokens.

    Whitespace, ``//`` line comments and ``/* */`` block comments are
    dropped. Identifiers follow the Unicode identifier rules shared by
    Python and C (``str.isidentifier``), so ``castaña`` is accepted while
    ``x²`` is not.

    Args:
        source: The full text of a declaration file.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On unexpected characters, invalid identifiers, or
            unterminated block comments.
    """
    tokens: list[Token] = []
    line = 1
    line_start = 0

    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup
        value = match.group()
        column = match.start() - line_start + 1

        if kind == "WORD":
            if not value.isidentifier():
                raise LexerError(f"Invalid identifier: {value!r}", line, column)
            tokens.append(Token(_KEYWORDS.get(value, TokenType.IDENTIFIER), value, line, column))
        elif kind == "SYMBOL":
            tokens.append(Token(TokenType(value), value, line, column))
        elif kind == "OPEN_COMMENT":
            raise LexerError("Unterminated block comment", line, column)
        elif kind == "MISMATCH":
            raise LexerError(f"Unexpected character: {value!r}", line, column)

        newlines = value.count("\n")
        if newlines:
            line += newlines
            line_start = match.start() + value.rindex("\n") + 1

    tokens.append(Token(TokenType.EOF, "", line, len(source) - line_start + 1))
    logger.debug("Scanned %d token(s)", len(tokens) - 1)
    return tokens


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {"tipo": TokenType.TIPO}

# Order matters: a closed block comment must win over the bare opener, and
# the opener over the single-character fallback.
_TOKEN_RE = re.compile(
    r"""
      (?P<SPACE>\s+)
    | (?P<LINE_COMMENT>//[^\n]*)
    | (?P<BLOCK_COMMENT>/\*.*?\*/)
    | (?P<OPEN_COMMENT>/\*)
    | (?P<WORD>\w+)
    | (?P<SYMBOL>[():;,])
    | (?P<MISMATCH>.)
    """,
    re.VERBOSE | re.DOTALL,
)
