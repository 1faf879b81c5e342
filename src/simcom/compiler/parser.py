# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for SimCom declaration files.

Converts a token stream produced by the scanner into a SourceFile model.
"""

import logging

from simcom.compiler.errors import ParseError
from simcom.compiler.scanner import Token, TokenType, tokenize
from simcom.model.entities import SourceFile, TypeDeclaration
from simcom.model.types import Field, NamedTypeRef, PrimitiveTypeRef, TypeRef, primitive_for_name

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(source: str) -> SourceFile:
    """Parse SimCom source text into a SourceFile model.

    Declarations and their fields keep their textual order. Type references
    are classified as primitive or named but not resolved.

    Args:
        source: The full text of a declaration file.

    Returns:
        A SourceFile holding every declaration in the order written.

    Raises:
        LexerError: If the source contains invalid characters or an
            unterminated comment.
        ParseError: If the source is syntactically invalid.
    """
    tokens = tokenize(source)
    source_file = _Parser(tokens).parse()
    logger.debug("Parsed %d declaration(s)", len(source_file.declarations))
    return source_file


# ################
# Implementation
# ################


def _describe(tok: Token) -> str:
    """Return a human-readable rendering of a token for diagnostics."""
    if tok.type == TokenType.EOF:
        return "end of input"
    return repr(tok.value)


class _Parser:
    """Recursive-descent parser for SimCom token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> SourceFile:
        """Parse the full token stream and return a SourceFile."""
        declarations: list[TypeDeclaration] = []
        while not self._at_end():
            declarations.append(self._parse_declaration())
        return SourceFile(declarations=tuple(declarations))

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._current().type == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types."""
        return self._current().type in types

    def _expect(self, token_type: TokenType, what: str) -> Token:
        """Consume the current token if it has the given type.

        Raises ParseError naming *what* was expected otherwise.
        """
        tok = self._current()
        if tok.type != token_type:
            raise ParseError(
                f"Expected {what}, got {_describe(tok)}",
                tok.line,
                tok.column,
            )
        return self._advance()

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _parse_declaration(self) -> TypeDeclaration:
        """Parse: tipo <Name> ( <field> [, <field>]* ) ;"""
        keyword = self._current()
        if keyword.type != TokenType.TIPO:
            raise ParseError(
                f"Expected 'tipo' at start of declaration, got {_describe(keyword)}",
                keyword.line,
                keyword.column,
            )
        self._advance()
        name_tok = self._expect(TokenType.IDENTIFIER, "type name after 'tipo'")
        self._expect(TokenType.LPAREN, f"'(' after type name '{name_tok.value}'")
        fields = self._parse_field_list(name_tok.value)
        self._expect(TokenType.RPAREN, f"',' or ')' in field list of '{name_tok.value}'")
        self._expect(TokenType.SEMICOLON, f"';' after declaration of '{name_tok.value}'")
        return TypeDeclaration(
            name=name_tok.value,
            fields=tuple(fields),
            line=name_tok.line,
            column=name_tok.column,
        )

    def _parse_field_list(self, type_name: str) -> list[Field]:
        """Parse a non-empty, comma-separated list of fields."""
        if self._check(TokenType.RPAREN):
            tok = self._current()
            raise ParseError(
                f"Type '{type_name}' must declare at least one field",
                tok.line,
                tok.column,
            )
        fields = [self._parse_field()]
        while self._check(TokenType.COMMA):
            self._advance()  # consume ,
            fields.append(self._parse_field())
        return fields

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def _parse_field(self) -> Field:
        """Parse: <name> : <Type>"""
        name_tok = self._expect(TokenType.IDENTIFIER, "field name")
        self._expect(TokenType.COLON, f"':' after field name '{name_tok.value}'")
        type_tok = self._expect(TokenType.IDENTIFIER, f"type of field '{name_tok.value}'")
        return Field(
            name=name_tok.value,
            type=_type_ref(type_tok.value),
            line=name_tok.line,
            column=name_tok.column,
        )


def _type_ref(name: str) -> TypeRef:
    """Classify a type name as a primitive or a named (user-declared) reference."""
    primitive = primitive_for_name(name)
    if primitive is not None:
        return PrimitiveTypeRef(primitive=primitive)
    return NamedTypeRef(name=name)
