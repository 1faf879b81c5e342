# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy shared by all compiler stages.

Every stage fails fast by raising one of these exceptions; the pipeline never
produces partial output. Each class carries the process exit code the CLI
reports for it.
"""

from __future__ import annotations

from simcom.model.types import PrimitiveType

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Base class for every failure that aborts a compilation."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ParseError(CompilerError):
    """Raised when the source text is syntactically invalid.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class LexerError(ParseError):
    """Raised when the scanner meets an invalid character or unterminated comment."""


class SemanticError(CompilerError):
    """Raised when well-formed declarations reference or declare types incorrectly."""

    exit_code = 2


class UndefinedTypeError(SemanticError):
    """A field references a name that is neither primitive nor declared."""

    def __init__(self, referencing_type: str, field_name: str, unknown_type: str) -> None:
        super().__init__(f"Undefined type '{unknown_type}' in field '{field_name}' of type '{referencing_type}'")
        self.referencing_type = referencing_type
        self.field_name = field_name
        self.unknown_type = unknown_type


class ReservedNameError(SemanticError):
    """A type or field name is a C keyword and cannot appear in the generated code."""

    def __init__(self, name: str, context: str) -> None:
        super().__init__(f"Name '{name}' in {context} is a reserved word in C")
        self.name = name
        self.context = context


class DuplicateTypeError(SemanticError):
    """Two declarations share a name, or a declaration reuses a primitive name."""

    exit_code = 3

    def __init__(self, name: str, *, primitive: bool = False) -> None:
        if primitive:
            message = f"Type '{name}' redefines a primitive type"
        else:
            message = f"Duplicate type name '{name}'"
        super().__init__(message)
        self.name = name


class DuplicateFieldError(SemanticError):
    """A declaration contains two fields with the same name."""

    exit_code = 3

    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(f"Duplicate field name '{field_name}' in type '{type_name}'")
        self.type_name = type_name
        self.field_name = field_name


class CyclicDependencyError(CompilerError):
    """The declarations contain a dependency cycle and cannot be laid out flat.

    Attributes:
        cycle: One concrete loop with its start repeated at the end,
            e.g. ``("A", "B", "A")``.
        members: The names of the types on that loop.
    """

    exit_code = 3

    def __init__(self, cycle: tuple[str, ...], members: frozenset[str]) -> None:
        if len(cycle) == 2:
            message = f"Type '{cycle[0]}' contains a field of its own type"
        else:
            message = f"Cyclic dependency between types: {' -> '.join(cycle)}"
        super().__init__(message)
        self.cycle = cycle
        self.members = members


class UnknownPrimitiveError(CompilerError):
    """A primitive type has no C spelling. Indicates a bug in the generator table."""

    exit_code = 4

    def __init__(self, primitive: PrimitiveType) -> None:
        super().__init__(f"Internal error: no C mapping for primitive type '{primitive.value}'")
        self.primitive = primitive
