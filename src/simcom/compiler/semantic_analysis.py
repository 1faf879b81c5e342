# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis for parsed SimCom declarations.

Indexes declarations by name into a TypeCatalog and derives the dependency
graph between them. Structural problems (duplicate names, duplicate fields,
names the C target cannot express, unresolved type references) are detected
here. Cycles are left for the ordering resolver, which needs the full graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from simcom.compiler.errors import (
    DuplicateFieldError,
    DuplicateTypeError,
    ReservedNameError,
    UndefinedTypeError,
)
from simcom.model.entities import DependencyGraph, SourceFile, TypeCatalog, TypeDeclaration
from simcom.model.types import NamedTypeRef, primitive_for_name

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class AnalysisResult:
    """The name lookup table and dependency graph of one compilation.

    Attributes:
        catalog: Declarations keyed by name, in source order.
        graph: The "has a field of type" graph between declared types.
    """

    catalog: TypeCatalog
    graph: DependencyGraph


def analyze(source_file: SourceFile) -> AnalysisResult:
    """Perform semantic analysis on a parsed SourceFile.

    Checks performed, in this order, each in source order:

    - Type names must not be C keywords, primitive names, or already declared.
    - Field names must not be C keywords or repeated within one declaration.
    - Every named field type must refer to a declared type.

    Args:
        source_file: The parsed declarations.

    Returns:
        An :class:`AnalysisResult` with the catalog and dependency graph.

    Raises:
        ReservedNameError: If a type or field name is a C keyword.
        DuplicateTypeError: If a name is declared twice or shadows a primitive.
        DuplicateFieldError: If a declaration repeats a field name.
        UndefinedTypeError: If a field references an undeclared type.
    """
    catalog = build_catalog(source_file)
    graph = build_graph(catalog)
    return AnalysisResult(catalog=catalog, graph=graph)


def build_catalog(source_file: SourceFile) -> TypeCatalog:
    """Index declarations by name, rejecting duplicate or unusable names.

    Raises:
        ReservedNameError: If a type or field name is a C keyword.
        DuplicateTypeError: If a name is declared twice or shadows a primitive.
        DuplicateFieldError: If a declaration repeats a field name.
    """
    declarations: dict[str, TypeDeclaration] = {}
    for decl in source_file.declarations:
        if decl.name in C_KEYWORDS:
            raise ReservedNameError(decl.name, f"declaration of type '{decl.name}'")
        if primitive_for_name(decl.name) is not None:
            raise DuplicateTypeError(decl.name, primitive=True)
        if decl.name in declarations:
            raise DuplicateTypeError(decl.name)
        _check_fields(decl)
        declarations[decl.name] = decl
    return TypeCatalog(declarations=declarations)


def build_graph(catalog: TypeCatalog) -> DependencyGraph:
    """Build the dependency graph of a catalog.

    Adds an edge ``A -> B`` for each declaration ``A`` with a field of declared
    type ``B``. A field of a type's own name produces a self-edge so that the
    ordering resolver reports it as a cycle.

    Raises:
        UndefinedTypeError: If a field references a type missing from *catalog*.
    """
    edges: dict[str, tuple[str, ...]] = {}
    for decl in catalog.declarations.values():
        # dict keys keep first-reference order and drop repeated targets
        targets: dict[str, None] = {}
        for field_def in decl.fields:
            if not isinstance(field_def.type, NamedTypeRef):
                continue
            target = field_def.type.name
            if target not in catalog:
                raise UndefinedTypeError(decl.name, field_def.name, target)
            targets[target] = None
        edges[decl.name] = tuple(targets)
    graph = DependencyGraph(nodes=tuple(catalog.names()), edges=edges)
    logger.debug("Built dependency graph: %d type(s), %d edge(s)", len(graph.nodes), graph.edge_count)
    return graph


# Keywords of C11 (plus the C23 additions) that cannot name a struct or member.
C_KEYWORDS: frozenset[str] = frozenset(
    {
        "alignas",
        "alignof",
        "auto",
        "bool",
        "break",
        "case",
        "char",
        "const",
        "constexpr",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extern",
        "false",
        "float",
        "for",
        "goto",
        "if",
        "inline",
        "int",
        "long",
        "nullptr",
        "register",
        "restrict",
        "return",
        "short",
        "signed",
        "sizeof",
        "static",
        "static_assert",
        "struct",
        "switch",
        "thread_local",
        "true",
        "typedef",
        "typeof",
        "typeof_unqual",
        "union",
        "unsigned",
        "void",
        "volatile",
        "while",
        "_Alignas",
        "_Alignof",
        "_Atomic",
        "_BitInt",
        "_Bool",
        "_Complex",
        "_Decimal128",
        "_Decimal32",
        "_Decimal64",
        "_Generic",
        "_Imaginary",
        "_Noreturn",
        "_Static_assert",
        "_Thread_local",
    }
)


# ################
# Implementation
# ################


def _check_fields(decl: TypeDeclaration) -> None:
    """Reject reserved or repeated field names within one declaration."""
    seen: set[str] = set()
    for field_def in decl.fields:
        if field_def.name in C_KEYWORDS:
            raise ReservedNameError(field_def.name, f"field of type '{decl.name}'")
        if field_def.name in seen:
            raise DuplicateFieldError(decl.name, field_def.name)
        seen.add(field_def.name)
