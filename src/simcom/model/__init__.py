# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for SimCom (declarations, type references, dependency graph)."""

from simcom.model.entities import (
    DependencyGraph,
    EmissionOrder,
    SourceFile,
    TypeCatalog,
    TypeDeclaration,
)
from simcom.model.types import (
    Field,
    NamedTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeRef,
    primitive_for_name,
)

__all__ = [
    # Type system
    "PrimitiveType",
    "PrimitiveTypeRef",
    "NamedTypeRef",
    "TypeRef",
    "Field",
    "primitive_for_name",
    # Entities
    "TypeDeclaration",
    "SourceFile",
    "TypeCatalog",
    "DependencyGraph",
    "EmissionOrder",
]
