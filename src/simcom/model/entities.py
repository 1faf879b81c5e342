# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations and derived compilation artifacts of the SimCom semantic model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from simcom.model.types import Field

# ###############
# Public Interface
# ###############


class TypeDeclaration(BaseModel):
    """A named record type: ``tipo Name(field: Type, ...);``."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[Field, ...] = ()
    line: int = 0
    column: int = 0


class SourceFile(BaseModel):
    """All declarations of one source text, in textual order."""

    model_config = ConfigDict(frozen=True)

    declarations: tuple[TypeDeclaration, ...] = ()


class TypeCatalog(BaseModel):
    """Lookup table from declared type names to their declarations.

    Attributes:
        declarations: Declarations keyed by name, in source order.
    """

    model_config = ConfigDict(frozen=True)

    declarations: dict[str, TypeDeclaration] = _Field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.declarations

    def __len__(self) -> int:
        return len(self.declarations)

    def get(self, name: str) -> TypeDeclaration:
        """Return the declaration named *name*.

        Raises:
            KeyError: If no such type was declared.
        """
        return self.declarations[name]

    def names(self) -> list[str]:
        """Return all declared names in source order."""
        return list(self.declarations)

    def positions(self) -> dict[str, int]:
        """Return the 0-based source position of every declared name.

        The ordering resolver breaks ties between ready types with this index.
        """
        return {name: index for index, name in enumerate(self.declarations)}


class DependencyGraph(BaseModel):
    """Directed "has a field of type" graph between declared types.

    An edge ``A -> B`` means that ``A`` has at least one field whose type is
    the declared type ``B``. Edges carry no multiplicity. Both node order and
    each adjacency list follow source order.

    Attributes:
        nodes: Declared type names in source order.
        edges: Adjacency lists mapping each node to the types it depends on.
    """

    model_config = ConfigDict(frozen=True)

    nodes: tuple[str, ...] = ()
    edges: dict[str, tuple[str, ...]] = _Field(default_factory=dict)

    def dependencies_of(self, name: str) -> tuple[str, ...]:
        """Return the types that *name* directly depends on."""
        return self.edges.get(name, ())

    def dependents_of(self, name: str) -> tuple[str, ...]:
        """Return the types that directly depend on *name*, in source order."""
        return tuple(node for node in self.nodes if name in self.dependencies_of(node))

    def has_edge(self, source: str, target: str) -> bool:
        """Return True if *source* has a field of type *target*."""
        return target in self.dependencies_of(source)

    @property
    def edge_count(self) -> int:
        """Return the number of distinct edges in the graph."""
        return sum(len(targets) for targets in self.edges.values())


# A dependency-respecting sequence of declared type names.
EmissionOrder = tuple[str, ...]
