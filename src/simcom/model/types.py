# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type system representations for the SimCom semantic model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Built-in scalar types of the declaration language.

    The set is closed: the code generator carries exactly one C spelling for
    each member.
    """

    ENTERO = "Entero"
    REAL = "Real"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType


class NamedTypeRef(BaseModel):
    """Reference to a user-declared type by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str


# A field type reference: either a built-in primitive or a declared record.
TypeRef = Annotated[
    PrimitiveTypeRef | NamedTypeRef,
    _Field(discriminator="kind"),
]


class Field(BaseModel):
    """A named, typed member of a type declaration.

    Attributes:
        name: The member name as written in the source.
        type: The member's type reference.
        line: 1-based source line of the member name (0 when built by hand).
        column: 1-based source column of the member name (0 when built by hand).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeRef
    line: int = 0
    column: int = 0

    @property
    def type_name(self) -> str:
        """Return the type name as spelled in the source."""
        if isinstance(self.type, PrimitiveTypeRef):
            return self.type.primitive.value
        return self.type.name


def primitive_for_name(name: str) -> PrimitiveType | None:
    """Return the primitive spelled *name*, or None for any other identifier."""
    try:
        return PrimitiveType(name)
    except ValueError:
        return None


Field.model_rebuild()
