# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""C code generation for resolved SimCom declarations.

Each declared type becomes a tagged struct aliased by a typedef of the same
name::

    typedef struct Punto {
        long x;
        long y;
    } Punto;
"""

from __future__ import annotations

import logging

from simcom.compiler.errors import UnknownPrimitiveError
from simcom.model.entities import EmissionOrder, TypeCatalog, TypeDeclaration
from simcom.model.types import NamedTypeRef, PrimitiveType, PrimitiveTypeRef, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

C_PRIMITIVES: dict[PrimitiveType, str] = {
    PrimitiveType.ENTERO: "long",
    PrimitiveType.REAL: "double",
}

DEFAULT_INDENT = 4


def generate(catalog: TypeCatalog, order: EmissionOrder, *, indent: int = DEFAULT_INDENT) -> str:
    """Render the declarations named in *order* as C struct definitions.

    Definitions appear exactly in *order*, separated by a blank line, and the
    text ends with a newline. An empty order yields an empty string.

    Args:
        catalog: Lookup table for the declarations.
        order: Emission order produced by the ordering resolver.
        indent: Number of spaces before each member line.

    Returns:
        The generated C source text.

    Raises:
        UnknownPrimitiveError: If any primitive has no entry in :data:`C_PRIMITIVES`,
            whether or not *order* uses it.
    """
    check_primitive_table()
    blocks = [render_struct(catalog.get(name), indent=indent) for name in order]
    logger.debug("Generated %d struct definition(s)", len(blocks))
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def render_struct(decl: TypeDeclaration, *, indent: int = DEFAULT_INDENT) -> str:
    """Render one declaration as a ``typedef struct`` block without a trailing newline."""
    pad = " " * indent
    lines = [f"typedef struct {decl.name} {{"]
    lines.extend(f"{pad}{c_type_name(f.type)} {f.name};" for f in decl.fields)
    lines.append(f"}} {decl.name};")
    return "\n".join(lines)


def c_type_name(type_ref: TypeRef) -> str:
    """Return the C spelling of a field type.

    Raises:
        UnknownPrimitiveError: If a primitive has no entry in :data:`C_PRIMITIVES`.
    """
    if isinstance(type_ref, PrimitiveTypeRef):
        spelling = C_PRIMITIVES.get(type_ref.primitive)
        if spelling is None:
            raise UnknownPrimitiveError(type_ref.primitive)
        return spelling
    if isinstance(type_ref, NamedTypeRef):
        return type_ref.name
    raise TypeError(f"Unsupported type reference: {type_ref!r}")


def check_primitive_table() -> None:
    """Verify that every primitive type has a C spelling.

    Raises:
        UnknownPrimitiveError: For the first primitive missing from the table.
    """
    for primitive in PrimitiveType:
        if primitive not in C_PRIMITIVES:
            raise UnknownPrimitiveError(primitive)
