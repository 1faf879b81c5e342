# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Integration tests for the SimCom compiler pipeline.

These tests run the full pipeline (scanning, parsing, semantic analysis,
ordering, and code generation) against the declaration files stored in
tests/data/. Each positive example has a golden ``.h`` file next to it.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from simcom.compiler.build import compile_source
from simcom.compiler.errors import (
    CompilerError,
    CyclicDependencyError,
    DuplicateFieldError,
    DuplicateTypeError,
    ParseError,
    UndefinedTypeError,
)

# ###############
# Helpers
# ###############

DATA_DIR = Path(__file__).parent.parent / "data"
POSITIVE_DIR = DATA_DIR / "positive"
NEGATIVE_DIR = DATA_DIR / "negative"

_STRUCT_RE = re.compile(r"typedef struct (\w+) \{\n(.*?)\} \1;", re.DOTALL)


def _compile(path: Path) -> str:
    """Compile the given declaration file and return the generated C."""
    return compile_source(path.read_text(encoding="utf-8")).code


def _structs(code: str) -> dict[str, list[str]]:
    """Map each generated struct name to its member lines."""
    return {m.group(1): m.group(2).strip().splitlines() for m in _STRUCT_RE.finditer(code)}


def _struct_names(code: str) -> list[str]:
    return [m.group(1) for m in _STRUCT_RE.finditer(code)]


# ###############
# Positive Examples
# ###############


@pytest.mark.parametrize("path", sorted(POSITIVE_DIR.glob("*.tipo")), ids=lambda p: p.stem)
def test_positive_example_matches_golden_output(path: Path) -> None:
    expected = path.with_suffix(".h").read_text(encoding="utf-8")
    assert _compile(path) == expected


def test_circulo_scenario() -> None:
    code = compile_source("tipo Circulo(centro: Punto, radio: Real); tipo Punto(x: Entero, y: Entero);").code
    assert _struct_names(code) == ["Punto", "Circulo"]
    structs = _structs(code)
    assert [line.strip() for line in structs["Punto"]] == ["long x;", "long y;"]
    assert [line.strip() for line in structs["Circulo"]] == ["Punto centro;", "double radio;"]


def test_every_referenced_struct_is_defined_earlier() -> None:
    code = _compile(POSITIVE_DIR / "scene.tipo")
    names = _struct_names(code)
    structs = _structs(code)
    for index, name in enumerate(names):
        for member in structs[name]:
            member_type = member.split()[0]
            if member_type in structs:
                assert names.index(member_type) < index


def test_reordered_input_yields_same_structs() -> None:
    source = (POSITIVE_DIR / "scene.tipo").read_text(encoding="utf-8")
    declarations = [d.strip() + ";" for d in re.sub(r"/\*.*?\*/", "", source, flags=re.DOTALL).split(";") if d.strip()]
    forward = compile_source(" ".join(declarations)).code
    backward = compile_source(" ".join(reversed(declarations))).code
    assert _structs(forward) == _structs(backward)


def test_compilations_do_not_share_state() -> None:
    first = compile_source("tipo A(x: Entero);").code
    second = compile_source("tipo A(x: Real);").code
    assert "long x;" in first
    assert "double x;" in second


def test_compilation_result_exposes_model_and_order() -> None:
    result = compile_source("tipo B(a: A); tipo A(x: Entero);")
    assert [d.name for d in result.source_file.declarations] == ["B", "A"]
    assert result.order == ("A", "B")


# ###############
# Negative Examples
# ###############


@pytest.mark.parametrize(
    ("file_name", "error_type", "fragment"),
    [
        ("cycle.tipo", CyclicDependencyError, "A -> B -> A"),
        ("self_reference.tipo", CyclicDependencyError, "Nodo"),
        ("undefined_type.tipo", UndefinedTypeError, "Undefined type 'Punto'"),
        ("duplicate_type.tipo", DuplicateTypeError, "Duplicate type name 'Punto'"),
        ("duplicate_field.tipo", DuplicateFieldError, "Duplicate field name 'x'"),
        ("syntax_error.tipo", ParseError, "Expected ':'"),
    ],
)
def test_negative_example_is_rejected(file_name: str, error_type: type[CompilerError], fragment: str) -> None:
    with pytest.raises(error_type, match=re.escape(fragment)):
        _compile(NEGATIVE_DIR / file_name)


def test_negative_directory_is_fully_covered() -> None:
    assert {p.name for p in NEGATIVE_DIR.glob("*.tipo")} == {
        "cycle.tipo",
        "self_reference.tipo",
        "undefined_type.tipo",
        "duplicate_type.tipo",
        "duplicate_field.tipo",
        "syntax_error.tipo",
    }


def test_cycle_scenario_names_both_types() -> None:
    with pytest.raises(CyclicDependencyError) as exc_info:
        compile_source("tipo A(b: B); tipo B(a: A);")
    assert exc_info.value.members == frozenset({"A", "B"})


def test_non_identifier_field_name_produces_no_c() -> None:
    with pytest.raises(ParseError, match="Invalid identifier: 'x²'") as exc_info:
        compile_source("tipo A(x²: Entero);")
    assert exc_info.value.exit_code == 1


def test_long_dependency_ring_is_reported_as_cycle() -> None:
    """Cycle detection does not depend on the interpreter's recursion limit."""
    count = 3000
    source = " ".join(f"tipo T{i}(x: T{(i + 1) % count});" for i in range(count))
    with pytest.raises(CyclicDependencyError) as exc_info:
        compile_source(source)
    assert len(exc_info.value.cycle) == count + 1
    assert exc_info.value.cycle[0] == exc_info.value.cycle[-1] == "T0"
    assert len(exc_info.value.members) == count
