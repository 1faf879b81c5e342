# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for SimCom: scanning, parsing, analysis, ordering, and C generation."""

from simcom.compiler.build import (
    BuildReport,
    CompilationResult,
    build_project,
    compile_file,
    compile_source,
)
from simcom.compiler.codegen import C_PRIMITIVES, generate
from simcom.compiler.errors import (
    CompilerError,
    CyclicDependencyError,
    DuplicateFieldError,
    DuplicateTypeError,
    LexerError,
    ParseError,
    ReservedNameError,
    SemanticError,
    UndefinedTypeError,
    UnknownPrimitiveError,
)
from simcom.compiler.ordering import resolve_order
from simcom.compiler.parser import parse
from simcom.compiler.semantic_analysis import AnalysisResult, analyze

__all__ = [
    "parse",
    "analyze",
    "AnalysisResult",
    "resolve_order",
    "generate",
    "C_PRIMITIVES",
    "compile_source",
    "compile_file",
    "build_project",
    "CompilationResult",
    "BuildReport",
    "CompilerError",
    "ParseError",
    "LexerError",
    "SemanticError",
    "UndefinedTypeError",
    "ReservedNameError",
    "DuplicateTypeError",
    "DuplicateFieldError",
    "CyclicDependencyError",
    "UnknownPrimitiveError",
]
