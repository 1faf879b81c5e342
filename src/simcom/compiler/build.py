# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation driver for SimCom declaration files.

Runs the pipeline scanner -> parser -> semantic analysis -> ordering ->
code generation on a string, a single file, or a whole project directory.
Every stage fails fast: output is only written once the complete C text has
been generated, so a failed compilation never creates or overwrites a file.

Project builds implement a CMake-style cache: a generated header is reused
when it already exists and is strictly newer than both its source file and
the project's `simcom.yaml`, so changed settings regenerate every header.
Each source file is an independent compilation unit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from simcom.compiler.codegen import DEFAULT_INDENT, generate
from simcom.compiler.errors import CompilerError
from simcom.compiler.ordering import resolve_order
from simcom.compiler.parser import parse
from simcom.compiler.semantic_analysis import analyze
from simcom.model.entities import EmissionOrder, SourceFile
from simcom.workspace.config import CONFIG_FILE_NAME, ProjectConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CompilationResult:
    """Everything one successful compilation produced.

    Attributes:
        source_file: The parsed declarations, in source order.
        order: The resolved emission order.
        code: The generated C text.
    """

    source_file: SourceFile
    order: EmissionOrder
    code: str


@dataclass(frozen=True)
class BuildFailure:
    """A source file whose compilation failed."""

    source: Path
    error: CompilerError


@dataclass
class BuildReport:
    """Outcome of building a project.

    Attributes:
        compiled: Sources compiled in this run, mapped to their outputs.
        up_to_date: Sources skipped because their output was newer.
        failures: Sources that failed to compile.
    """

    compiled: dict[Path, Path] = field(default_factory=dict)
    up_to_date: list[Path] = field(default_factory=list)
    failures: list[BuildFailure] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any source file failed to compile."""
        return len(self.failures) > 0


def compile_source(source: str, *, indent: int = DEFAULT_INDENT) -> CompilationResult:
    """Compile declaration source text into C struct definitions.

    Args:
        source: The full declaration text.
        indent: Number of spaces before each struct member.

    Returns:
        A :class:`CompilationResult` with the parsed model, order, and code.

    Raises:
        CompilerError: Any subclass, from the first stage that fails.
    """
    source_file = parse(source)
    analysis = analyze(source_file)
    order = resolve_order(analysis.catalog, analysis.graph)
    code = generate(analysis.catalog, order, indent=indent)
    return CompilationResult(source_file=source_file, order=order, code=code)


def compile_file(
    source_path: Path,
    output_path: Path | None = None,
    *,
    indent: int = DEFAULT_INDENT,
) -> str:
    """Compile one declaration file.

    Args:
        source_path: Path to the UTF-8 declaration file.
        output_path: Optional destination for the generated text. Parent
            directories are created as needed. Nothing is written when
            compilation fails.
        indent: Number of spaces before each struct member.

    Returns:
        The generated C text.

    Raises:
        CompilerError: If the file cannot be read or written, or any pipeline
            stage fails.
    """
    source_text = read_source(source_path)
    result = compile_source(source_text, indent=indent)
    if output_path is not None:
        write_output(result.code, output_path)
    return result.code


def build_project(directory: Path, config: ProjectConfig, *, force: bool = False) -> BuildReport:
    """Compile every source file of a project into its build directory.

    Sources are discovered recursively below *directory* by
    ``config.source_suffix``, skipping the build directory itself. Each output
    mirrors its source's relative path with ``config.output_suffix``. An
    output is reused when it is newer than its source and the project's
    configuration file.

    Args:
        directory: The project root.
        config: The project configuration.
        force: Recompile even when an output is up to date.

    Returns:
        A :class:`BuildReport`. Failures are collected per file rather than
        raised so one broken file does not block the others.
    """
    build_dir = directory / config.build_directory
    config_file = directory / CONFIG_FILE_NAME
    report = BuildReport()
    for source in discover_sources(directory, config):
        output = output_path_for(source, directory, build_dir, config.output_suffix)
        if not force and _is_up_to_date(output, source, config_file):
            logger.debug("Up to date: %s", source)
            report.up_to_date.append(source)
            continue
        try:
            compile_file(source, output, indent=config.indent)
        except CompilerError as exc:
            logger.debug("Failed: %s", source)
            report.failures.append(BuildFailure(source=source, error=exc))
            continue
        logger.debug("Compiled %s -> %s", source, output)
        report.compiled[source] = output
    return report


def discover_sources(directory: Path, config: ProjectConfig) -> list[Path]:
    """Return the project's source files in sorted order, excluding the build directory."""
    build_dir = directory / config.build_directory
    return sorted(
        f for f in directory.rglob(f"*{config.source_suffix}") if f.is_file() and build_dir not in f.parents
    )


def output_path_for(source: Path, directory: Path, build_dir: Path, output_suffix: str) -> Path:
    """Return the generated file path for *source*, mirroring its location under *directory*."""
    return build_dir / source.relative_to(directory).with_suffix(output_suffix)


def read_source(path: Path) -> str:
    """Read a declaration file as UTF-8 text.

    Raises:
        CompilerError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CompilerError(f"Cannot read source file '{path}': {exc}") from exc


def write_output(code: str, path: Path) -> None:
    """Write generated C text, creating parent directories as needed.

    Raises:
        CompilerError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
    except OSError as exc:
        raise CompilerError(f"Cannot write output file '{path}': {exc}") from exc


# ################
# Implementation
# ################


def _is_up_to_date(output: Path, *inputs: Path) -> bool:
    """Return True if *output* exists and is strictly newer than every existing input."""
    if not output.exists():
        return False
    built = output.stat().st_mtime
    return all(built > path.stat().st_mtime for path in inputs if path.exists())
