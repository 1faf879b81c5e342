# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the SimCom command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from simcom.compiler.build import build_project, compile_file, discover_sources, read_source
from simcom.compiler.codegen import DEFAULT_INDENT
from simcom.compiler.errors import CompilerError
from simcom.compiler.parser import parse
from simcom.workspace.config import (
    CONFIG_FILE_NAME,
    ProjectConfigError,
    default_config_text,
    load_project_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the SimCom CLI."""
    parser = argparse.ArgumentParser(
        prog="simcom",
        description="SimCom - compile record declarations into C structs",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # compile subcommand
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile a declaration file to C",
        description="Compile one declaration file and print the generated C structs.",
    )
    compile_parser.add_argument("source", help="Path to the declaration file")
    compile_parser.add_argument(
        "-o",
        "--output",
        help="Write the generated C to this file instead of standard output",
    )
    compile_parser.add_argument(
        "--indent",
        type=_positive_int,
        default=DEFAULT_INDENT,
        help=f"Spaces before each struct member (default: {DEFAULT_INDENT})",
    )
    compile_parser.add_argument(
        "--emit-ast",
        action="store_true",
        help="Print the parsed declarations as JSON instead of compiling",
    )
    _add_verbose_flag(compile_parser)

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new SimCom project",
        description=f"Create a default {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the project in (default: current directory)",
    )

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Compile every declaration file of a project",
        description=f"Compile all source files of a project configured by {CONFIG_FILE_NAME}.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the SimCom project (default: current directory)",
    )
    build_parser.add_argument(
        "--force",
        action="store_true",
        help="Recompile files whose output is already up to date",
    )
    _add_verbose_flag(build_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)
    if args.command == "compile" and args.emit_ast and args.output:
        compile_parser.error("--emit-ast prints to standard output and cannot be combined with -o/--output")

    _configure_logging(getattr(args, "verbose", False))
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details to standard error",
    )


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, otherwise WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "compile":
        return _cmd_compile(args)
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "build":
        return _cmd_build(args)
    return 0


def _cmd_compile(args: argparse.Namespace) -> int:
    """Handle the compile subcommand."""
    source = Path(args.source)

    if not source.is_file():
        print(f"Error: source file '{source}' does not exist.", file=sys.stderr)
        return 1

    try:
        if args.emit_ast:
            source_file = parse(read_source(source))
            print(source_file.model_dump_json(indent=2))
            return 0
        output = Path(args.output) if args.output else None
        code = compile_file(source, output, indent=args.indent)
    except CompilerError as exc:
        print(f"Error: {source}: {exc}", file=sys.stderr)
        return exc.exit_code

    if output is None:
        sys.stdout.write(code)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: project already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Initialized SimCom project at '{config_file}'.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if not config_file.exists():
        print(
            f"Error: no SimCom project found at '{directory}'. Run 'simcom init' to initialize a project.",
            file=sys.stderr,
        )
        return 1

    try:
        config = load_project_config(config_file)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sources = discover_sources(directory, config)
    if not sources:
        print(f"No {config.source_suffix} files found in the project.")
        return 0

    print(f"Building {len(sources)} source file(s)...")
    report = build_project(directory, config, force=args.force)

    for failure in report.failures:
        print(f"Error: {failure.source.relative_to(directory)}: {failure.error}", file=sys.stderr)

    print(f"{len(report.compiled)} compiled, {len(report.up_to_date)} up to date, {len(report.failures)} failed.")
    if report.has_errors:
        return report.failures[0].error.exit_code
    return 0
