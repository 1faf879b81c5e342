# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the SimCom project configuration file."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "simcom.yaml"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


class ProjectConfig(BaseModel):
    """The parsed configuration for a SimCom project.

    Attributes:
        build_directory: Relative path (from the project root) for generated headers.
        indent: Number of spaces before each struct member.
        source_suffix: File suffix of declaration sources.
        output_suffix: File suffix of generated C files.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    build_directory: str = Field(alias="build-directory", min_length=1)
    indent: int = Field(default=4, ge=1)
    source_suffix: str = Field(alias="source-suffix", default=".tipo", pattern=r"^\.\w+$")
    output_suffix: str = Field(alias="output-suffix", default=".h", pattern=r"^\.\w+$")


def load_project_config(path: Path) -> ProjectConfig:
    """Load and validate a SimCom project configuration file.

    Args:
        path: Path to the ``simcom.yaml`` file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ProjectConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc

    return parse_project_config(text, source_label=str(path))


def parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ProjectConfigError: If the YAML is invalid or the schema is violated.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ProjectConfigError(f"Invalid project config {source_label}: {exc}") from exc


def default_config_text() -> str:
    """Return the contents written by ``simcom init``."""
    data = ProjectConfig(build_directory="build").model_dump(by_alias=True)
    header = "# SimCom project configuration\n"
    return header + yaml.dump(data, default_flow_style=False, sort_keys=False)
