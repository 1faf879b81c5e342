# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for SimCom."""

from simcom.workspace.config import (
    CONFIG_FILE_NAME,
    ProjectConfig,
    ProjectConfigError,
    default_config_text,
    load_project_config,
    parse_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ProjectConfig",
    "ProjectConfigError",
    "default_config_text",
    "load_project_config",
    "parse_project_config",
]
