# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for SimCom documentation."""

project = "SimCom"
author = "SimCom Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
napoleon_google_docstring = True

html_theme = "alabaster"
