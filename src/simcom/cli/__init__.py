# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for SimCom."""
