# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""SimCom: compiles order-independent record declarations into C structs."""

__version__ = "0.1.0"
