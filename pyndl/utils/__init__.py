#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared constants and construction-time validation

Nothing in this sub-package depends on the model layer, which keeps the
import graph acyclic::

    utils ← models ← readers ← converters
"""

from __future__ import annotations
