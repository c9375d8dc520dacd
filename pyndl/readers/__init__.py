#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Record accessors and ACE readers

* :class:`~pyndl.readers.base.RecordAccessor` — positional access interface
* :class:`~pyndl.readers.base.ArrayAccessor` — accessor over a plain array
* :class:`~pyndl.readers.ace.ACEReader` — loads ACE tables via ``endf``
"""

from __future__ import annotations

from pyndl.readers.base import RecordAccessor, ArrayAccessor
from pyndl.readers.ace import (
    ACEAccessor,
    ACEReader,
    energy_law_locations,
    read_general_evaporations,
)

__all__ = [
    "RecordAccessor",
    "ArrayAccessor",
    "ACEAccessor",
    "ACEReader",
    "energy_law_locations",
    "read_general_evaporations",
]
