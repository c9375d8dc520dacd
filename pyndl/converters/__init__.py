#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of decoded ACE models

* :func:`~pyndl.converters.hdf5.create_hdf5`
    Reads an ACE file and writes its models to HDF5.
"""

from __future__ import annotations

from pyndl.converters.hdf5 import create_hdf5

__all__ = ["create_hdf5"]
