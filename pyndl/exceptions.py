#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyNDL package

All exceptions raised by PyNDL inherit from :class:`PyNDLError`, so every
library-specific failure can be caught with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyNDLError
    ├── DataFormatError     # Malformed record or table
    ├── FileFormatError     # Unreadable ACE source
    └── ConversionError     # HDF5 write failures
"""

from __future__ import annotations


class PyNDLError(Exception):
    """Base exception for all PyNDL errors

    Standard Python exceptions (``KeyError``, ``TypeError``, etc.) are
    never wrapped and propagate normally.
    """


class DataFormatError(PyNDLError):
    """Raised when a nuclear-data record cannot be decoded into a table

    This covers non-increasing grids, inconsistent region or point
    counts, unrecognised interpolation law codes, empty bin tables and
    truncated records.  It is only raised while a table or model is
    being constructed: a half-built object is never returned.

    Parameters
    ----------
    message : str
        Description of the failed check, including the offending
        offset, index or value when available.
    """


class FileFormatError(PyNDLError):
    """Raised when an ACE file is missing or cannot be loaded

    Parameters
    ----------
    message : str
        Description of the failure, including the file path.
    """


class ConversionError(PyNDLError):
    """Raised when HDF5 export fails

    Covers refusal to overwrite an existing file and any error raised
    by ``h5py`` while the output is being written.

    Parameters
    ----------
    message : str
        Description of the conversion failure and the target HDF5 path.
    """
