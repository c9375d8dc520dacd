#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Construction-time validation routines for PyNDL tables and models

Every validation function raises :class:`~pyndl.exceptions.DataFormatError`
when a constraint is violated.  Tables and models call these functions
before storing any data, so a failed check never leaves a partially
built object behind.

Checked Constraints
-------------------
* Grids must be strictly increasing.
* Paired arrays must have the same length.
* Tables must carry a minimum number of points.
* Region breakpoints must be strictly increasing and end at the grid size.
* Values entering a logarithm must be strictly positive.

Design Note
-----------
Validation functions accept raw NumPy arrays or scalar values — **not**
model instances — so that ``utils`` does not depend on ``models``.
"""

from __future__ import annotations

import logging

import numpy as np

from pyndl.exceptions import DataFormatError

logger = logging.getLogger(__name__)


def validate_strictly_increasing(values: np.ndarray, label: str = "grid") -> None:
    """Verify that an array is strictly increasing

    Parameters
    ----------
    values : numpy.ndarray
        1-D array to check.
    label : str, optional
        Human-readable name of the array for error messages.

    Raises
    ------
    DataFormatError
        If any ``values[i] >= values[i+1]``.

    Examples
    --------
    >>> import numpy as np
    >>> validate_strictly_increasing(np.array([1.0, 2.0, 3.0]))
    >>> validate_strictly_increasing(np.array([1.0, 1.0]))  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyndl.exceptions.DataFormatError: ...
    """
    arr = np.asarray(values, dtype="f8")
    if arr.size < 2:
        return
    diff = np.diff(arr)
    if not np.all(diff > 0):
        first_bad = int(np.argmax(~(diff > 0)))
        raise DataFormatError(
            f"Array '{label}' is not strictly increasing.  "
            f"First violation at index {first_bad}: "
            f"{arr[first_bad]:.6e} >= {arr[first_bad + 1]:.6e}."
        )
    logger.debug("Array '%s' (%d points) passed monotonicity check.", label, arr.size)


def validate_same_length(
    first: np.ndarray,
    second: np.ndarray,
    label: str = "table",
) -> None:
    """Verify that two paired arrays have the same length

    Raises
    ------
    DataFormatError
        If the lengths differ.
    """
    if len(first) != len(second):
        raise DataFormatError(
            f"Length mismatch in '{label}': {len(first)} != {len(second)}."
        )


def validate_min_points(size: int, minimum: int = 2, label: str = "grid") -> None:
    """Verify that a table carries at least *minimum* points

    Raises
    ------
    DataFormatError
        If *size* is smaller than *minimum*.
    """
    if size < minimum:
        raise DataFormatError(
            f"Array '{label}' has {size} point(s), at least {minimum} required."
        )


def validate_breakpoints(breakpoints: np.ndarray, n_points: int) -> None:
    """Validate the cumulative point counts (NBT) of a multi-region table

    Parameters
    ----------
    breakpoints : numpy.ndarray
        Cumulative point count at the end of each region.
    n_points : int
        Number of points of the shared grid.

    Raises
    ------
    DataFormatError
        If the breakpoints are empty, not strictly increasing, leave a
        first region with fewer than two points, or do not end at
        *n_points*.
    """
    nbt = np.asarray(breakpoints, dtype="i8")
    if nbt.size == 0:
        raise DataFormatError("Multi-region table has no breakpoints.")
    if nbt[0] < 2:
        raise DataFormatError(
            f"First region ends at point {int(nbt[0])}; a region needs two points."
        )
    if nbt.size > 1 and not np.all(np.diff(nbt) > 0):
        raise DataFormatError(f"Breakpoints {nbt.tolist()} are not strictly increasing.")
    if int(nbt[-1]) != n_points:
        raise DataFormatError(
            f"Last breakpoint {int(nbt[-1])} does not match the {n_points} grid points."
        )


def validate_positive(values: np.ndarray, label: str = "values") -> None:
    """Verify that all values are strictly positive

    Used for any axis that an interpolation law takes the logarithm of,
    and for energies that appear as divisors.

    Raises
    ------
    DataFormatError
        If any value is zero or negative.
    """
    arr = np.asarray(values, dtype="f8")
    if arr.size and np.any(arr <= 0):
        first_bad = int(np.argmax(arr <= 0))
        raise DataFormatError(
            f"Array '{label}' must be strictly positive.  "
            f"First violation at index {first_bad}: {arr[first_bad]:.6e}."
        )
