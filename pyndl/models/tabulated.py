#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tabulated one-dimensional functions

A tabulated function is a strictly increasing grid ``x``, aligned values
``y`` and one or more interpolation regions.  Two implementations exist:

* :class:`Region1D`      — a single law over the whole grid.
* :class:`MultiRegion1D` — contiguous :class:`Region1D` segments sharing
  their boundary points, one law per segment.

Both are immutable once built, and :func:`build_tabulated` picks the
right one when decoding an ENDF ``TAB1``-style record.

Record Layout
-------------
Offsets relative to the table start ``i``::

    i                NR          number of regions (0 = one lin-lin region)
    i+1              NBT[NR]     cumulative point count ending each region
    i+1+NR           INT[NR]     interpolation law code per region
    i+1+2*NR         NE          number of points
    i+2+2*NR         x[NE]       grid (MeV in ACE records)
    i+2+2*NR+NE      y[NE]       values

Evaluation
----------
``evaluate(x)`` clamps to ``y[0]`` at or below ``x[0]`` and to ``y[-1]``
at or above ``x[-1]``; inside the grid it interpolates over the interval
``[x[k], x[k+1])`` holding *x*, so ``evaluate(x[k]) == y[k]`` exactly.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

import numpy as np

from pyndl.exceptions import DataFormatError
from pyndl.models.interpolation import Interpolation, interpolate
from pyndl.utils.constants import EV_PER_MEV
from pyndl.utils.validation import (
    validate_breakpoints,
    validate_min_points,
    validate_positive,
    validate_same_length,
    validate_strictly_increasing,
)

if TYPE_CHECKING:
    from pyndl.readers.base import RecordAccessor

logger = logging.getLogger(__name__)


def _frozen(values, dtype: str = "f8") -> np.ndarray:
    arr = np.array(values, dtype=dtype).ravel()
    arr.flags.writeable = False
    return arr


class Tabulated1D(ABC):
    """Interface of every tabulated function of one variable"""

    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Evaluate the function at *x*; total over the real line."""
        ...

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    @property
    @abstractmethod
    def x(self) -> np.ndarray:
        """Grid points (read-only)."""
        ...

    @property
    @abstractmethod
    def y(self) -> np.ndarray:
        """Values at the grid points (read-only)."""
        ...

    @property
    @abstractmethod
    def breakpoints(self) -> np.ndarray:
        """Cumulative point count at the end of each region (NBT)."""
        ...

    @property
    @abstractmethod
    def interpolation(self) -> tuple[Interpolation, ...]:
        """Interpolation law of each region (INT)."""
        ...

    @property
    def min_x(self) -> float:
        return float(self.x[0])

    @property
    def max_x(self) -> float:
        return float(self.x[-1])

    def __len__(self) -> int:
        return int(self.x.size)


class Region1D(Tabulated1D):
    """A tabulated function with a single interpolation law

    Parameters
    ----------
    x : array_like
        Strictly increasing grid, at least two points.
    y : array_like
        Values at the grid points, same length as *x*.
    interpolation : Interpolation or int
        Law applied on every interval.

    Raises
    ------
    DataFormatError
        If the grid is too short, not strictly increasing, mismatched
        with *y*, or if a logarithmic axis holds non-positive values.

    Examples
    --------
    >>> f = Region1D([1.0, 2.0, 4.0], [1.0, 3.0, 7.0], Interpolation.LIN_LIN)
    >>> f(1.5)
    2.0
    >>> f(10.0)
    7.0
    """

    def __init__(self, x, y, interpolation: Interpolation | int) -> None:
        xs = _frozen(x)
        ys = _frozen(y)
        law = Interpolation.from_code(interpolation)

        validate_min_points(xs.size, label="x")
        validate_same_length(xs, ys, label="Region1D")
        validate_strictly_increasing(xs, label="x")
        if law.log_x:
            validate_positive(xs, label="x")
        if law.log_y:
            validate_positive(ys, label="y")

        self._x = xs
        self._y = ys
        self._law = law

    def evaluate(self, x: float) -> float:
        xs, ys = self._x, self._y
        if x <= xs[0]:
            return float(ys[0])
        if x >= xs[-1]:
            return float(ys[-1])
        k = int(np.searchsorted(xs, x, side="right")) - 1
        return float(
            interpolate(x, float(xs[k]), float(ys[k]), float(xs[k + 1]), float(ys[k + 1]), self._law)
        )

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def breakpoints(self) -> np.ndarray:
        return _frozen([self._x.size], dtype="i8")

    @property
    def interpolation(self) -> tuple[Interpolation, ...]:
        return (self._law,)

    @property
    def law(self) -> Interpolation:
        """The single interpolation law of this region."""
        return self._law

    def __repr__(self) -> str:
        return (
            f"Region1D(n={self._x.size}, law={self._law.name}, "
            f"x=[{self.min_x:.6e}, {self.max_x:.6e}])"
        )


class MultiRegion1D(Tabulated1D):
    """A tabulated function whose grid is split into interpolation regions

    Region ``r`` covers the points ``NBT[r-1]-1`` to ``NBT[r]-1``
    (0-based, with ``NBT[-1]`` taken as 1), so neighbouring regions
    share their boundary point.  The interval ``[x[k], x[k+1])`` is
    governed by the first region with ``k + 2 <= NBT[r]``.

    Parameters
    ----------
    breakpoints : Sequence[int]
        Cumulative point counts (NBT), strictly increasing, last entry
        equal to ``len(x)``.
    interpolation : Sequence[Interpolation | int]
        One law per region (INT).
    x, y : array_like
        Shared grid and values.

    Raises
    ------
    DataFormatError
        If the breakpoints and laws are inconsistent with each other or
        with the grid, or if any region fails :class:`Region1D` checks.

    Examples
    --------
    >>> f = MultiRegion1D([2, 3], [1, 2], [1.0, 2.0, 3.0], [5.0, 6.0, 8.0])
    >>> f(1.5), f(2.5)
    (5.0, 7.0)
    """

    def __init__(
        self,
        breakpoints: Sequence[int],
        interpolation: Sequence[Interpolation | int],
        x,
        y,
    ) -> None:
        xs = _frozen(x)
        ys = _frozen(y)
        nbt = _frozen(breakpoints, dtype="i8")
        laws = tuple(Interpolation.from_code(code) for code in interpolation)

        validate_min_points(xs.size, label="x")
        validate_same_length(xs, ys, label="MultiRegion1D")
        validate_strictly_increasing(xs, label="x")
        if len(laws) != nbt.size:
            raise DataFormatError(
                f"{nbt.size} breakpoint(s) but {len(laws)} interpolation law(s)."
            )
        validate_breakpoints(nbt, xs.size)

        regions = []
        start = 0
        for end, law in zip(nbt, laws):
            stop = int(end)
            regions.append(Region1D(xs[start:stop], ys[start:stop], law))
            start = stop - 1

        self._x = xs
        self._y = ys
        self._breakpoints = nbt
        self._laws = laws
        self._regions = tuple(regions)
        logger.debug("Built MultiRegion1D with %d regions over %d points", len(regions), xs.size)

    def evaluate(self, x: float) -> float:
        xs = self._x
        if x <= xs[0]:
            return float(self._y[0])
        if x >= xs[-1]:
            return float(self._y[-1])
        k = int(np.searchsorted(xs, x, side="right")) - 1
        r = int(np.searchsorted(self._breakpoints, k + 2, side="left"))
        return self._regions[r].evaluate(x)

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def breakpoints(self) -> np.ndarray:
        return self._breakpoints

    @property
    def interpolation(self) -> tuple[Interpolation, ...]:
        return self._laws

    @property
    def regions(self) -> tuple[Region1D, ...]:
        """The per-region segments, in grid order."""
        return self._regions

    def __repr__(self) -> str:
        laws = ", ".join(law.name for law in self._laws)
        return f"MultiRegion1D(n={self._x.size}, breakpoints={self._breakpoints.tolist()}, laws=[{laws}])"


# ---------------------------------------------------------------------------
# Record decoding
# ---------------------------------------------------------------------------

def read_tabulated(
    accessor: RecordAccessor,
    offset: int,
    *,
    x_scale: float = EV_PER_MEV,
    y_scale: float = 1.0,
) -> tuple[Tabulated1D, int]:
    """Decode a tabulated function stored at *offset*

    Parameters
    ----------
    accessor : RecordAccessor
        Source record.
    offset : int
        Position of ``NR``.
    x_scale : float, optional
        Factor applied to the grid.  Defaults to :data:`EV_PER_MEV`
        since ACE grids are stored in MeV.
    y_scale : float, optional
        Factor applied to the values.  Default ``1.0``.

    Returns
    -------
    table : Tabulated1D
        :class:`Region1D` when the record decodes to a single region,
        :class:`MultiRegion1D` otherwise.
    next_offset : int
        Position immediately after the values.

    Raises
    ------
    DataFormatError
        On ``NE < 2``, a non-increasing grid, an unknown law code,
        inconsistent breakpoints, or a truncated record.  Regions using
        a logarithmic law (INT 3, 4 or 5) also reject zero or negative
        values on each logarithmic axis.
    """
    nr = accessor.integer(offset)
    if nr == 0:
        ne = accessor.integer(offset + 1)
        breakpoints = [ne]
        laws = [Interpolation.LIN_LIN]
    else:
        breakpoints = accessor.sequence(offset + 1, nr, dtype=int).tolist()
        laws = [Interpolation.from_code(code) for code in accessor.sequence(offset + 1 + nr, nr, dtype=int)]
        ne = accessor.integer(offset + 1 + 2 * nr)

    validate_min_points(ne, label=f"tabulated function at offset {offset}")
    x = accessor.sequence(offset + 2 + 2 * nr, ne) * x_scale
    y = accessor.sequence(offset + 2 + 2 * nr + ne, ne) * y_scale

    if len(breakpoints) == 1:
        if breakpoints[0] != ne:
            raise DataFormatError(
                f"Single region ends at point {breakpoints[0]} but NE={ne} "
                f"(table at offset {offset})."
            )
        table: Tabulated1D = Region1D(x, y, laws[0])
    else:
        table = MultiRegion1D(breakpoints, laws, x, y)

    logger.debug("Decoded %r at offset %d", table, offset)
    return table, offset + 2 + 2 * nr + 2 * ne


def build_tabulated(
    accessor: RecordAccessor,
    offset: int,
    *,
    x_scale: float = EV_PER_MEV,
    y_scale: float = 1.0,
) -> Tabulated1D:
    """Decode a tabulated function stored at *offset*

    Same as :func:`read_tabulated` without the trailing offset.

    Examples
    --------
    >>> from pyndl.readers.base import ArrayAccessor
    >>> acc = ArrayAccessor([0, 2, 1.0, 2.0, 5.0, 6.0])
    >>> build_tabulated(acc, 0, x_scale=1.0)(1.5)
    5.5
    """
    table, _ = read_tabulated(accessor, offset, x_scale=x_scale, y_scale=y_scale)
    return table
