#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Positional record access for nuclear-data tables

Every table and model in :mod:`pyndl.models` is built from a
:class:`RecordAccessor`: an object exposing scalar and sequence reads at
integer offsets of a flat numeric record.  Concrete accessors wrap a
plain array (:class:`ArrayAccessor`) or an ACE table loaded with the
``endf`` package (:class:`~pyndl.readers.ace.ACEAccessor`).

Integers are stored as floating-point numbers in ACE records, so
:meth:`RecordAccessor.integer` checks that the stored value is a
non-negative whole number before converting it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

from pyndl.exceptions import DataFormatError

logger = logging.getLogger(__name__)


class RecordAccessor(ABC):
    """Abstract read-only view over a flat, positionally addressed record

    Subclasses only provide :meth:`_data`, the backing 1-D array, and
    :meth:`__len__`.  All reads are bounds-checked and raise
    :class:`~pyndl.exceptions.DataFormatError` when they run past the
    end of the record.
    """

    @abstractmethod
    def _data(self) -> np.ndarray:
        """Return the backing 1-D ``float64`` array."""
        ...

    def __len__(self) -> int:
        return int(self._data().size)

    def _check_range(self, offset: int, count: int) -> None:
        if offset < 0 or count < 0 or offset + count > len(self):
            raise DataFormatError(
                f"Record truncated: cannot read {count} value(s) at offset "
                f"{offset} from a record of length {len(self)}."
            )

    def scalar(self, offset: int, dtype: type = float) -> float | int:
        """Read a single value at *offset*

        Parameters
        ----------
        offset : int
            Position inside the record.
        dtype : type, optional
            ``float`` (default) or ``int``.  Integer reads go through
            :meth:`integer`.

        Returns
        -------
        float | int
        """
        if dtype is int:
            return self.integer(offset)
        self._check_range(offset, 1)
        return float(self._data()[offset])

    def integer(self, offset: int) -> int:
        """Read a non-negative integer stored at *offset*

        Raises
        ------
        DataFormatError
            If the stored value is negative or not a whole number.
        """
        self._check_range(offset, 1)
        value = float(self._data()[offset])
        if value < 0 or not value.is_integer():
            raise DataFormatError(
                f"Expected a non-negative integer at offset {offset}, found {value!r}."
            )
        return int(value)

    def sequence(self, offset: int, count: int, dtype: type = float) -> np.ndarray:
        """Read *count* consecutive values starting at *offset*

        Parameters
        ----------
        offset : int
            Position of the first value.
        count : int
            Number of values to read.
        dtype : type, optional
            ``float`` (default) or ``int``.

        Returns
        -------
        numpy.ndarray
            A read-only copy, ``float64`` or ``int64``.
        """
        self._check_range(offset, count)
        raw = np.array(self._data()[offset : offset + count], dtype="f8")
        if dtype is int:
            if np.any(raw < 0) or np.any(raw != np.floor(raw)):
                raise DataFormatError(
                    f"Expected {count} non-negative integers at offset {offset}, "
                    f"found {raw.tolist()}."
                )
            raw = raw.astype("i8")
        raw.flags.writeable = False
        return raw


class ArrayAccessor(RecordAccessor):
    """Record accessor over an in-memory 1-D array with 0-based offsets

    Parameters
    ----------
    values : array_like
        Flat numeric record.

    Examples
    --------
    >>> acc = ArrayAccessor([0, 2, 1.0, 2.0, 5.0, 6.0])
    >>> acc.integer(1)
    2
    >>> acc.sequence(2, 2)
    array([1., 2.])
    """

    def __init__(self, values) -> None:
        data = np.array(values, dtype="f8").ravel()
        data.flags.writeable = False
        self._values = data

    def _data(self) -> np.ndarray:
        return self._values
