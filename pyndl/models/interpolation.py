#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ENDF interpolation laws

The five recognised laws (ENDF ``INT`` codes 1–5) and the scalar kernel
that applies them between two tabulated points ``(x1, y1)`` and
``(x2, y2)``:

===========  ====  =========================================
Law          INT   Formula
===========  ====  =========================================
histogram    1     ``y1``
lin-lin      2     ``y`` linear in ``x``
lin-log      3     ``y`` linear in ``ln x``
log-lin      4     ``ln y`` linear in ``x``
log-log      5     ``ln y`` linear in ``ln x``
===========  ====  =========================================

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102), BNL-90365-2009 Rev. 2, §0.5.2.
"""

from __future__ import annotations

import math
from enum import IntEnum

from pyndl.exceptions import DataFormatError


class Interpolation(IntEnum):
    """ENDF interpolation law, valued by its ``INT`` code"""

    HISTOGRAM = 1
    LIN_LIN = 2
    LIN_LOG = 3
    LOG_LIN = 4
    LOG_LOG = 5

    @classmethod
    def from_code(cls, code: int) -> Interpolation:
        """Convert a stored ``INT`` code to an :class:`Interpolation`

        Raises
        ------
        DataFormatError
            If *code* is not one of 1–5.  Fractional codes such as
            ``2.7`` are rejected, not truncated.

        Examples
        --------
        >>> Interpolation.from_code(5)
        <Interpolation.LOG_LOG: 5>
        """
        try:
            value = float(code)
            if value.is_integer():
                return cls(int(value))
        except (TypeError, ValueError) as exc:
            raise DataFormatError(f"Unrecognised interpolation law code {code!r}.") from exc
        raise DataFormatError(f"Unrecognised interpolation law code {code!r}.")

    @property
    def log_x(self) -> bool:
        """``True`` when the law takes the logarithm of ``x``."""
        return self in (Interpolation.LIN_LOG, Interpolation.LOG_LOG)

    @property
    def log_y(self) -> bool:
        """``True`` when the law takes the logarithm of ``y``."""
        return self in (Interpolation.LOG_LIN, Interpolation.LOG_LOG)


def interpolate(
    x: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    law: Interpolation,
) -> float:
    """Interpolate between ``(x1, y1)`` and ``(x2, y2)`` at *x*

    At ``x == x1`` every law returns ``y1`` exactly.  The caller is
    responsible for ``x1 <= x < x2`` and, for logarithmic laws, for
    positive values on the logarithmic axes.

    Examples
    --------
    >>> interpolate(1.5, 1.0, 10.0, 2.0, 20.0, Interpolation.LIN_LIN)
    15.0
    >>> interpolate(1.5, 1.0, 10.0, 2.0, 20.0, Interpolation.HISTOGRAM)
    10.0
    """
    if law == Interpolation.HISTOGRAM:
        return y1
    if law == Interpolation.LIN_LIN:
        return y1 + (x - x1) / (x2 - x1) * (y2 - y1)
    if law == Interpolation.LIN_LOG:
        return y1 + math.log(x / x1) / math.log(x2 / x1) * (y2 - y1)
    if law == Interpolation.LOG_LIN:
        return y1 * math.exp((x - x1) / (x2 - x1) * math.log(y2 / y1))
    return y1 * math.exp(math.log(x / x1) / math.log(x2 / x1) * math.log(y2 / y1))
