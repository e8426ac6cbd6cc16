# carbon_calc/core/rounding.py
# -*- coding: utf-8 -*-

"""
Scale → round → descale helper used by every calculator output.

The value is converted through its shortest ``repr`` into a Decimal, scaled
by 10**decimals, rounded to an integer with ties away from zero, then
descaled. Working on the decimal text (instead of the binary float) keeps
boundary values such as 1.005 stable: 1.005 → 1.01, -0.005 → -0.01.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from carbon_calc.core.types import Number


def round_half_up(value: Number, decimals: int = 2) -> float:
    """
    Round *value* to *decimals* places, ties away from zero.

    Parameters
    ----------
    value : int | float
        Finite number to round.
    decimals : int
        Number of decimal places (>= 0).

    Returns
    -------
    float
        Rounded value. ``-0.0`` is normalised to ``0.0``.
    """
    if decimals < 0:
        raise ValueError("decimals must be >= 0.")
    if not math.isfinite(value):
        raise ValueError(f"cannot round non-finite value {value!r}")

    exact = Decimal(repr(float(value)))
    # precision must hold every integer digit of the scaled value
    digits = exact.as_tuple()
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(digits.digits) + max(digits.exponent, 0) + decimals + 1)
        scale = Decimal(10) ** decimals
        rounded = (exact * scale).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        result = rounded / scale
    # + 0.0 turns a -0.0 result into 0.0
    return float(result) + 0.0
