"""Numeric sanitization helpers. No model imports.

These are the only clamping primitives in the package. Both are total:
they never raise, whatever float (or non-finite value) they are given.
"""

from __future__ import annotations

import math


def clamp01(n: float) -> float:
    """Closest value in [0, 1]. Non-finite input maps to 0."""
    return clamp(n, 0.0, 1.0)


def clamp(n: float, lo: float, hi: float) -> float:
    """Closest value in [lo, hi]. Non-finite input maps to ``lo``."""
    try:
        value = float(n)
    except (TypeError, ValueError, OverflowError):
        return float(lo)
    if not math.isfinite(value):
        return float(lo)
    if value < lo:
        return float(lo)
    if value > hi:
        return float(hi)
    return value


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)
