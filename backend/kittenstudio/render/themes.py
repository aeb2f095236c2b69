"""Background palettes and deterministic confetti."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from kittenstudio.models.preset import Theme


@dataclass(frozen=True)
class Palette:
    """Deep base (a), accent (b), highlight (c)."""

    a: str
    b: str
    c: str


THEMES: dict[Theme, Palette] = {
    "midnight": Palette(a="#0b1020", b="#26185f", c="#0a2d3b"),
    "sunrise": Palette(a="#1a0f16", b="#ff7a59", c="#ffd36e"),
    "mint": Palette(a="#081817", b="#1dd6b6", c="#b6ffd9"),
    "candy": Palette(a="#120a1b", b="#ff4d6d", c="#7c5cff"),
}

CONFETTI_COUNT = 24
CONFETTI_COLORS = ("#7c5cff", "#28d7ff", "#ff4d6d", "#3bd16f", "#ffd36e")

# Dots stay inside the 500x500 canvas, clear of the edges
_CONFETTI_X0, _CONFETTI_W = 80.0, 340.0
_CONFETTI_Y0, _CONFETTI_H = 70.0, 360.0
_CONFETTI_R0, _CONFETTI_R_SPAN = 2.0, 5.0


def seeded_float(seed: NDArray[np.float64] | float) -> NDArray[np.float64]:
    """Hash a seed to [0, 1): fractional part of sin(seed) * 10000."""
    x = np.sin(np.asarray(seed, dtype=np.float64)) * 10000.0
    return x - np.floor(x)


@dataclass(frozen=True)
class ConfettiDot:
    cx: float
    cy: float
    r: float
    fill: str


def confetti_dots(count: int = CONFETTI_COUNT) -> list[ConfettiDot]:
    """Decorative dots; dot i depends only on i, never on time or call count."""
    i = np.arange(count, dtype=np.float64)
    t = seeded_float(i * 97 + 11)
    u = seeded_float(i * 131 + 29)
    radius = _CONFETTI_R0 + seeded_float(i * 41 + 7) * _CONFETTI_R_SPAN

    cx = _CONFETTI_X0 + t * _CONFETTI_W
    cy = _CONFETTI_Y0 + u * _CONFETTI_H

    return [
        ConfettiDot(
            cx=float(cx[k]),
            cy=float(cy[k]),
            r=float(radius[k]),
            fill=CONFETTI_COLORS[k % len(CONFETTI_COLORS)],
        )
        for k in range(count)
    ]
