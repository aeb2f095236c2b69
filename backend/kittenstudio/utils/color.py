"""Hex color helpers used by the renderer and the randomizer."""

from __future__ import annotations

import re

from kittenstudio.utils.math_helpers import lerp, round_half_up

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and HEX_COLOR_RE.fullmatch(value) is not None


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    raw = color.lstrip("#")
    return int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def mix_hex(a: str, b: str, t: float) -> str:
    """Linear blend of two ``#rrggbb`` colors; t=0 gives ``a``, t=1 gives ``b``."""
    ar, ag, ab = hex_to_rgb(a)
    br, bg, bb = hex_to_rgb(b)
    return rgb_to_hex(
        round_half_up(lerp(ar, br, t)),
        round_half_up(lerp(ag, bg, t)),
        round_half_up(lerp(ab, bb, t)),
    )
