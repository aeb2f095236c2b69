"""Deterministic kitten renderer."""

from __future__ import annotations

from kittenstudio.models.preset import KittenPreset
from kittenstudio.render.geometry import LABEL_FALLBACK
from kittenstudio.render.kitten import render
from kittenstudio.svg.serializer import serialize_svg

__all__ = ["render", "render_svg"]


def render_svg(preset: KittenPreset) -> str:
    """Render and serialize to a standalone SVG document titled with the kitten's name."""
    return serialize_svg(render(preset), title=preset.name or LABEL_FALLBACK)
