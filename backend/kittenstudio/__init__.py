"""Kitten Studio: strict kitten presets, URL tokens and deterministic SVG rendering."""

__version__ = "0.1.0"
