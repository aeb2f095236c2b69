"""Shared test fixtures."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from kittenstudio.models.preset import KittenPreset, default_preset


# Wire form (camelCase) of the canonical default kitten

DEFAULT_WIRE: dict[str, Any] = {
    "schemaVersion": 1,
    "name": "Mochi",
    "fur": {
        "base": "#d7a86e",
        "belly": "#f4e6d3",
        "outline": "#111827",
        "pattern": "tabby",
        "patternIntensity": 0.55,
    },
    "eyes": {
        "iris": "#3bd16f",
        "pupil": "#0b0f1a",
        "shape": "almond",
        "sparkle": True,
    },
    "accessories": {
        "collarEnabled": True,
        "collar": "#7c5cff",
        "bellEnabled": True,
        "bowEnabled": False,
        "glassesEnabled": False,
        "hat": "none",
    },
    "pose": {"mood": "curious", "tilt": 0.0},
    "background": {"theme": "midnight", "confetti": False},
}

# A preset that exercises every non-default branch
FANCY_WIRE: dict[str, Any] = {
    "schemaVersion": 1,
    "name": "Sir Whiskers-the 3rd.",
    "fur": {
        "base": "#AABBCC",
        "belly": "#ffffff",
        "outline": "#000000",
        "pattern": "calico",
        "patternIntensity": 1,
    },
    "eyes": {
        "iris": "#123456",
        "pupil": "#654321",
        "shape": "round",
        "sparkle": False,
    },
    "accessories": {
        "collarEnabled": True,
        "collar": "#ff0000",
        "bellEnabled": True,
        "bowEnabled": True,
        "glassesEnabled": True,
        "hat": "beanie",
    },
    "pose": {"mood": "grumpy", "tilt": -17.25},
    "background": {"theme": "candy", "confetti": True},
}


def wire_copy(source: dict[str, Any] = DEFAULT_WIRE) -> dict[str, Any]:
    return copy.deepcopy(source)


def make_preset(**groups: dict[str, Any]) -> KittenPreset:
    """Default preset with some sub-record fields replaced (wire names)."""
    data = wire_copy()
    for group, values in groups.items():
        if isinstance(values, dict):
            data[group].update(values)
        else:
            data[group] = values
    return KittenPreset.model_validate(data)


@pytest.fixture
def wire() -> dict[str, Any]:
    return wire_copy()


@pytest.fixture
def fancy_wire() -> dict[str, Any]:
    return wire_copy(FANCY_WIRE)


@pytest.fixture
def preset() -> KittenPreset:
    return default_preset()


@pytest.fixture
def fancy_preset() -> KittenPreset:
    return KittenPreset.model_validate(wire_copy(FANCY_WIRE))
