"""Trusted in-process edits: clamp and sanitize instead of rejecting.

Untrusted input goes through ``validator.validate`` and is rejected when it
does not fit. Edits coming from our own form controls are different: a value
that is slightly off (a slider overshoot, a stray character in the name) is
pulled back into range. Every edit starts from a last-known-good preset and
replaces exactly one field; the result is a new preset.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from typing import Any

from kittenstudio.models.preset import (
    EYE_SHAPES,
    FUR_PATTERNS,
    HAT_STYLES,
    MOODS,
    NAME_MAX_LEN,
    THEMES,
    TILT_MAX,
    TILT_MIN,
    KittenPreset,
)
from kittenstudio.preset.validator import validate
from kittenstudio.utils.color import is_hex_color, rgb_to_hex
from kittenstudio.utils.math_helpers import clamp, clamp01, round_half_up

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_NAME_CHARS_RE = re.compile(r"[^a-zA-Z0-9 _\-'.]")


def sanitize_name(text: str) -> str:
    """Collapse whitespace, trim, cap at 40 chars and drop unsafe characters."""
    if not isinstance(text, str):
        return ""
    collapsed = _WHITESPACE_RE.sub(" ", text).strip()[:NAME_MAX_LEN]
    # Dropping characters can expose edge spaces again
    return _UNSAFE_NAME_CHARS_RE.sub("", collapsed).strip()


def _keep_color(value: Any, previous: Any) -> Any:
    return value if is_hex_color(value) else previous


def _keep_bool(value: Any, previous: Any) -> Any:
    return value if isinstance(value, bool) else previous


def _keep_choice(choices: tuple[str, ...]) -> Callable[[Any, Any], Any]:
    def keep(value: Any, previous: Any) -> Any:
        return value if value in choices else previous

    return keep


def _unit(value: Any, previous: Any) -> float:
    return clamp01(value)


def _tilt(value: Any, previous: Any) -> float:
    return clamp(value, TILT_MIN, TILT_MAX)


def _name(value: Any, previous: Any) -> str:
    return sanitize_name(value)


# Dotted snake_case path -> sanitizer(new_value, previous_value)
EDITABLE_FIELDS: dict[str, Callable[[Any, Any], Any]] = {
    "name": _name,
    "fur.base": _keep_color,
    "fur.belly": _keep_color,
    "fur.outline": _keep_color,
    "fur.pattern": _keep_choice(FUR_PATTERNS),
    "fur.pattern_intensity": _unit,
    "eyes.iris": _keep_color,
    "eyes.pupil": _keep_color,
    "eyes.shape": _keep_choice(EYE_SHAPES),
    "eyes.sparkle": _keep_bool,
    "accessories.collar_enabled": _keep_bool,
    "accessories.collar": _keep_color,
    "accessories.bell_enabled": _keep_bool,
    "accessories.bow_enabled": _keep_bool,
    "accessories.glasses_enabled": _keep_bool,
    "accessories.hat": _keep_choice(HAT_STYLES),
    "pose.mood": _keep_choice(MOODS),
    "pose.tilt": _tilt,
    "background.theme": _keep_choice(THEMES),
    "background.confetti": _keep_bool,
}


def apply_edit(preset: KittenPreset, field: str, value: Any) -> KittenPreset:
    """Return a copy of ``preset`` with one field replaced by a sanitized ``value``.

    Raises ``KeyError`` for a field path that is not editable.
    """
    sanitizer = EDITABLE_FIELDS[field]
    group, _, attr = field.rpartition(".")

    if not group:
        new_value = sanitizer(value, getattr(preset, attr))
        candidate = preset.model_copy(update={attr: new_value})
    else:
        record = getattr(preset, group)
        new_value = sanitizer(value, getattr(record, attr))
        candidate = preset.model_copy(update={group: record.model_copy(update={attr: new_value})})

    checked = validate(candidate)
    if checked is None:
        logger.warning("Edit of %s produced an invalid preset, keeping previous", field)
        return preset
    return checked


def random_color(seed: float) -> str:
    """Bright-ish color derived from a seed; the same seed gives the same color."""
    r = math.floor(80 + abs(math.sin(seed * 1.7)) * 175)
    g = math.floor(80 + abs(math.sin(seed * 2.1)) * 175)
    b = math.floor(80 + abs(math.sin(seed * 2.9)) * 175)
    return rgb_to_hex(r, g, b)


def _pick(choices: tuple[str, ...], x: float) -> str:
    return choices[math.floor((abs(x) * 100) % len(choices))]


def randomize(preset: KittenPreset, seed: float) -> KittenPreset:
    """Shuffle every visual option of ``preset``; keeps (a sanitized) name.

    Pure in ``seed``: callers wanting a fresh look pass wall-clock time.
    """
    s = seed
    candidate = {
        "schemaVersion": preset.schema_version,
        "name": sanitize_name(preset.name) or "Kitten",
        "fur": {
            "base": random_color(s * 1.1),
            "belly": random_color(s * 1.7),
            "outline": "#111827",
            "pattern": _pick(FUR_PATTERNS, math.sin(s)),
            "patternIntensity": clamp01(abs(math.sin(s * 1.23))),
        },
        "eyes": {
            "iris": random_color(s * 2.3),
            "pupil": "#0b0f1a",
            "shape": "almond" if abs(math.cos(s)) > 0.5 else "round",
            "sparkle": abs(math.sin(s * 0.37)) > 0.3,
        },
        "accessories": {
            "collarEnabled": abs(math.sin(s * 0.5)) > 0.2,
            "collar": random_color(s * 3.3),
            "bellEnabled": abs(math.sin(s * 0.8)) > 0.2,
            "bowEnabled": abs(math.cos(s * 0.8)) > 0.4,
            "glassesEnabled": abs(math.sin(s * 0.91)) > 0.5,
            "hat": _pick(HAT_STYLES, math.cos(s * 0.77)),
        },
        "pose": {
            "mood": _pick(MOODS, math.sin(s * 0.66)),
            "tilt": clamp(round_half_up(math.sin(s) * 12 * 10) / 10, TILT_MIN, TILT_MAX),
        },
        "background": {
            "theme": _pick(THEMES, math.cos(s * 0.39)),
            "confetti": abs(math.sin(s * 0.42)) > 0.55,
        },
    }
    result = validate(candidate)
    if result is None:
        logger.warning("Randomized preset failed validation, keeping previous")
        return preset
    return result
