"""Kitten preset data model: the single configuration record.

The model is closed: every sub-record forbids unknown keys, every field is
strict (no str→int, int→bool or bool→float coercion) and instances are frozen.
On the wire the fields use camelCase (``schemaVersion``, ``patternIntensity``,
``collarEnabled``...); in Python they are snake_case attributes.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, get_args

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SCHEMA_VERSION = 1
NAME_MAX_LEN = 40

# Letters, digits, space, underscore, hyphen, apostrophe, dot.
NAME_SAFE_RE = re.compile(r"^[A-Za-z0-9 _\-'.]*$")

FurPattern = Literal["solid", "tabby", "tuxedo", "calico"]
EyeShape = Literal["round", "almond"]
HatStyle = Literal["none", "party", "beanie"]
Mood = Literal["happy", "curious", "sleepy", "grumpy"]
Theme = Literal["midnight", "sunrise", "mint", "candy"]

FUR_PATTERNS: tuple[str, ...] = get_args(FurPattern)
EYE_SHAPES: tuple[str, ...] = get_args(EyeShape)
HAT_STYLES: tuple[str, ...] = get_args(HatStyle)
MOODS: tuple[str, ...] = get_args(Mood)
THEMES: tuple[str, ...] = get_args(Theme)

TILT_MIN = -20.0
TILT_MAX = 20.0


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; a JSON true must never pass as a number
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    return value


ColorHex = Annotated[str, Field(pattern=r"^#[0-9a-fA-F]{6}$")]
UnitInterval = Annotated[float, BeforeValidator(_reject_bool), Field(ge=0.0, le=1.0)]
TiltDegrees = Annotated[float, BeforeValidator(_reject_bool), Field(ge=TILT_MIN, le=TILT_MAX)]


class PresetModel(BaseModel):
    """Base for every preset record: closed, strict, immutable."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        frozen=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


class FurStyle(PresetModel):
    base: ColorHex
    belly: ColorHex
    outline: ColorHex
    pattern: FurPattern
    pattern_intensity: UnitInterval


class EyeStyle(PresetModel):
    iris: ColorHex
    pupil: ColorHex
    shape: EyeShape
    sparkle: bool


class Accessories(PresetModel):
    collar_enabled: bool
    collar: ColorHex
    bell_enabled: bool
    bow_enabled: bool
    glasses_enabled: bool
    hat: HatStyle


class Pose(PresetModel):
    mood: Mood
    tilt: TiltDegrees


class Background(PresetModel):
    theme: Theme
    confetti: bool


class KittenPreset(PresetModel):
    """A complete, validated kitten configuration."""

    schema_version: Literal[1]
    name: str = ""
    fur: FurStyle
    eyes: EyeStyle
    accessories: Accessories
    pose: Pose
    background: Background

    @field_validator("schema_version", mode="before")
    @classmethod
    def _exact_version(cls, value: Any) -> Any:
        if type(value) is not int:
            raise ValueError("schemaVersion must be an integer")
        return value

    @field_validator("name")
    @classmethod
    def _safe_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) > NAME_MAX_LEN:
            raise ValueError("name too long")
        if not NAME_SAFE_RE.fullmatch(value):
            raise ValueError("name has unsupported characters")
        return value

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys in declaration order."""
        return self.model_dump(mode="json", by_alias=True)


def default_preset() -> KittenPreset:
    """The canonical default kitten."""
    return KittenPreset.model_validate(
        {
            "schemaVersion": SCHEMA_VERSION,
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
    )
