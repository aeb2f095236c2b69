"""API response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from kittenstudio import __version__


class HealthResponse(BaseModel):
    ok: bool = True
    version: str = __version__


class PresetVerdict(BaseModel):
    ok: Literal[True] = True
    preset: dict[str, Any] = Field(..., description="The validated preset, camelCase keys")


class ShareTokenResponse(BaseModel):
    ok: Literal[True] = True
    token: str
    url: str


class DefaultPresetResponse(BaseModel):
    ok: Literal[True] = True
    preset: dict[str, Any]
    token: str


class ErrorResponse(BaseModel):
    """Opaque failure body; never carries internal detail or echoed input."""

    ok: Literal[False] = False
    error: str = "Invalid request"
