"""Preset validation boundary: POST /api/validate-preset and friends.

Request bodies are untrusted. They must declare a JSON content type, stay
within ``max_body_bytes`` and match the preset schema exactly; anything else
is answered with an opaque error and never echoed back.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from kittenstudio.api.errors import RequestRejected
from kittenstudio.config import Settings
from kittenstudio.dependencies import get_settings
from kittenstudio.models.preset import KittenPreset, default_preset
from kittenstudio.models.responses import DefaultPresetResponse, PresetVerdict, ShareTokenResponse
from kittenstudio.preset.codec import MAX_TOKEN_CHARS, encode
from kittenstudio.preset.session import NOTICE_INVALID, PresetSession
from kittenstudio.preset.validator import validate_json_bytes

router = APIRouter()
logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
NOTICE_HEADER = "x-preset-notice"


async def read_json_body_limited(request: Request, max_bytes: int) -> bytes:
    """Raw body bytes, refusing non-JSON content types and oversized bodies."""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type.lower():
        raise RequestRejected(400, "content type")

    declared = request.headers.get("content-length")
    if declared is not None:
        try:
            if int(declared) > max_bytes:
                raise RequestRejected(413, "declared length")
        except ValueError:
            raise RequestRejected(400, "content length") from None

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise RequestRejected(413, "body length")
    return bytes(body)


async def validated_body(request: Request, settings: Settings = Depends(get_settings)) -> KittenPreset:
    """Dependency: the request body as a validated preset."""
    raw = await read_json_body_limited(request, settings.max_body_bytes)
    preset = validate_json_bytes(raw)
    if preset is None:
        raise RequestRejected(400, "schema")
    return preset


@router.post("/validate-preset", response_model=PresetVerdict)
async def validate_preset(preset: KittenPreset = Depends(validated_body)) -> PresetVerdict:
    # Only the validated copy goes back, never the raw body
    return PresetVerdict(preset=preset.to_wire())


@router.post("/share-token", response_model=ShareTokenResponse)
async def share_token(
    preset: KittenPreset = Depends(validated_body),
    settings: Settings = Depends(get_settings),
) -> ShareTokenResponse:
    session = PresetSession(preset)
    return ShareTokenResponse(token=encode(preset), url=session.share_url(settings.share_base_url))


@router.get("/preset/default", response_model=DefaultPresetResponse)
async def preset_default() -> DefaultPresetResponse:
    preset = default_preset()
    return DefaultPresetResponse(preset=preset.to_wire(), token=encode(preset))


@router.get("/render.svg")
async def render_preset(preset: str | None = Query(default=None)) -> Response:
    """Render the kitten for a share token; invalid tokens fall back to the default."""
    session = PresetSession()
    rejected = bool(preset) and not session.load_token(preset)

    headers = {"content-disposition": f'inline; filename="{session.export_filename()}"'}
    if rejected:
        headers[NOTICE_HEADER] = NOTICE_INVALID
        logger.info("render.svg: invalid token (%d chars, limit %d)", len(preset), MAX_TOKEN_CHARS)

    return Response(content=session.export_svg(), media_type=SVG_MEDIA_TYPE, headers=headers)
