"""URL token codec: preset ⇄ compact base64url text.

Token = base64url(UTF-8(canonical JSON)), padding stripped. Canonical JSON
uses camelCase keys in declaration order and compact separators, so the same
preset always yields the same token. Tokens use only ``A-Z a-z 0-9 - _`` and
need no escaping inside a URL query component.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import re

from kittenstudio.models.preset import KittenPreset
from kittenstudio.preset.validator import validate

logger = logging.getLogger(__name__)

MAX_TOKEN_CHARS = 6000

_TOKEN_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def canonical_json(preset: KittenPreset) -> str:
    return json.dumps(preset.to_wire(), separators=(",", ":"), ensure_ascii=False)


def encode(preset: KittenPreset) -> str:
    """Serialize a validated preset to a URL-safe token."""
    raw = canonical_json(preset).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode(token: str | None) -> KittenPreset | None:
    """Reverse ``encode``; ``None`` on any failure, never a partial preset."""
    if not token or not isinstance(token, str):
        return None
    if len(token) > MAX_TOKEN_CHARS:
        logger.info("Preset token rejected: %d chars exceeds limit", len(token))
        return None
    if not _TOKEN_RE.fullmatch(token):
        logger.debug("Preset token rejected: not base64url")
        return None

    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
        text = raw.decode("utf-8")
        data = json.loads(text)
    except (binascii.Error, ValueError, RecursionError) as e:
        logger.debug("Preset token rejected: %s", type(e).__name__)
        return None

    return validate(data)
