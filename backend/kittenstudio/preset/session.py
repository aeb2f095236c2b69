"""In-process editing session: the last-known-good preset plus a user notice.

Stands in for the interactive customizer: loads an optional ``preset`` query
parameter, applies trusted edits, randomizes, resets, builds share links and
exports SVG. Nothing here ever raises on bad external input; the session
always keeps a valid preset and explains what happened in ``notice``.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from kittenstudio.models.preset import KittenPreset, default_preset
from kittenstudio.preset.codec import decode, encode
from kittenstudio.preset.editing import apply_edit, randomize, sanitize_name
from kittenstudio.render import render_svg

if TYPE_CHECKING:
    from kittenstudio.client import ValidatorClient

logger = logging.getLogger(__name__)

PRESET_PARAM = "preset"

NOTICE_LOADED = "Loaded preset from URL."
NOTICE_INVALID = "Preset in URL was invalid and was ignored."
NOTICE_RANDOMIZED = "Randomized kitten."
NOTICE_RESET = "Reset to default kitten."
NOTICE_VERIFIED = "Preset verified by server."
NOTICE_UNVERIFIED = "Server could not verify this preset; keeping the current kitten."


class PresetSession:
    """Holds one kitten preset; every change replaces it wholesale."""

    def __init__(self, preset: KittenPreset | None = None) -> None:
        self._preset = preset if preset is not None else default_preset()
        self.notice = ""

    @property
    def preset(self) -> KittenPreset:
        return self._preset

    def load_token(self, token: str | None) -> bool:
        """Adopt a URL token if it decodes to a valid preset.

        No token is not an error and leaves the notice untouched.
        """
        if not token:
            return False
        decoded = decode(token)
        if decoded is None:
            self.notice = NOTICE_INVALID
            logger.debug("Ignored invalid preset token (%d chars)", len(token))
            return False
        self._preset = decoded
        self.notice = NOTICE_LOADED
        return True

    def load_from_url(self, url: str) -> bool:
        query = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
        return self.load_token(query.get(PRESET_PARAM))

    def edit(self, field: str, value: Any) -> KittenPreset:
        self._preset = apply_edit(self._preset, field, value)
        return self._preset

    def randomize(self, seed: float | None = None) -> KittenPreset:
        self._preset = randomize(self._preset, time.time() if seed is None else seed)
        self.notice = NOTICE_RANDOMIZED
        return self._preset

    def reset(self) -> KittenPreset:
        self._preset = default_preset()
        self.notice = NOTICE_RESET
        return self._preset

    def share_url(self, base_url: str) -> str:
        """``base_url`` with its ``preset`` parameter set to the current token."""
        parts = urlsplit(base_url)
        query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != PRESET_PARAM]
        query.append((PRESET_PARAM, encode(self._preset)))
        return urlunsplit(parts._replace(query=urlencode(query)))

    def export_svg(self) -> str:
        return render_svg(self._preset)

    def export_filename(self) -> str:
        return f"{sanitize_name(self._preset.name or 'kitten') or 'kitten'}.svg"

    async def check_remote(self, client: ValidatorClient) -> bool:
        """Ask the validation boundary to confirm the current preset.

        Transport failures count as rejections; the current preset stays.
        """
        verified = await client.validate_preset(self._preset)
        if verified is None:
            self.notice = NOTICE_UNVERIFIED
            return False
        self._preset = verified
        self.notice = NOTICE_VERIFIED
        return True
