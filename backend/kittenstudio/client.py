"""Async client for the remote preset validation boundary."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from kittenstudio.config import Settings
from kittenstudio.models.preset import KittenPreset
from kittenstudio.preset.validator import validate

log = logging.getLogger(__name__)

VALIDATE_PATH = "/api/validate-preset"


@dataclass(frozen=True, kw_only=True)
class ValidatorClient:
    """Sends a preset to the boundary and re-validates whatever comes back."""

    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_settings(cls, settings: Settings) -> AsyncGenerator[ValidatorClient, None]:
        """Create a client with a managed session lifecycle."""
        timeout = aiohttp.ClientTimeout(total=settings.client_timeout_s)
        async with aiohttp.ClientSession(base_url=settings.validator_url, timeout=timeout) as session:
            yield cls(session=session)

    async def validate_preset(self, preset: KittenPreset) -> KittenPreset | None:
        """Verified preset, or None on rejection or any transport failure."""
        try:
            async with self.session.post(VALIDATE_PATH, json=preset.to_wire()) as response:
                if response.status != 200:
                    log.info("Validator rejected preset with status %d", response.status)
                    return None
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            log.warning("Validator request failed: %s", type(e).__name__)
            return None

        # The response is untrusted too
        if not isinstance(data, dict) or data.get("ok") is not True or "preset" not in data:
            log.info("Validator returned an unexpected body")
            return None
        return validate(data["preset"])
