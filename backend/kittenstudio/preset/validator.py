"""Strict preset validation, shared by in-process callers and the HTTP boundary.

``validate`` is all-or-nothing: any missing field, wrong primitive type,
out-of-set enum, malformed color, out-of-range or non-finite number, or unknown
key at any depth rejects the whole candidate. Nothing is coerced or clamped
here; clamping belongs to trusted in-process edits only.

Both entry points are total: a rejection is ``None``, never an exception, and
the reason is not exposed to the caller.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from pydantic import ValidationError

from kittenstudio.models.preset import KittenPreset

logger = logging.getLogger(__name__)


def validate(candidate: object) -> KittenPreset | None:
    """Return a fresh immutable preset if ``candidate`` matches the schema exactly."""
    if isinstance(candidate, KittenPreset):
        # Revalidate from a dump so the result never aliases the input
        candidate = candidate.model_dump(by_alias=True)
    if not isinstance(candidate, Mapping):
        logger.debug("Preset rejected: top level is %s", type(candidate).__name__)
        return None
    try:
        return KittenPreset.model_validate(dict(candidate))
    except ValidationError as e:
        logger.debug("Preset rejected: %d schema error(s)", e.error_count())
        return None
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Preset rejected: %s", type(e).__name__)
        return None


def validate_json_bytes(raw: bytes | str) -> KittenPreset | None:
    """Parse a JSON document and validate it with the same rules as ``validate``."""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.debug("Preset rejected: body is not JSON")
        return None
    return validate(data)
