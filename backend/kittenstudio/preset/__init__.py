"""Preset pipeline: strict validation, URL token codec and trusted editing."""

from kittenstudio.preset.codec import decode, encode
from kittenstudio.preset.validator import validate, validate_json_bytes

__all__ = ["decode", "encode", "validate", "validate_json_bytes"]
