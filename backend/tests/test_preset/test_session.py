"""Tests for the in-process editing session."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

from kittenstudio.models.preset import KittenPreset, default_preset
from kittenstudio.preset.codec import encode
from kittenstudio.preset.session import (
    NOTICE_INVALID,
    NOTICE_LOADED,
    NOTICE_RESET,
    NOTICE_UNVERIFIED,
    NOTICE_VERIFIED,
    PresetSession,
)

BASE = "https://kitten.example/app"


class _FakeClient:
    def __init__(self, answer: KittenPreset | None) -> None:
        self.answer = answer
        self.sent: list[KittenPreset] = []

    async def validate_preset(self, preset: KittenPreset) -> KittenPreset | None:
        self.sent.append(preset)
        return self.answer


def test_starts_at_default():
    session = PresetSession()
    assert session.preset == default_preset()
    assert session.notice == ""


def test_load_valid_token_from_url(fancy_preset):
    session = PresetSession()
    assert session.load_from_url(f"{BASE}?x=1&preset={encode(fancy_preset)}")
    assert session.preset == fancy_preset
    assert session.notice == NOTICE_LOADED


def test_invalid_token_keeps_default_with_notice():
    session = PresetSession()
    assert not session.load_from_url(f"{BASE}?preset=not-a-real-token!!")
    assert session.preset == default_preset()
    assert session.notice == NOTICE_INVALID


def test_oversized_token_keeps_default_with_notice():
    session = PresetSession()
    assert not session.load_from_url(f"{BASE}?preset={'A' * 7000}")
    assert session.preset == default_preset()
    assert session.notice == NOTICE_INVALID


def test_oversized_token_is_logged_once_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="kittenstudio"):
        PresetSession().load_token("A" * 7000)
    info = [r for r in caplog.records if r.levelno >= logging.INFO]
    assert len(info) == 1
    assert info[0].name == "kittenstudio.preset.codec"


def test_missing_or_empty_param_is_not_an_error():
    session = PresetSession()
    assert not session.load_from_url(BASE)
    assert not session.load_from_url(f"{BASE}?preset=")
    assert session.notice == ""
    assert session.preset == default_preset()


def test_invalid_token_keeps_last_good_preset(fancy_preset):
    session = PresetSession(fancy_preset)
    session.load_token("%%%")
    assert session.preset == fancy_preset


def test_share_url_round_trip(fancy_preset):
    session = PresetSession(fancy_preset)
    url = session.share_url(f"{BASE}?x=1&preset=stale")
    query = parse_qs(urlsplit(url).query)
    assert query["x"] == ["1"]
    assert query["preset"] == [encode(fancy_preset)]

    other = PresetSession()
    assert other.load_from_url(url)
    assert other.preset == fancy_preset


def test_edit_replaces_preset():
    session = PresetSession()
    before = session.preset
    after = session.edit("pose.tilt", 50)
    assert after.pose.tilt == 20
    assert session.preset is after
    assert before.pose.tilt == 0


def test_randomize_and_reset():
    session = PresetSession()
    session.randomize(seed=5.0)
    session.reset()
    assert session.preset == default_preset()
    assert session.notice == NOTICE_RESET


def test_randomize_without_seed_is_valid():
    session = PresetSession()
    assert isinstance(session.randomize(), KittenPreset)


def test_export(fancy_preset):
    session = PresetSession(fancy_preset)
    svg = session.export_svg()
    assert svg.startswith("<?xml")
    assert "Sir Whiskers-the 3rd." in svg
    assert session.export_filename() == "Sir Whiskers-the 3rd..svg"


def test_export_filename_fallback():
    session = PresetSession()
    session.edit("name", "")
    assert session.export_filename() == "kitten.svg"


async def test_check_remote_accepts_verified(fancy_preset):
    session = PresetSession()
    client = _FakeClient(fancy_preset)
    assert await session.check_remote(client)
    assert client.sent == [default_preset()]
    assert session.preset == fancy_preset
    assert session.notice == NOTICE_VERIFIED


async def test_check_remote_failure_keeps_preset():
    session = PresetSession()
    session.edit("pose.mood", "happy")
    current = session.preset
    assert not await session.check_remote(_FakeClient(None))
    assert session.preset == current
    assert session.notice == NOTICE_UNVERIFIED
