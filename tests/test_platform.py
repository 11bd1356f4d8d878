from __future__ import annotations

import sys

import pytest

from streaming_assets.platform import PLATFORM_ENV_VAR, detect_platform, is_restricted, normalize_platform


@pytest.mark.parametrize("name", ["android", "ios", "iPhone", "IPhonePlayer", " Android "])
def test_restricted_platforms(name: str) -> None:
    assert is_restricted(name) is True


@pytest.mark.parametrize("name", ["linux", "win32", "darwin", "webgl", ""])
def test_unrestricted_platforms(name: str) -> None:
    assert is_restricted(name) is False


def test_normalize_aliases() -> None:
    assert normalize_platform("iphone") == "ios"
    assert normalize_platform("Linux") == "linux"


def test_detect_uses_env_override() -> None:
    assert detect_platform({PLATFORM_ENV_VAR: "Android"}) == "android"


def test_detect_blank_override_falls_back_to_sys_platform(monkeypatch) -> None:
    monkeypatch.setattr(sys, "platform", "linux")
    assert detect_platform({PLATFORM_ENV_VAR: "  "}) == "linux"


def test_detect_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv(PLATFORM_ENV_VAR, "ios")
    assert detect_platform() == "ios"
