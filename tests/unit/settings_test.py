"""Tests for platform settings."""

from __future__ import annotations

import pytest

from photo_editor_bridge.settings import PLATFORM_ENV_VAR, Platform, get_platform, parse_platform


def test_default_platform_is_ios(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(PLATFORM_ENV_VAR, raising=False)
    assert get_platform() is Platform.IOS


def test_platform_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PLATFORM_ENV_VAR, " ANDROID ")
    assert get_platform() is Platform.ANDROID


def test_unknown_platform_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported platform 'web'"):
        parse_platform("web")
