from __future__ import annotations

import pytest

from pagegeom.common import settings
from pagegeom.common.env import env_bool, env_str


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("true", True), ("Off", False), (" yes ", True), ("maybe", False)],
)
def test_env_bool_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("PGEOM_TEST_FLAG", raw)
    assert env_bool("PGEOM_TEST_FLAG", False) is expected


def test_env_bool_missing_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PGEOM_TEST_FLAG", raising=False)
    assert env_bool("PGEOM_TEST_FLAG", True) is True


def test_env_str_blank_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PGEOM_TEST_STR", "   ")
    assert env_str("PGEOM_TEST_STR", "fallback") == "fallback"
    monkeypatch.setenv("PGEOM_TEST_STR", " debug ")
    assert env_str("PGEOM_TEST_STR", "fallback") == "debug"


def test_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PGEOM_DEBUG_GEOMETRY", "true")
    monkeypatch.setenv("PGEOM_LOG_LEVEL", "debug")
    settings.reload_from_env()
    try:
        s = settings.get()
        assert s.DEBUG_GEOMETRY is True
        assert s.LOG_LEVEL == "DEBUG"
    finally:
        monkeypatch.delenv("PGEOM_DEBUG_GEOMETRY")
        monkeypatch.delenv("PGEOM_LOG_LEVEL")
        settings.reload_from_env()
    assert settings.get().DEBUG_GEOMETRY is False
    assert settings.get().LOG_LEVEL == "INFO"
