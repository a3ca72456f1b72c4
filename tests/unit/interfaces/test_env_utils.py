"""Tests for environment variable helpers."""

from __future__ import annotations

import pytest

from handlerpref.interfaces.env_utils import env_flag, parse_list, require_env
from handlerpref.shared.exceptions import ConfigurationError


class TestRequireEnv:
    def test_returns_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert require_env("MY_VAR") == "hello"

    def test_raises_when_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MY_VAR", raising=False)
        with pytest.raises(ConfigurationError, match="MY_VAR"):
            require_env("MY_VAR")

    def test_raises_when_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "")
        with pytest.raises(ConfigurationError, match="MY_VAR"):
            require_env("MY_VAR")


def test_parse_list_drops_blanks() -> None:
    assert parse_list(" pkg.a, ,pkg.b,") == ["pkg.a", "pkg.b"]
    assert parse_list("") == []


class TestEnvFlag:
    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FLAG", raising=False)
        assert env_flag("FLAG", True) is True

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "on"])
    def test_truthy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("FLAG", raw)
        assert env_flag("FLAG", False) is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_falsy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("FLAG", raw)
        assert env_flag("FLAG", True) is False

    def test_invalid_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAG", "maybe")
        with pytest.raises(ConfigurationError, match="Invalid boolean"):
            env_flag("FLAG", False)
