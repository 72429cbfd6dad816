"""Tests for environment-driven settings."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from fieldrules.config import Settings, get_settings
from fieldrules.validation import NON_OBJECT_MESSAGE, ValidationConfig, Validator, declare, Required


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("FIELDRULES_LOG_LEVEL", "FIELDRULES_LOG_JSON", "FIELDRULES_REJECT_NON_OBJECT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.REJECT_NON_OBJECT is False

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDRULES_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FIELDRULES_LOG_JSON", "true")
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestValidationConfigFromSettings:
    def test_reject_non_object_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDRULES_REJECT_NON_OBJECT", "1")
        config = ValidationConfig.from_settings()
        assert config.reject_non_object is True
        outcome = Validator(["not", "an", "object"], [declare("bio", Required())], config).validate()
        assert outcome.errors == {"$": [NON_OBJECT_MESSAGE]}

    def test_validator_ignores_env_without_explicit_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDRULES_REJECT_NON_OBJECT", "1")
        assert Validator(42, [declare("bio", Required())]).validate().passed
