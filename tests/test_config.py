"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from censor.engine.censor_engine import CensorEngine
from censor.service.config import Settings


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestSettings:
    def test_defaults(self) -> None:
        settings = _settings()

        assert settings.placeholder == "*"
        assert settings.sanitize_pattern is None
        assert settings.split_pattern is None
        assert settings.empty_list is False
        assert settings.extra_words == []
        assert settings.open_moderator_api_key is None
        assert settings.moderation_base_url == "https://www.openmoderator.com/api"
        assert settings.moderation_timeout == 10.0
        assert settings.log_level == "INFO"

    def test_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CENSOR_PLACEHOLDER", "x")
        monkeypatch.setenv("CENSOR_EXTRA_WORDS", '["dog"]')
        monkeypatch.setenv("CENSOR_SPLIT_PATTERN", r"\s+")

        settings = _settings()

        assert settings.placeholder == "x"
        assert settings.extra_words == ["dog"]
        assert settings.split_pattern == r"\s+"

    def test_bare_api_key_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPEN_MODERATOR_API_KEY", "secret-key")

        settings = _settings()

        assert settings.open_moderator_api_key is not None
        assert settings.open_moderator_api_key.get_secret_value() == "secret-key"
        assert "secret-key" not in repr(settings)

    def test_api_key_keyword(self) -> None:
        settings = _settings(open_moderator_api_key="k")
        assert settings.open_moderator_api_key.get_secret_value() == "k"

    def test_empty_placeholder_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            _settings(placeholder="")

    @pytest.mark.parametrize(
        "field", ["sanitize_pattern", "replace_pattern", "split_pattern"]
    )
    def test_invalid_pattern_rejected(self, field: str) -> None:
        with pytest.raises(PydanticValidationError):
            _settings(**{field: "[unclosed"})

    def test_log_level_normalized(self) -> None:
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            _settings(log_level="loud")

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            _settings(moderation_timeout=0)

    def test_base_url_trailing_slash(self) -> None:
        settings = _settings(moderation_base_url="https://example.test/api/")
        assert settings.moderation_base_url == "https://example.test/api"


class TestEngineFromSettings:
    def test_applies_settings(self) -> None:
        settings = _settings(
            placeholder="#",
            extra_words=["dog"],
            exclude=["Hells"],
        )
        engine = CensorEngine.from_settings(settings)

        assert engine.clean("Go dog go") == "Go ### go"
        assert not engine.is_profane("hells")

    def test_empty_list_setting(self) -> None:
        engine = CensorEngine.from_settings(_settings(empty_list=True))
        assert engine.words == ()

    def test_split_pattern_setting(self) -> None:
        engine = CensorEngine.from_settings(
            _settings(split_pattern=" ", extra_words=["français"])
        )
        assert engine.clean("mot en français") == "mot en *******"
