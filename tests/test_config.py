"""Tests for ValidatorsConfig."""

import pytest
from pydantic import ValidationError

from metaschema.config import (
    ENV_CUSTOM_MESSAGE_SUPPORTED,
    ENV_OPENAPI3_DISCRIMINATORS,
    ENV_STRICT_FORMATS,
    ValidatorsConfig,
)


class TestValidatorsConfig:
    def test_defaults(self) -> None:
        config = ValidatorsConfig()

        assert config.custom_message_supported is True
        assert config.openapi3_style_discriminators is False
        assert config.strict_formats is False

    def test_is_frozen(self) -> None:
        config = ValidatorsConfig()

        with pytest.raises(ValidationError):
            config.strict_formats = True  # type: ignore[misc]

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ValidatorsConfig(fail_fast=True)  # type: ignore[call-arg]


class TestFromEnv:
    def test_unset_environment_uses_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (ENV_CUSTOM_MESSAGE_SUPPORTED, ENV_OPENAPI3_DISCRIMINATORS, ENV_STRICT_FORMATS):
            monkeypatch.delenv(name, raising=False)

        assert ValidatorsConfig.from_env() == ValidatorsConfig()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False), ("off", False)],
    )
    def test_flag_parsing(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv(ENV_OPENAPI3_DISCRIMINATORS, raw)

        assert ValidatorsConfig.from_env().openapi3_style_discriminators is expected

    def test_blank_value_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_CUSTOM_MESSAGE_SUPPORTED, "  ")

        assert ValidatorsConfig.from_env().custom_message_supported is True

    def test_disable_custom_message(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_CUSTOM_MESSAGE_SUPPORTED, "false")
        monkeypatch.setenv(ENV_STRICT_FORMATS, "on")

        config = ValidatorsConfig.from_env()
        assert config.custom_message_supported is False
        assert config.strict_formats is True
