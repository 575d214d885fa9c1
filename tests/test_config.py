"""
Tests for TracingSettings and validate_settings.
"""

from __future__ import annotations

import pydantic
import pytest

from functorkit import SettingsInvalid, TracingSettings, validate_settings
from tests.helpers import expect_left, expect_right


class TestTracingSettings:
    """Defaults and immutability."""

    def test_defaults(self) -> None:
        settings = TracingSettings()
        assert settings.logger_name == "functorkit"
        assert settings.level == "debug"
        assert settings.warn_on_resettle is True

    def test_frozen(self) -> None:
        """Settings cannot be changed after construction."""
        settings = TracingSettings()
        with pytest.raises(pydantic.ValidationError):
            settings.level = "info"  # type: ignore[misc]


class TestValidateSettings:
    """validate_settings reports problems as a Left."""

    def test_valid_settings_are_right(self) -> None:
        settings = expect_right(validate_settings(logger_name="app.pipeline", level="warning"))
        assert settings == TracingSettings(logger_name="app.pipeline", level="warning")

    def test_unknown_level_is_left(self) -> None:
        error = expect_left(validate_settings(level="loud"))
        assert isinstance(error, SettingsInvalid)
        assert error.kind == "SettingsInvalid"
        assert error.error.errors()[0]["loc"] == ("level",)

    def test_empty_logger_name_is_left(self) -> None:
        error = expect_left(validate_settings(logger_name=""))
        assert error.error.errors()[0]["loc"] == ("logger_name",)

    def test_extra_fields_are_forbidden(self) -> None:
        error = expect_left(validate_settings(colour="blue"))
        assert error.error.errors()[0]["type"] == "extra_forbidden"
