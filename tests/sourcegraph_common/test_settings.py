"""Tests for runtime settings loading and validation."""

from __future__ import annotations

import pytest

from sourcegraph_common.errors import ErrorCode, SettingsError
from sourcegraph_common.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ClientSettings,
    load_settings,
)


@pytest.mark.usefixtures("clean_env")
class TestClientSettings:
    def test_defaults(self) -> None:
        settings = ClientSettings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.token is None
        assert settings.timeout == 30.0
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOURCEGRAPH_BASE_URL", "https://sg.example.com/api")
        monkeypatch.setenv("SOURCEGRAPH_TOKEN", "secret")
        monkeypatch.setenv("SOURCEGRAPH_LOG_LEVEL", "debug")
        settings = ClientSettings()
        assert settings.base_url == "https://sg.example.com/api/"
        assert settings.token == "secret"
        assert settings.log_level == "DEBUG"

    def test_overrides_beat_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOURCEGRAPH_TIMEOUT", "10")
        assert load_settings(timeout=3).timeout == 3.0


@pytest.mark.usefixtures("clean_env")
class TestLoadSettingsFailures:
    def test_relative_base_url(self) -> None:
        with pytest.raises(SettingsError) as exc_info:
            load_settings(base_url="sourcegraph.com/api")
        error = exc_info.value
        assert error.code is ErrorCode.CONFIGURATION_ERROR
        assert [issue["field"] for issue in error.context["validation_errors"]] == ["base_url"]

    def test_non_positive_timeout(self) -> None:
        with pytest.raises(SettingsError):
            load_settings(timeout=0)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(SettingsError):
            load_settings(log_level="LOUD")

    def test_unknown_field(self) -> None:
        with pytest.raises(SettingsError):
            load_settings(retries=3)

    def test_problem_details(self) -> None:
        with pytest.raises(SettingsError) as exc_info:
            load_settings(timeout=-1)
        problem = exc_info.value.to_problem_details()
        assert problem["status"] == 500
        assert problem["code"] == "configuration-error"
