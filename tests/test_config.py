"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from weatherwise.config import Settings, get_settings, load_settings

_VARS = [
    "APP_NAME",
    "APP_ENV",
    "DEBUG",
    "LAT",
    "LON",
    "OPENWEATHER_API_KEY",
    "FORECAST_DAYS",
    "FORECAST_MAX_AGE_MINUTES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from an environment without WEATHERWISE_* variables."""
    for name in _VARS:
        monkeypatch.delenv(f"WEATHERWISE_{name}", raising=False)


class TestLoadSettings:
    """Test reading settings from the environment."""

    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings == Settings()
        assert settings.app_name == "WeatherWise"
        assert settings.lat == 52.52
        assert settings.lon == 13.405
        assert settings.openweather_api_key == ""
        assert settings.forecast_days == 7
        assert settings.forecast_max_age_minutes == 60
        assert settings.debug is False

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHERWISE_APP_ENV", "production")
        monkeypatch.setenv("WEATHERWISE_LAT", "48.137")
        monkeypatch.setenv("WEATHERWISE_LON", "11.575")
        monkeypatch.setenv("WEATHERWISE_OPENWEATHER_API_KEY", "  secret  ")
        monkeypatch.setenv("WEATHERWISE_FORECAST_DAYS", "3")
        monkeypatch.setenv("WEATHERWISE_FORECAST_MAX_AGE_MINUTES", "0")

        settings = load_settings()

        assert settings.app_env == "production"
        assert settings.lat == 48.137
        assert settings.lon == 11.575
        assert settings.openweather_api_key == "secret"
        assert settings.forecast_days == 3
        assert settings.forecast_max_age_minutes == 0

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("TRUE", True), ("on", True), ("no", False), ("", False)])
    def test_debug_flag(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("WEATHERWISE_DEBUG", raw)
        assert load_settings().debug is expected

    @pytest.mark.parametrize(
        ("name", "raw"),
        [
            ("LAT", "north"),
            ("LAT", "91"),
            ("LON", "-181"),
            ("FORECAST_DAYS", "0"),
            ("FORECAST_DAYS", "17"),
            ("FORECAST_DAYS", "seven"),
            ("FORECAST_MAX_AGE_MINUTES", "-5"),
        ],
    )
    def test_invalid_values_fall_back(
        self, monkeypatch: pytest.MonkeyPatch, name: str, raw: str
    ) -> None:
        """Test bad values never raise and keep the default."""
        monkeypatch.setenv(f"WEATHERWISE_{name}", raw)
        assert load_settings() == Settings()

    def test_settings_are_frozen(self) -> None:
        settings = load_settings()
        with pytest.raises(ValueError):
            settings.lat = 0.0  # type: ignore[misc]


class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
