"""Tests for monitor preference resolution."""

import pytest
from pydantic import ValidationError

from device_age.core.enums import DisplayMode
from device_age.core.prefs import (
    ExtendedSettings,
    load_env_extended_settings,
    parse_display_mode,
    resolve_config,
)
from device_age.monitors import LAGE_PROFILE, MAGE_PROFILE


class TestResolveConfig:
    """Tests for resolve_config()."""

    def test_lage_defaults(self):
        config = resolve_config({}, LAGE_PROFILE)
        assert config.thresholds.info == 22
        assert config.thresholds.warn == 24
        assert config.thresholds.urgent == 25
        assert config.display_mode == DisplayMode.HOURS
        assert config.alerts_enabled is False

    def test_mage_defaults(self):
        config = resolve_config(None, MAGE_PROFILE)
        assert (
            config.thresholds.info,
            config.thresholds.warn,
            config.thresholds.urgent,
        ) == (44, 48, 72)
        # 'minutes' is not a days display, so it renders as hours
        assert config.display_mode == DisplayMode.HOURS

    def test_overrides(self):
        config = resolve_config(
            {"info": 40, "warn": 46, "urgent": 50, "display": "days", "enableAlerts": True},
            LAGE_PROFILE,
        )
        assert config.thresholds.info == 40
        assert config.thresholds.warn == 46
        assert config.thresholds.urgent == 50
        assert config.display_mode == DisplayMode.DAYS
        assert config.alerts_enabled is True

    def test_partial_override_keeps_other_defaults(self):
        config = resolve_config({"warn": 30}, LAGE_PROFILE)
        assert config.thresholds.info == 22
        assert config.thresholds.warn == 30
        assert config.thresholds.urgent == 25

    def test_falsy_values_fall_back(self):
        """Zero and empty values are treated as unset."""
        config = resolve_config(
            {"info": 0, "warn": None, "display": "", "enableAlerts": False},
            LAGE_PROFILE,
        )
        assert config.thresholds.info == 22
        assert config.thresholds.warn == 24
        assert config.display_mode == DisplayMode.HOURS
        assert config.alerts_enabled is False

    def test_string_numbers_coerced(self):
        config = resolve_config({"urgent": "36"}, LAGE_PROFILE)
        assert config.thresholds.urgent == 36

    def test_unknown_keys_ignored(self):
        config = resolve_config({"colour": "red"}, LAGE_PROFILE)
        assert config.thresholds.info == 22

    def test_malformed_type_raises(self):
        with pytest.raises(ValidationError):
            resolve_config({"info": "soon"}, LAGE_PROFILE)

    def test_accepts_model_instance(self):
        extended = ExtendedSettings(enable_alerts=True, warn=23)
        config = resolve_config(extended, LAGE_PROFILE)
        assert config.alerts_enabled is True
        assert config.thresholds.warn == 23

    def test_misordered_thresholds_accepted(self):
        config = resolve_config({"info": 30, "warn": 20, "urgent": 10}, LAGE_PROFILE)
        assert config.thresholds.info == 30
        assert config.thresholds.urgent == 10


class TestParseDisplayMode:
    def test_days(self):
        assert parse_display_mode("days", "hours") == DisplayMode.DAYS

    def test_default_used_when_unset(self):
        assert parse_display_mode(None, "days") == DisplayMode.DAYS

    def test_other_values_render_hours(self):
        assert parse_display_mode("minutes", "hours") == DisplayMode.HOURS


class TestLoadEnvExtendedSettings:
    """Tests for environment-sourced extended settings."""

    def test_reads_prefixed_variables(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LAGE_WARN", "30")
        monkeypatch.setenv("LAGE_DISPLAY", "days")
        monkeypatch.setenv("LAGE_ENABLE_ALERTS", "true")

        values = load_env_extended_settings("lage")

        assert values == {"warn": 30, "display": "days", "enableAlerts": True}

    def test_other_prefix_not_read(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MAGE_INFO", "40")
        monkeypatch.delenv("LAGE_INFO", raising=False)

        assert "info" not in load_env_extended_settings("lage")

    def test_round_trips_into_config(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MAGE_URGENT", "70")
        monkeypatch.setenv("MAGE_ENABLE_ALERTS", "1")

        config = resolve_config(load_env_extended_settings("mage"), MAGE_PROFILE)

        assert config.thresholds.urgent == 70
        assert config.alerts_enabled is True
