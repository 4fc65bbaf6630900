"""Monitor preference resolution.

Hosts hand each monitor a loose ``extendedSettings`` mapping. Any field
that is absent or falsy (``None``, ``0``, ``""``) falls back to the
profile default, so a monitor never sees a zero threshold.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from device_age.core.enums import DisplayMode
from device_age.core.models import MonitorConfig, Thresholds
from device_age.core.profile import MonitorProfile


class ExtendedSettings(BaseModel):
    """Raw per-monitor settings as supplied by the host."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    info: int | None = Field(default=None, description="INFO threshold (hours).")
    warn: int | None = Field(default=None, description="WARN threshold (hours).")
    urgent: int | None = Field(
        default=None, description="URGENT threshold (hours)."
    )
    display: str | None = Field(
        default=None, description="Display mode: 'hours' or 'days'."
    )
    enable_alerts: bool | None = Field(default=None, alias="enableAlerts")


class MonitorEnvSettings(BaseSettings):
    """Extended settings read from ``<NAME>_*`` environment variables.

    Instantiate with ``_env_prefix``, e.g. ``MonitorEnvSettings(_env_prefix="LAGE_")``
    reads LAGE_INFO, LAGE_WARN, LAGE_URGENT, LAGE_DISPLAY, LAGE_ENABLE_ALERTS.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    info: int | None = None
    warn: int | None = None
    urgent: int | None = None
    display: str | None = None
    enable_alerts: bool | None = None


def load_env_extended_settings(monitor_name: str) -> dict[str, Any]:
    """Read a monitor's extended settings from the environment.

    Only variables that are set are returned, keyed the way hosts
    supply them (``enableAlerts`` rather than ``enable_alerts``).
    """
    env = MonitorEnvSettings(_env_prefix=f"{monitor_name.upper()}_")
    values = env.model_dump(exclude_none=True)
    if "enable_alerts" in values:
        values["enableAlerts"] = values.pop("enable_alerts")
    return values


def parse_display_mode(value: str | None, default: str) -> DisplayMode:
    """Anything other than 'days' renders as hours."""
    chosen = value or default
    return DisplayMode.DAYS if chosen == DisplayMode.DAYS else DisplayMode.HOURS


def resolve_config(
    extended: Mapping[str, Any] | ExtendedSettings | None,
    profile: MonitorProfile,
) -> MonitorConfig:
    """Resolve host settings into a MonitorConfig, filling profile defaults.

    Args:
        extended: The host's extendedSettings for this monitor.
        profile: Supplies the default thresholds and display mode.

    Returns:
        MonitorConfig for a single evaluation.

    Raises:
        pydantic.ValidationError: If a supplied field has the wrong type.
    """
    if not isinstance(extended, ExtendedSettings):
        extended = ExtendedSettings.model_validate(dict(extended or {}))

    defaults = profile.default_thresholds
    thresholds = Thresholds(
        info=extended.info or defaults.info,
        warn=extended.warn or defaults.warn,
        urgent=extended.urgent or defaults.urgent,
    )
    return MonitorConfig(
        thresholds=thresholds,
        display_mode=parse_display_mode(extended.display, profile.default_display),
        alerts_enabled=bool(extended.enable_alerts),
    )
