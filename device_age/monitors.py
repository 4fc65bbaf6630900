"""Configured age monitors.

lage: time since the last long-acting insulin dose.
mage: time since the last Medtronic reservoir change.
"""

from device_age.core.enums import Level
from device_age.core.models import Thresholds
from device_age.core.monitor import AgeMonitor
from device_age.core.profile import MonitorProfile

LAGE_PROFILE = MonitorProfile(
    name="lage",
    label="Long Acting Insulin Age",
    event_stream="dose_treatments",
    default_thresholds=Thresholds(info=22, warn=24, urgent=25),
    default_display="hours",
    title_template="Long acting insulin dose {age} hours ago",
    messages={
        Level.INFO: "Give long acting insulin dose soon",
        Level.WARN: "Time for long acting insulin dose",
        Level.URGENT: "Long acting insulin dose overdue!",
    },
    group="LAGE",
)

MAGE_PROFILE = MonitorProfile(
    name="mage",
    label="Medtronic Reservoir Change",
    event_stream="longacting_treatments",
    default_thresholds=Thresholds(info=44, warn=48, urgent=72),
    # Not a DisplayMode; falls through to hours rendering
    default_display="minutes",
    title_template="Medtronic reservoir changed {age} hours ago",
    messages={
        Level.INFO: "Change Medtronic reservoir soon",
        Level.WARN: "Time to change Medtronic reservoir",
        Level.URGENT: "Medtronic reservoir change overdue!",
    },
    group="MAGE",
)

PROFILES: dict[str, MonitorProfile] = {
    profile.name: profile for profile in (LAGE_PROFILE, MAGE_PROFILE)
}


def get_monitor(name: str) -> AgeMonitor:
    """Build the monitor registered under ``name``.

    Raises:
        KeyError: If no profile has that name.
    """
    try:
        profile = PROFILES[name]
    except KeyError:
        msg = f"Unknown age monitor: {name!r} (known: {', '.join(PROFILES)})"
        raise KeyError(msg) from None
    return AgeMonitor(profile)


def get_monitors(names: list[str] | None = None) -> list[AgeMonitor]:
    """Build monitors for ``names``, or every registered profile."""
    return [get_monitor(name) for name in (names if names is not None else PROFILES)]
