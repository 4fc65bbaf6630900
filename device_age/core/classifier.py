"""Severity classification of an age against thresholds."""

from device_age.core.enums import Level
from device_age.core.models import Thresholds


def classify_level(age_hours: int, thresholds: Thresholds) -> Level:
    """Map an age in hours to a severity level.

    Checks run from most to least severe, so the result is deterministic
    even when thresholds are misordered.
    """
    if age_hours >= thresholds.urgent:
        return Level.URGENT
    if age_hours >= thresholds.warn:
        return Level.WARN
    if age_hours >= thresholds.info:
        return Level.INFO
    return Level.NONE
