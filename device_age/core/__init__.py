"""Device-age pipeline.

Pure computation: select the newest event at or before a reference
time, measure its age, classify it, and decide whether a threshold
crossing should notify. No I/O; the host supplies events and settings
and receives results through device_age.ports.
"""

from device_age.core.age import calculate_age
from device_age.core.classifier import classify_level
from device_age.core.display import format_display
from device_age.core.enums import DisplayMode, Level, NotificationSound
from device_age.core.models import (
    AgeBreakdown,
    AgeResult,
    Event,
    MonitorConfig,
    NotificationPayload,
    Thresholds,
)
from device_age.core.monitor import AgeMonitor
from device_age.core.notification import build_notification, is_exact_crossing
from device_age.core.profile import MonitorProfile
from device_age.core.selector import select_latest_event

__all__ = [
    "AgeBreakdown",
    "AgeMonitor",
    "AgeResult",
    "DisplayMode",
    "Event",
    "Level",
    "MonitorConfig",
    "MonitorProfile",
    "NotificationPayload",
    "NotificationSound",
    "Thresholds",
    "build_notification",
    "calculate_age",
    "classify_level",
    "format_display",
    "is_exact_crossing",
    "select_latest_event",
]
