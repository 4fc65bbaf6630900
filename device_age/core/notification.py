"""Notification gate for threshold crossings.

A notification fires only on the evaluation where the age in whole
hours equals the threshold that set the current level, and only within
the first NOTIFY_GRACE_MINUTES after that hour boundary. With at least
one evaluation per hour this yields one notification per crossing
without remembering anything between ticks.

Known limitation: if evaluations are further apart than an hour, the
age can step over a threshold and that crossing is never notified.
"""

from device_age.core.constants import NOTIFY_GRACE_MINUTES
from device_age.core.enums import Level, NotificationSound
from device_age.core.models import (
    AgeBreakdown,
    MonitorConfig,
    NotificationPayload,
    Thresholds,
)
from device_age.core.profile import MonitorProfile


def is_exact_crossing(age_hours: int, thresholds: Thresholds) -> bool:
    """True when ``age_hours`` sits exactly on the threshold of its level."""
    return (
        age_hours == thresholds.urgent
        or (age_hours == thresholds.warn and age_hours < thresholds.urgent)
        or (age_hours == thresholds.info and age_hours < thresholds.warn)
    )


def within_grace_window(minute_remainder: int) -> bool:
    return minute_remainder <= NOTIFY_GRACE_MINUTES


def build_notification(
    breakdown: AgeBreakdown,
    level: Level,
    config: MonitorConfig,
    profile: MonitorProfile,
) -> NotificationPayload | None:
    """Build the notification for this evaluation, if one is due.

    Args:
        breakdown: Age of the selected event.
        level: Level already classified from ``breakdown.age_hours``.
        config: Resolved preferences (thresholds and alert switch).
        profile: Monitor wording and notification group.

    Returns:
        NotificationPayload, or None when alerts are disabled, the age is
        not an exact crossing, or the grace window has passed.
    """
    if not config.alerts_enabled:
        return None
    if not is_exact_crossing(breakdown.age_hours, config.thresholds):
        return None
    if not within_grace_window(breakdown.minute_remainder):
        return None

    sound = (
        NotificationSound.PERSISTENT
        if level == Level.URGENT
        else NotificationSound.INCOMING
    )
    return NotificationPayload(
        title=profile.title_for(breakdown.age_hours),
        message=profile.message_for(level),
        sound=sound,
        level=level,
        group=profile.group,
    )
