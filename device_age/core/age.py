"""Elapsed-age calculation."""

from device_age.core.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
)
from device_age.core.models import AgeBreakdown


def calculate_age(event_timestamp: int, reference_time: int) -> AgeBreakdown:
    """Break the time since an event into whole hours, days and minutes.

    All units truncate: 25h59m is 25 hours, 1 day and a minute
    remainder of 59.

    Args:
        event_timestamp: Event time in epoch milliseconds.
        reference_time: Evaluation instant in epoch milliseconds.

    Returns:
        AgeBreakdown for the elapsed interval.

    Raises:
        ValueError: If the event is after the reference time.
    """
    elapsed_ms = reference_time - event_timestamp
    if elapsed_ms < 0:
        msg = (
            f"event at {event_timestamp} is after reference time {reference_time}"
        )
        raise ValueError(msg)

    age_hours = elapsed_ms // MS_PER_HOUR
    days = elapsed_ms // MS_PER_DAY
    total_minutes = elapsed_ms // MS_PER_MINUTE

    return AgeBreakdown(
        age_hours=age_hours,
        days=days,
        hours=age_hours - days * HOURS_PER_DAY,
        minute_remainder=total_minutes - age_hours * MINUTES_PER_HOUR,
    )
