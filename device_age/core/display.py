"""Short age strings for the status display."""

from device_age.core.constants import HOURS_PER_DAY, NOT_FOUND_DISPLAY
from device_age.core.enums import DisplayMode
from device_age.core.models import AgeBreakdown


def format_display(breakdown: AgeBreakdown | None, mode: DisplayMode) -> str:
    """Render an age as ``30h`` (hours mode) or ``1d6h`` (days mode).

    In days mode the day part is omitted below 24 hours (``6h``).
    A missing breakdown means no event was found and renders ``"n/a "``.
    """
    if breakdown is None:
        return NOT_FOUND_DISPLAY

    if mode == DisplayMode.DAYS:
        display = ""
        if breakdown.age_hours >= HOURS_PER_DAY:
            display += f"{breakdown.days}d"
        return display + f"{breakdown.hours}h"

    return f"{breakdown.age_hours}h"
