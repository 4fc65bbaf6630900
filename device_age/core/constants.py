"""Age monitor constants."""

from typing import Final

MS_PER_MINUTE: Final[int] = 60_000
MS_PER_HOUR: Final[int] = 60 * MS_PER_MINUTE
MS_PER_DAY: Final[int] = 24 * MS_PER_HOUR
HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60

# Minutes after the hour boundary during which a crossing may still notify.
# Absorbs ticks that do not land exactly on the hour.
NOTIFY_GRACE_MINUTES: Final[int] = 20

# Display value when no qualifying event exists (trailing space is intentional)
NOT_FOUND_DISPLAY: Final[str] = "n/a "
