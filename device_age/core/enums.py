"""Age monitor enums."""

from enum import StrEnum, auto


class Level(StrEnum):
    """Severity of an event's age relative to the monitor thresholds."""

    NONE = auto()
    INFO = auto()
    WARN = auto()
    URGENT = auto()

    @property
    def rank(self) -> int:
        """Position in severity order, NONE lowest."""
        return list(Level).index(self)


class DisplayMode(StrEnum):
    """How the age is rendered for the user.

    ``hours`` renders total hours (``30h``); ``days`` renders a day/hour
    split (``1d6h``). Any other configured value renders as ``hours``.
    """

    HOURS = "hours"
    DAYS = "days"


class NotificationSound(StrEnum):
    """Sound hint passed to the notification channel."""

    INCOMING = "incoming"
    PERSISTENT = "persistent"
