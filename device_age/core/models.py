"""Age monitor Pydantic models.

Pure data models for the age pipeline. Timestamps are integer
milliseconds since the epoch, matching the host's event history.
"""

from pydantic import BaseModel, ConfigDict, Field

from device_age.core.enums import DisplayMode, Level, NotificationSound


class Event(BaseModel):
    """A timestamped entry in a device or treatment history."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(description="Event time in epoch milliseconds.")
    notes: str | None = None


class Thresholds(BaseModel):
    """Age thresholds in whole hours.

    Expected to satisfy info <= warn <= urgent. Not validated: a
    misordered set still classifies deterministically (urgent first).
    """

    model_config = ConfigDict(frozen=True)

    info: int
    warn: int
    urgent: int


class MonitorConfig(BaseModel):
    """Preferences resolved for a single evaluation."""

    model_config = ConfigDict(frozen=True)

    thresholds: Thresholds
    display_mode: DisplayMode = DisplayMode.HOURS
    alerts_enabled: bool = False


class AgeBreakdown(BaseModel):
    """Elapsed time between an event and the reference time."""

    model_config = ConfigDict(frozen=True)

    age_hours: int = Field(ge=0)
    days: int = Field(ge=0)
    hours: int = Field(ge=0, le=23)
    minute_remainder: int = Field(ge=0, le=59)


class NotificationPayload(BaseModel):
    """Notification content handed to the host's notification channel."""

    model_config = ConfigDict(frozen=True)

    title: str
    message: str
    sound: NotificationSound
    level: Level
    group: str


class AgeResult(BaseModel):
    """Outcome of one monitor evaluation. Built fresh on every tick."""

    model_config = ConfigDict(frozen=True)

    found: bool = False
    age_hours: int = 0
    days: int = 0
    hours: int = 0
    minute_remainder: int = 0
    notes: str | None = None
    event_timestamp: int | None = None
    level: Level = Level.NONE
    display: str
    notification: NotificationPayload | None = None
