"""Ports (interfaces) between the age monitors and their host.

The host owns the event history, the settings, the property bus that
later stages (rendering) read from, and the notification channel. The
monitors only read from it and publish back through these calls.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from device_age.core.enums import Level, NotificationSound
from device_age.core.models import Event, NotificationPayload


class NotificationRequest(BaseModel):
    """A notification payload tagged with the monitor that raised it."""

    model_config = ConfigDict(frozen=True)

    title: str
    message: str
    sound: NotificationSound
    level: Level
    group: str
    plugin: str
    debug: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_payload(
        cls,
        payload: NotificationPayload,
        *,
        plugin: str,
        age_hours: int,
    ) -> "NotificationRequest":
        return cls(
            **payload.model_dump(),
            plugin=plugin,
            debug={"age": age_hours},
        )


class MonitorContext(Protocol):
    """Host context handed to a monitor on every tick."""

    @property
    def time(self) -> int:
        """Reference instant in epoch milliseconds."""
        ...

    def events(self, stream: str) -> Sequence[Event]:
        ...

    def extended_settings(self, monitor: str) -> Mapping[str, Any]:
        ...

    def offer_property(self, name: str, setter: Callable[[], Any]) -> None:
        ...

    def get_property(self, name: str) -> Any:
        ...

    def request_notify(self, request: NotificationRequest) -> None:
        ...
