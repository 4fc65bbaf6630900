"""In-memory host context.

Implements the MonitorContext port over plain dicts. A host's context
provider can return one per scheduler tick.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from device_age.core.models import Event
from device_age.ports import NotificationRequest


@dataclass
class Sandbox:
    """A single tick's view of the host.

    ``data`` maps event stream names to histories, ``settings`` maps
    monitor names to their extendedSettings. Offered properties are
    computed immediately and stored; notification requests collect in
    ``notifications`` and are also forwarded to ``notify`` when given.

    Requests are not deduplicated by ``group``. With ticks more frequent
    than hourly, one crossing is requested on every tick inside the
    20-minute grace window (up to five at the default 5-minute interval);
    a real host's notification bus is expected to collapse them by group.
    """

    time: int
    data: dict[str, Sequence[Event]] = field(default_factory=dict)
    settings: dict[str, Mapping[str, Any]] = field(default_factory=dict)
    properties: dict[str, Any] = field(default_factory=dict)
    notifications: list[NotificationRequest] = field(default_factory=list)
    notify: Callable[[NotificationRequest], None] | None = None

    def events(self, stream: str) -> Sequence[Event]:
        return self.data.get(stream, ())

    def extended_settings(self, monitor: str) -> Mapping[str, Any]:
        return self.settings.get(monitor, {})

    def offer_property(self, name: str, setter: Callable[[], Any]) -> None:
        self.properties[name] = setter()

    def get_property(self, name: str) -> Any:
        return self.properties.get(name)

    def request_notify(self, request: NotificationRequest) -> None:
        self.notifications.append(request)
        if self.notify is not None:
            self.notify(request)
