"""Per-instance monitor parameters."""

from dataclasses import dataclass, field

from device_age.core.enums import Level
from device_age.core.models import Thresholds


@dataclass(frozen=True)
class MonitorProfile:
    """Everything that distinguishes one age monitor from another.

    The pipeline itself is identical across monitors; only the defaults,
    wording, notification group and source event stream differ.
    """

    name: str
    label: str
    event_stream: str
    default_thresholds: Thresholds
    default_display: str
    title_template: str  # formatted with age=<hours>
    messages: dict[Level, str] = field(default_factory=dict)
    group: str = ""

    def title_for(self, age_hours: int) -> str:
        return self.title_template.format(age=age_hours)

    def message_for(self, level: Level) -> str:
        return self.messages.get(level, self.label)
