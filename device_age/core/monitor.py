"""Generic device-age monitor.

Finds the newest event at or before the reference time, measures its
age, classifies it against the thresholds, and decides whether this
tick should raise a notification. One AgeMonitor is created per
MonitorProfile; nothing is kept between evaluations.
"""

from collections.abc import Iterable

from device_age.core.age import calculate_age
from device_age.core.classifier import classify_level
from device_age.core.display import format_display
from device_age.core.enums import Level
from device_age.core.models import AgeResult, Event, MonitorConfig
from device_age.core.notification import build_notification
from device_age.core.prefs import resolve_config
from device_age.core.profile import MonitorProfile
from device_age.core.selector import select_latest_event
from device_age.logging_config import get_logger
from device_age.ports import MonitorContext, NotificationRequest

logger = get_logger(__name__)


class AgeMonitor:
    """Age pipeline bound to one profile.

    Stateless and safe to share between threads or ticks.
    """

    def __init__(self, profile: MonitorProfile):
        self.profile = profile

    @property
    def name(self) -> str:
        return self.profile.name

    def __repr__(self) -> str:
        return f"AgeMonitor({self.name!r})"

    def get_prefs(self, context: MonitorContext) -> MonitorConfig:
        return resolve_config(context.extended_settings(self.name), self.profile)

    def evaluate(
        self,
        events: Iterable[Event],
        reference_time: int,
        config: MonitorConfig,
    ) -> AgeResult:
        """Run the pipeline for one reference time.

        Args:
            events: Event history for this monitor's stream.
            reference_time: Evaluation instant in epoch milliseconds.
            config: Resolved preferences.

        Returns:
            AgeResult; ``found`` is False when no event is at or before
            ``reference_time``.
        """
        event = select_latest_event(events, reference_time)
        if event is None:
            return AgeResult(
                found=False,
                level=Level.NONE,
                display=format_display(None, config.display_mode),
            )

        breakdown = calculate_age(event.timestamp, reference_time)
        level = classify_level(breakdown.age_hours, config.thresholds)

        return AgeResult(
            found=True,
            **breakdown.model_dump(),
            notes=event.notes,
            event_timestamp=event.timestamp,
            level=level,
            display=format_display(breakdown, config.display_mode),
            notification=build_notification(breakdown, level, config, self.profile),
        )

    def find_latest_time_change(self, context: MonitorContext) -> AgeResult:
        """Evaluate against the host context's time, events and settings."""
        config = self.get_prefs(context)
        result = self.evaluate(
            context.events(self.profile.event_stream), context.time, config
        )
        logger.debug(
            "Evaluated device age",
            monitor=self.name,
            found=result.found,
            age_hours=result.age_hours,
            level=result.level.value,
        )
        return result

    def set_properties(self, context: MonitorContext) -> None:
        """Publish this tick's AgeResult under the monitor name."""
        context.offer_property(
            self.name, lambda: self.find_latest_time_change(context)
        )

    def check_notifications(
        self, context: MonitorContext
    ) -> NotificationRequest | None:
        """Forward the published result's notification to the host, if any."""
        result: AgeResult | None = context.get_property(self.name)
        if result is None or result.notification is None:
            return None

        request = NotificationRequest.from_payload(
            result.notification,
            plugin=self.name,
            age_hours=result.age_hours,
        )
        context.request_notify(request)
        logger.info(
            "Requested age notification",
            monitor=self.name,
            level=request.level.value,
            age_hours=result.age_hours,
            group=request.group,
        )
        return request

    def tick(self, context: MonitorContext) -> AgeResult:
        """Publish the result and raise its notification. Returns the result."""
        self.set_properties(context)
        self.check_notifications(context)
        return context.get_property(self.name)
