"""Tests for age monitor models and enums."""

import pytest
from pydantic import ValidationError

from device_age.core.enums import DisplayMode, Level, NotificationSound
from device_age.core.models import (
    AgeBreakdown,
    AgeResult,
    Event,
    NotificationPayload,
    Thresholds,
)
from device_age.ports import NotificationRequest


class TestEnums:
    def test_display_modes(self):
        assert {e.value for e in DisplayMode} == {"hours", "days"}

    def test_sounds(self):
        assert {e.value for e in NotificationSound} == {"incoming", "persistent"}

    def test_member_names_uppercase(self):
        for enum_cls in (Level, DisplayMode, NotificationSound):
            assert all(name.isupper() for name in enum_cls.__members__)
        assert DisplayMode.DAYS == "days"
        assert NotificationSound.PERSISTENT == "persistent"


class TestEvent:
    def test_notes_optional(self):
        assert Event(timestamp=0).notes is None

    def test_fields(self):
        assert set(Event.model_fields) == {"timestamp", "notes"}

    def test_frozen(self):
        event = Event(timestamp=0)
        with pytest.raises(ValidationError):
            event.timestamp = 1


class TestAgeBreakdown:
    def test_rejects_negative_age(self):
        with pytest.raises(ValidationError):
            AgeBreakdown(age_hours=-1, days=0, hours=0, minute_remainder=0)

    def test_rejects_minute_overflow(self):
        with pytest.raises(ValidationError):
            AgeBreakdown(age_hours=1, days=0, hours=1, minute_remainder=60)


class TestAgeResult:
    def test_not_found_defaults(self):
        result = AgeResult(display="n/a ")
        assert result.found is False
        assert result.age_hours == 0
        assert result.level == Level.NONE
        assert result.notification is None


class TestNotificationRequest:
    def test_from_payload(self):
        payload = NotificationPayload(
            title="Long acting insulin dose 24 hours ago",
            message="Time for long acting insulin dose",
            sound=NotificationSound.INCOMING,
            level=Level.WARN,
            group="LAGE",
        )
        request = NotificationRequest.from_payload(payload, plugin="lage", age_hours=24)

        assert request.title == payload.title
        assert request.message == payload.message
        assert request.sound == NotificationSound.INCOMING
        assert request.level == Level.WARN
        assert request.group == "LAGE"
        assert request.plugin == "lage"
        assert request.debug == {"age": 24}


class TestThresholds:
    def test_order_not_validated(self):
        thresholds = Thresholds(info=30, warn=20, urgent=10)
        assert thresholds.urgent == 10
