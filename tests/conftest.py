"""Pytest configuration and shared fixtures."""

import os

import pytest

# Set testing mode BEFORE importing settings
os.environ["TESTING"] = "true"

from device_age.config import settings
from device_age.core.constants import MS_PER_HOUR, MS_PER_MINUTE
from device_age.core.models import Event
from device_age.sandbox import Sandbox

settings.testing = True

# 2023-11-14T22:13:20Z
REFERENCE_TIME = 1_700_000_000_000


def ago(hours: int = 0, minutes: int = 0, reference: int = REFERENCE_TIME) -> int:
    """Epoch millis ``hours`` and ``minutes`` before ``reference``."""
    return reference - hours * MS_PER_HOUR - minutes * MS_PER_MINUTE


def make_event(hours: int = 0, minutes: int = 0, notes: str | None = None) -> Event:
    return Event(timestamp=ago(hours, minutes), notes=notes)


@pytest.fixture
def reference_time() -> int:
    return REFERENCE_TIME


@pytest.fixture
def make_sandbox():
    """Factory for a Sandbox at REFERENCE_TIME (or ``time``)."""

    def _make(
        *,
        time: int = REFERENCE_TIME,
        data: dict | None = None,
        settings: dict | None = None,
        notify=None,
    ) -> Sandbox:
        return Sandbox(
            time=time,
            data=data or {},
            settings=settings or {},
            notify=notify,
        )

    return _make
