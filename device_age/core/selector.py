"""Latest-event selection."""

from collections.abc import Iterable

from device_age.core.models import Event


def select_latest_event(events: Iterable[Event], reference_time: int) -> Event | None:
    """Return the newest event at or before ``reference_time``.

    Single pass, independent of input order. On equal timestamps the
    first event seen wins. Future events are ignored.

    Args:
        events: Event history in any order.
        reference_time: Evaluation instant in epoch milliseconds.

    Returns:
        The selected Event, or None for an empty or all-future history.
    """
    latest: Event | None = None
    for event in events:
        if event.timestamp > reference_time:
            continue
        if latest is None or event.timestamp > latest.timestamp:
            latest = event
    return latest
