"""
Test helper functions for nap schedule validation.

These functions can be imported by test modules for timeline analysis.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from naptime.time_math import parse_minutes
from naptime.types import Event, NapEvent, WakeEvent


def m(time_str: str) -> int:
    """Shorthand for "HH:MM" to minutes since midnight."""
    return parse_minutes(time_str)


def get_events_by_type(events: list[Event], event_type: str) -> list[Event]:
    """Extract all events of a specific type ("wake", "awake", "nap", "bedtime")."""
    return [event for event in events if event.type == event_type]


def get_naps(events: list[Event], status: str | None = None) -> list[NapEvent]:
    """Nap events, optionally filtered by status."""
    return [
        event
        for event in get_events_by_type(events, "nap")
        if status is None or event.status == status
    ]


def spans(events: list[Event]) -> list[tuple[str, int, int]]:
    """(id, start, end) for every interval event, for compact assertions."""
    return [
        (event.id, event.start, event.end)
        for event in events
        if not isinstance(event, WakeEvent)
    ]


def assert_contiguous(events: list[Event]) -> None:
    """
    Assert the timeline has no gaps or overlaps.

    The wake point must meet the first interval, every interval must end
    where the next begins, and the last interval before bedtime must end at
    bedtime.
    """
    assert events[0].type == "wake"
    assert events[-1].type == "bedtime"
    assert sum(1 for event in events if event.type == "bedtime") == 1

    intervals = events[1:]
    if len(intervals) > 1:
        assert intervals[0].start == events[0].time
    for previous, following in zip(intervals, intervals[1:]):
        assert previous.end == following.start, (
            f"{previous.id} ends at {previous.end} but {following.id} starts at {following.start}"
        )
