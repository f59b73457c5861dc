"""
Naptime Daily Schedule Generation

Predicts a baby's naps for the day from a wake-window policy and reconciles
the predictions with naps the family has actually logged.

Main entry point: generate_day_schedule (or DayScheduleGenerator)
"""

from .errors import InvalidNapError, InvalidPolicyError, NaptimeError, TimeParseError
from .scheduler import (
    DayScheduleGenerator,
    find_ordering_violations,
    generate_day_schedule,
    generate_for_day,
    get_current_event,
    is_time_in_event,
    validate_policy,
)
from .types import (
    AwakeEvent,
    BabyInfo,
    BedtimeEvent,
    DayLog,
    Event,
    EventType,
    LoggedNap,
    NapEvent,
    NapStatus,
    SchedulePolicy,
    Settings,
    WakeEvent,
)

__all__ = [
    # Types
    "SchedulePolicy",
    "LoggedNap",
    "Event",
    "EventType",
    "NapStatus",
    "WakeEvent",
    "AwakeEvent",
    "NapEvent",
    "BedtimeEvent",
    "DayLog",
    "BabyInfo",
    "Settings",
    # Scheduler
    "DayScheduleGenerator",
    "generate_day_schedule",
    "generate_for_day",
    "validate_policy",
    "is_time_in_event",
    "get_current_event",
    "find_ordering_violations",
    # Errors
    "NaptimeError",
    "TimeParseError",
    "InvalidPolicyError",
    "InvalidNapError",
]
