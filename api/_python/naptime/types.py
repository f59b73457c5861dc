"""
Data structures for nap schedule generation.

Inputs (policy, logged naps, day logs) carry times of day as "HH:MM"
strings, the way they are stored and entered. Generated events carry
integer minutes since midnight.
"""

from dataclasses import dataclass, field
from typing import Literal

# =============================================================================
# Inputs
# =============================================================================


@dataclass(frozen=True)
class SchedulePolicy:
    """Recurring household schedule preferences."""

    default_wake_window: float  # Hours awake before the next predicted nap
    default_nap_duration: float  # Hours, assumed length of a predicted nap
    bedtime: str  # "19:00" format, no naps are predicted past this
    typical_wake_time: str = "06:30"  # Used when a day has no recorded wake time


@dataclass(frozen=True)
class LoggedNap:
    """
    A nap the caller recorded for the day.

    Ids are assigned by whoever creates the nap; the generator only reads them.
    A missing end_time means the nap is still in progress.
    """

    id: str
    start_time: str  # "HH:MM"
    end_time: str | None = None  # "HH:MM", None while in progress
    notes: str = ""


# =============================================================================
# Generated events
# =============================================================================

EventType = Literal["wake", "awake", "nap", "bedtime"]

NapStatus = Literal["predicted", "actual", "in-progress"]


@dataclass(frozen=True)
class WakeEvent:
    """Point event marking the start of the day."""

    time: int  # Minutes since midnight
    id: str = "wake"
    type: Literal["wake"] = "wake"


@dataclass(frozen=True)
class AwakeEvent:
    """Awake interval between two other events."""

    id: str
    start: int
    end: int
    type: Literal["awake"] = "awake"

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class NapEvent:
    """
    Nap interval, either predicted from policy or backed by a logged nap.

    actual_data is set for actual and in-progress naps, slot_index for
    predicted ones. conflict is reserved for a bedtime-overlap check and is
    never set by the generator.
    """

    id: str
    start: int
    end: int
    status: NapStatus
    actual_data: LoggedNap | None = None
    slot_index: int | None = None
    conflict: bool = False
    type: Literal["nap"] = "nap"

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start

    @property
    def is_predicted(self) -> bool:
        return self.status == "predicted"


@dataclass(frozen=True)
class BedtimeEvent:
    """
    Bedtime marker.

    Only start is meaningful; end gives renderers a fixed block to draw.
    """

    start: int
    end: int
    id: str = "bedtime"
    type: Literal["bedtime"] = "bedtime"


Event = WakeEvent | AwakeEvent | NapEvent | BedtimeEvent


# =============================================================================
# Stored state (owned by the calling application)
# =============================================================================


@dataclass(frozen=True)
class DayLog:
    """Everything recorded for one calendar day."""

    date: str  # "2025-01-12" ISO date
    actual_wake_time: str | None = None  # "HH:MM"
    actual_bedtime: str | None = None  # "HH:MM"
    sessions: tuple[LoggedNap, ...] = ()
    skipped_nap_slots: tuple[int, ...] = ()  # Predicted slot indices the user dismissed


@dataclass(frozen=True)
class BabyInfo:
    name: str | None = None
    birthday: str | None = None  # "YYYY-MM-DD"


@dataclass(frozen=True)
class Settings:
    """Household settings."""

    schedule: SchedulePolicy
    baby: BabyInfo = field(default_factory=BabyInfo)
    onboarding_complete: bool = False
