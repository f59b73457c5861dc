"""
Day log updates made on behalf of the user.

These are the write side of a day: recording wake time and bedtime,
adding, editing and deleting naps, and dismissing predicted slots. Each
function returns a new DayLog; the input is never modified. Nap ids are
created here, not by the schedule generator.
"""

import logging
from dataclasses import replace
from uuid import uuid4

from .errors import InvalidNapError
from .time_math import parse_minutes
from .types import DayLog, LoggedNap

logger = logging.getLogger(__name__)

EDITABLE_NAP_FIELDS = {"start_time", "end_time", "notes"}


def generate_nap_id() -> str:
    """Unique id for a newly logged nap."""
    return f"nap-{uuid4().hex}"


def create_empty_day_log(date: str) -> DayLog:
    return DayLog(date=date)


def set_wake_time(day_log: DayLog, wake_time: str) -> DayLog:
    parse_minutes(wake_time)
    return replace(day_log, actual_wake_time=wake_time)


def set_bedtime(day_log: DayLog, bedtime: str) -> DayLog:
    parse_minutes(bedtime)
    return replace(day_log, actual_bedtime=bedtime)


def _check_nap_times(start_time: str, end_time: str | None) -> None:
    start = parse_minutes(start_time)
    if end_time is not None and parse_minutes(end_time) <= start:
        raise InvalidNapError(f"Nap must end after it starts ({start_time}-{end_time})")


def add_nap(
    day_log: DayLog, start_time: str, end_time: str | None = None, notes: str = ""
) -> tuple[DayLog, str]:
    """
    Log a new nap.

    Leave end_time unset for a nap that is still in progress.

    Returns:
        Tuple of (updated day log, new nap id)
    """
    _check_nap_times(start_time, end_time)
    nap = LoggedNap(id=generate_nap_id(), start_time=start_time, end_time=end_time, notes=notes)
    logger.debug("Logged nap %s on %s", nap.id, day_log.date)
    return replace(day_log, sessions=day_log.sessions + (nap,)), nap.id


def update_nap(day_log: DayLog, nap_id: str, **changes) -> DayLog:
    """
    Replace fields of an existing nap (start_time, end_time, notes).

    Raises:
        InvalidNapError: unknown nap id or field, or the edit leaves the nap
            ending before it starts
    """
    if "id" in changes:
        raise InvalidNapError("Nap ids cannot be changed")
    unknown = set(changes) - EDITABLE_NAP_FIELDS
    if unknown:
        raise InvalidNapError(f"Unknown nap fields: {', '.join(sorted(unknown))}")

    sessions = []
    found = False
    for nap in day_log.sessions:
        if nap.id == nap_id:
            nap = replace(nap, **changes)
            _check_nap_times(nap.start_time, nap.end_time)
            found = True
        sessions.append(nap)

    if not found:
        raise InvalidNapError(f"No nap with id {nap_id!r} on {day_log.date}")
    return replace(day_log, sessions=tuple(sessions))


def delete_nap(day_log: DayLog, nap_id: str) -> DayLog:
    """Remove a nap; unknown ids are ignored."""
    return replace(
        day_log, sessions=tuple(nap for nap in day_log.sessions if nap.id != nap_id)
    )


def skip_nap_slot(day_log: DayLog, slot_index: int) -> DayLog:
    """Dismiss a predicted nap slot. Skipping twice is a no-op."""
    if slot_index < 0:
        raise ValueError(f"Slot index must be non-negative, got {slot_index}")
    if slot_index in day_log.skipped_nap_slots:
        return day_log
    return replace(day_log, skipped_nap_slots=day_log.skipped_nap_slots + (slot_index,))


def unskip_nap_slot(day_log: DayLog, slot_index: int) -> DayLog:
    return replace(
        day_log,
        skipped_nap_slots=tuple(s for s in day_log.skipped_nap_slots if s != slot_index),
    )
