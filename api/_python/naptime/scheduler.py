"""
Daily nap schedule generation.

Merges the naps logged for a day with naps predicted from the household's
wake-window policy:

1. The day starts at wake time.
2. Each step predicts the next nap one wake window after the current time.
3. A logged nap that starts no more than 30 minutes after the prediction is
   used instead of it (real data beats policy).
4. Prediction stops once a nap plus the wake window after it would run past
   bedtime.
5. Awake intervals fill the time between naps, and a bedtime marker closes
   the day.

The generator is a pure function of its inputs: it keeps no state between
calls, never assigns nap ids and never persists anything.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import InvalidNapError, InvalidPolicyError
from .time_math import MINUTES_PER_DAY, format_minutes, hours_to_minutes, parse_minutes
from .types import (
    AwakeEvent,
    BedtimeEvent,
    DayLog,
    Event,
    LoggedNap,
    NapEvent,
    SchedulePolicy,
    WakeEvent,
)

logger = logging.getLogger(__name__)

# Scheduler thresholds
LOGGED_NAP_TOLERANCE_MINUTES = 30  # Logged nap wins if it starts at most this late
MAX_SLOT_INDEX = 10  # Backstop against policies that would loop indefinitely
BEDTIME_BLOCK_MINUTES = 60  # Display height of the bedtime marker


@dataclass(frozen=True)
class _ObservedNap:
    """A logged nap with its times resolved to minutes."""

    start: int
    end: int | None
    nap: LoggedNap


def validate_policy(policy: SchedulePolicy) -> None:
    """
    Reject policies the generator cannot work with.

    Raises:
        InvalidPolicyError: duration not a positive number of at least a minute
        TimeParseError: bedtime or typical wake time is malformed
    """
    for name in ("default_wake_window", "default_nap_duration"):
        value = getattr(policy, name)
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
            or hours_to_minutes(value) < 1
        ):
            raise InvalidPolicyError(
                f"{name} must be a positive number of hours, got {value!r}"
            )

    parse_minutes(policy.bedtime)
    parse_minutes(policy.typical_wake_time)


def _resolve_naps(logged_naps: Iterable[LoggedNap]) -> list[_ObservedNap]:
    """Parse and check logged naps, sorted by start time (stable)."""
    observed = []
    seen_ids = set()

    for nap in logged_naps:
        if nap.id in seen_ids:
            raise InvalidNapError(f"Duplicate nap id: {nap.id!r}")
        seen_ids.add(nap.id)

        start = parse_minutes(nap.start_time)
        end = None
        if nap.end_time is not None:
            end = parse_minutes(nap.end_time)
            if end <= start:
                raise InvalidNapError(
                    f"Nap {nap.id!r} ends at {nap.end_time} before it starts at {nap.start_time}"
                )
        observed.append(_ObservedNap(start=start, end=end, nap=nap))

    observed.sort(key=lambda n: n.start)
    return observed


class DayScheduleGenerator:
    """
    Nap schedule generator for one household policy.

    The policy is validated once on construction; generate() can then be
    called for any number of days.
    """

    def __init__(self, policy: SchedulePolicy):
        validate_policy(policy)
        self.policy = policy
        self.wake_window = hours_to_minutes(policy.default_wake_window)
        self.nap_duration = hours_to_minutes(policy.default_nap_duration)
        self.bedtime = parse_minutes(policy.bedtime)

    def generate(
        self,
        wake_time: str,
        logged_naps: Iterable[LoggedNap] = (),
        skipped_slots: Iterable[int] = (),
    ) -> list[Event]:
        """
        Generate the day's timeline.

        Args:
            wake_time: "HH:MM" the day started
            logged_naps: Naps recorded for the day, in any order
            skipped_slots: Predicted slot indices the user dismissed

        Returns:
            Events in chronological order: wake, alternating awake/nap
            intervals, and a single closing bedtime event
        """
        wake = parse_minutes(wake_time)
        if wake >= self.bedtime:
            raise InvalidPolicyError(
                f"Wake time {wake_time} must be before bedtime {self.policy.bedtime}"
            )

        remaining = _resolve_naps(logged_naps)
        skipped = set(skipped_slots)

        events: list[Event] = [WakeEvent(time=wake)]
        current = wake
        slot_index = 0

        while True:
            predicted_start = current + self.wake_window

            # Earliest logged nap not already behind us
            match = next(
                (i for i, observed in enumerate(remaining) if observed.start >= current),
                None,
            )
            if (
                match is not None
                and remaining[match].start <= predicted_start + LOGGED_NAP_TOLERANCE_MINUTES
            ):
                observed = remaining.pop(match)
                events.extend(self._logged_nap_events(observed, current, slot_index))
                current = events[-1].end
                slot_index += 1
                continue

            predicted_end = predicted_start + self.nap_duration

            # No room for this nap plus another wake window before bedtime
            if predicted_end + self.wake_window > self.bedtime:
                logger.debug(
                    "Stopping at slot %d: nap ending %s leaves no wake window before bedtime",
                    slot_index,
                    format_minutes(predicted_end),
                )
                break

            if slot_index in skipped:
                logger.debug("Slot %d skipped", slot_index)
                events.append(
                    AwakeEvent(id=f"awake-{slot_index}", start=current, end=predicted_end)
                )
            else:
                events.append(
                    AwakeEvent(id=f"awake-{slot_index}", start=current, end=predicted_start)
                )
                events.append(
                    NapEvent(
                        id=f"predicted-nap-{slot_index}",
                        start=predicted_start,
                        end=predicted_end,
                        status="predicted",
                        slot_index=slot_index,
                    )
                )

            current = predicted_end
            slot_index += 1

            if slot_index > MAX_SLOT_INDEX:
                logger.warning(
                    "Nap prediction hit the %d slot cap (wake window %d min, nap %d min)",
                    MAX_SLOT_INDEX,
                    self.wake_window,
                    self.nap_duration,
                )
                break

        if current < self.bedtime:
            events.append(AwakeEvent(id="awake-final", start=current, end=self.bedtime))

        events.append(
            BedtimeEvent(start=self.bedtime, end=self.bedtime + BEDTIME_BLOCK_MINUTES)
        )
        return events

    def _logged_nap_events(
        self, observed: _ObservedNap, current: int, slot_index: int
    ) -> list[Event]:
        """Awake gap (if any) followed by the logged nap itself."""
        events: list[Event] = []
        if observed.start > current:
            events.append(
                AwakeEvent(id=f"awake-{slot_index}", start=current, end=observed.start)
            )

        if observed.end is None:
            end = observed.start + self.nap_duration
            status = "in-progress"
            if end > MINUTES_PER_DAY:
                raise InvalidNapError(
                    f"In-progress nap {observed.nap.id!r} would run past midnight "
                    f"(started {observed.nap.start_time}, {self.nap_duration} min default)"
                )
        else:
            end = observed.end
            status = "actual"

        logger.debug(
            "Slot %d uses logged nap %s (%s)", slot_index, observed.nap.id, status
        )
        events.append(
            NapEvent(
                id=observed.nap.id,
                start=observed.start,
                end=end,
                status=status,
                actual_data=observed.nap,
            )
        )
        return events


def generate_day_schedule(
    wake_time: str,
    policy: SchedulePolicy,
    logged_naps: Iterable[LoggedNap] = (),
    skipped_slots: Iterable[int] = (),
) -> list[Event]:
    """Convenience wrapper around DayScheduleGenerator.generate()."""
    return DayScheduleGenerator(policy).generate(wake_time, logged_naps, skipped_slots)


def generate_for_day(day_log: DayLog, policy: SchedulePolicy) -> list[Event]:
    """
    Generate the timeline for a stored day.

    Falls back to the policy's typical wake time when no wake time was
    recorded for the day.
    """
    wake_time = day_log.actual_wake_time or policy.typical_wake_time
    return generate_day_schedule(
        wake_time, policy, day_log.sessions, day_log.skipped_nap_slots
    )


# =============================================================================
# Event queries
# =============================================================================


def is_time_in_event(minutes: int, event: Event) -> bool:
    """True if minutes falls inside an interval event (never for wake)."""
    if isinstance(event, WakeEvent):
        return False
    return event.start <= minutes < event.end


def get_current_event(events: list[Event], minutes: int) -> Event | None:
    """First event containing the given time, or None."""
    return next((event for event in events if is_time_in_event(minutes, event)), None)


def find_ordering_violations(events: list[Event]) -> list[tuple[str, str]]:
    """
    Find events that start before the previous event has ended.

    A schedule built from consistent inputs has none. A logged nap running
    past bedtime shows up as (nap id, "bedtime").

    Returns:
        List of (previous id, following id) pairs
    """
    violations = []
    for previous, following in zip(events, events[1:]):
        previous_end = previous.time if isinstance(previous, WakeEvent) else previous.end
        following_start = (
            following.time if isinstance(following, WakeEvent) else following.start
        )
        if following_start < previous_end:
            violations.append((previous.id, following.id))
    return violations
