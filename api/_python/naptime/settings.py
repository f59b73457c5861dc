"""
Household settings: defaults and validated updates.
"""

from dataclasses import replace

from .errors import InvalidPolicyError
from .scheduler import validate_policy
from .time_math import hours_to_minutes
from .types import SchedulePolicy, Settings

# Accepted settings ranges
MIN_WAKE_WINDOW_HOURS = 0.5
MAX_WAKE_WINDOW_HOURS = 6.0
MIN_NAP_DURATION_MINUTES = 15
MAX_NAP_DURATION_MINUTES = 180

DEFAULT_POLICY = SchedulePolicy(
    default_wake_window=1.5,
    default_nap_duration=0.5,
    typical_wake_time="06:30",
    bedtime="19:00",
)


def default_settings() -> Settings:
    """Settings for a household that has not been through onboarding."""
    return Settings(schedule=DEFAULT_POLICY)


def update_schedule_settings(settings: Settings, **changes) -> Settings:
    """
    Return settings with schedule fields replaced.

    Wake window must stay within 0.5-6 hours and nap duration within
    15-180 minutes.

    Raises:
        InvalidPolicyError: value outside the accepted range
        TimeParseError: malformed bedtime or typical wake time
    """
    schedule = replace(settings.schedule, **changes)
    validate_policy(schedule)

    if not MIN_WAKE_WINDOW_HOURS <= schedule.default_wake_window <= MAX_WAKE_WINDOW_HOURS:
        raise InvalidPolicyError(
            f"Wake window must be between {MIN_WAKE_WINDOW_HOURS} and "
            f"{MAX_WAKE_WINDOW_HOURS} hours, got {schedule.default_wake_window}"
        )

    nap_minutes = hours_to_minutes(schedule.default_nap_duration)
    if not MIN_NAP_DURATION_MINUTES <= nap_minutes <= MAX_NAP_DURATION_MINUTES:
        raise InvalidPolicyError(
            f"Nap duration must be between {MIN_NAP_DURATION_MINUTES} and "
            f"{MAX_NAP_DURATION_MINUTES} minutes, got {nap_minutes}"
        )

    return replace(settings, schedule=schedule)


def update_baby_info(settings: Settings, **changes) -> Settings:
    return replace(settings, baby=replace(settings.baby, **changes))


def complete_onboarding(settings: Settings) -> Settings:
    return replace(settings, onboarding_complete=True)
