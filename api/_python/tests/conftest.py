"""
Pytest fixtures for nap schedule tests.
"""

import pytest

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from naptime.scheduler import DayScheduleGenerator
from naptime.types import DayLog, LoggedNap, SchedulePolicy


@pytest.fixture
def policy():
    """1.5h wake windows, 30 min naps, 19:00 bedtime."""
    return SchedulePolicy(
        default_wake_window=1.5,
        default_nap_duration=0.5,
        bedtime="19:00",
    )


@pytest.fixture
def generator(policy):
    """DayScheduleGenerator for the standard policy."""
    return DayScheduleGenerator(policy)


@pytest.fixture
def early_logged_nap():
    """Nap logged 10 minutes before the first predicted nap (07:30 for a 06:00 wake)."""
    return LoggedNap(id="nap-early", start_time="07:20", end_time="08:00")


@pytest.fixture
def late_logged_nap():
    """Nap logged well past the first predicted nap."""
    return LoggedNap(id="nap-late", start_time="09:00", end_time="09:45")


@pytest.fixture
def in_progress_nap():
    """Afternoon nap with no end time yet."""
    return LoggedNap(id="nap-open", start_time="13:00")


@pytest.fixture
def busy_day_log():
    """Day with a recorded wake time, two naps and a skipped slot."""
    return DayLog(
        date="2026-10-19",
        actual_wake_time="06:15",
        actual_bedtime="19:05",
        sessions=(
            LoggedNap(id="nap-1", start_time="07:40", end_time="08:25"),
            LoggedNap(id="nap-2", start_time="10:05", end_time="11:20"),
        ),
        skipped_nap_slots=(3,),
    )
