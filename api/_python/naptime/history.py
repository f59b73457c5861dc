"""
Recent-history statistics across logged days.

Averages are computed over whatever was recorded; a statistic with no
underlying data is None rather than zero.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from statistics import mean, pstdev

from .time_math import parse_minutes
from .types import DayLog

HISTORY_WINDOW_DAYS = 30


@dataclass(frozen=True)
class HistoryStats:
    """Summary of recent days (times in minutes since midnight)."""

    avg_wake_time: float | None
    wake_time_stddev: float | None  # Population std dev, needs 2+ days
    avg_naps_per_day: float | None
    avg_total_nap_minutes: float | None  # Over days with completed naps
    avg_bedtime: float | None
    bedtime_stddev: float | None


def _has_data(day_log: DayLog) -> bool:
    return bool(day_log.actual_wake_time) or len(day_log.sessions) > 0


def get_history_days(
    days: dict[str, DayLog], today: date, window_days: int = HISTORY_WINDOW_DAYS
) -> list[DayLog]:
    """
    Logged days within the window ending today, newest first.

    Days with neither a wake time nor any naps are left out.
    """
    result = []
    for offset in range(window_days):
        day_log = days.get((today - timedelta(days=offset)).isoformat())
        if day_log is not None and _has_data(day_log):
            result.append(day_log)
    return result


def total_nap_minutes(day_log: DayLog) -> int:
    """Total length of the day's completed naps."""
    return sum(
        parse_minutes(nap.end_time) - parse_minutes(nap.start_time)
        for nap in day_log.sessions
        if nap.end_time
    )


def _mean_and_spread(values: list[int]) -> tuple[float | None, float | None]:
    if not values:
        return None, None
    spread = pstdev(values) if len(values) > 1 else None
    return mean(values), spread


def compute_history_stats(day_logs: list[DayLog]) -> HistoryStats:
    if not day_logs:
        return HistoryStats(None, None, None, None, None, None)

    wake_times = [parse_minutes(d.actual_wake_time) for d in day_logs if d.actual_wake_time]
    bedtimes = [parse_minutes(d.actual_bedtime) for d in day_logs if d.actual_bedtime]
    nap_totals = [t for t in (total_nap_minutes(d) for d in day_logs) if t > 0]

    avg_wake, wake_spread = _mean_and_spread(wake_times)
    avg_bed, bed_spread = _mean_and_spread(bedtimes)

    return HistoryStats(
        avg_wake_time=avg_wake,
        wake_time_stddev=wake_spread,
        avg_naps_per_day=mean(len(d.sessions) for d in day_logs),
        avg_total_nap_minutes=mean(nap_totals) if nap_totals else None,
        avg_bedtime=avg_bed,
        bedtime_stddev=bed_spread,
    )


def group_days_by_week(day_logs: list[DayLog], today: date) -> dict[str, list[DayLog]]:
    """Bucket days into "Today", "This Week", "Last Week" and "Earlier"."""
    groups = defaultdict(list)
    for day_log in day_logs:
        age_days = (today - date.fromisoformat(day_log.date)).days
        if age_days == 0:
            key = "Today"
        elif age_days < 7:
            key = "This Week"
        elif age_days < 14:
            key = "Last Week"
        else:
            key = "Earlier"
        groups[key].append(day_log)
    return dict(groups)
