"""
Baby age from birthday.
"""

from datetime import date


def calculate_age_in_months(birthday: str | None, today: date | None = None) -> int | None:
    """
    Whole months since birthday ("YYYY-MM-DD").

    A month only counts once its day-of-month has been reached. Returns None
    without a birthday and never goes below zero.
    """
    if not birthday:
        return None
    if today is None:
        today = date.today()

    born = date.fromisoformat(birthday)
    months = (today.year - born.year) * 12 + (today.month - born.month)
    if today.day < born.day:
        months -= 1
    return max(0, months)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_age(birthday: str | None, today: date | None = None) -> str:
    """Human-readable age, e.g. "4 months", "1 year", "1 year 2 months"."""
    months = calculate_age_in_months(birthday, today)
    if months is None:
        return ""
    if months < 12:
        return _plural(months, "month")

    years, remaining = divmod(months, 12)
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(remaining, 'month')}"
