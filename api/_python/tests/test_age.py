"""
Tests for baby age helpers.
"""

from datetime import date

import pytest
import time_machine

from naptime.age import calculate_age_in_months, format_age

TODAY = date(2026, 10, 19)


class TestAgeInMonths:
    def test_month_not_reached_yet(self):
        """A month counts only once its day-of-month is reached."""
        assert calculate_age_in_months("2025-06-20", TODAY) == 15
        assert calculate_age_in_months("2025-06-19", TODAY) == 16

    def test_future_birthday_is_zero(self):
        assert calculate_age_in_months("2026-12-01", TODAY) == 0

    def test_no_birthday(self):
        assert calculate_age_in_months(None, TODAY) is None
        assert calculate_age_in_months("", TODAY) is None

    @time_machine.travel("2026-10-19T12:00:00Z", tick=False)
    def test_defaults_to_today(self):
        assert calculate_age_in_months("2026-06-19") == 4


class TestFormatAge:
    @pytest.mark.parametrize(
        "birthday,expected",
        [
            ("2026-10-01", "0 months"),
            ("2026-09-19", "1 month"),
            ("2026-06-19", "4 months"),
            ("2025-10-19", "1 year"),
            ("2025-09-19", "1 year 1 month"),
            ("2025-06-20", "1 year 3 months"),
            ("2024-08-19", "2 years 2 months"),
        ],
    )
    def test_format_age(self, birthday, expected):
        assert format_age(birthday, TODAY) == expected

    def test_no_birthday(self):
        assert format_age(None, TODAY) == ""
