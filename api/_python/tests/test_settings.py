"""
Tests for household settings.
"""

import pytest

from naptime.errors import InvalidPolicyError, TimeParseError
from naptime.settings import (
    complete_onboarding,
    default_settings,
    update_baby_info,
    update_schedule_settings,
)


class TestDefaults:
    def test_default_schedule(self):
        schedule = default_settings().schedule
        assert schedule.default_wake_window == 1.5
        assert schedule.default_nap_duration == 0.5
        assert schedule.typical_wake_time == "06:30"
        assert schedule.bedtime == "19:00"

    def test_not_onboarded(self):
        settings = default_settings()
        assert settings.onboarding_complete is False
        assert settings.baby.name is None


class TestScheduleUpdates:
    """Validated schedule edits."""

    def test_update_wake_window(self):
        settings = update_schedule_settings(default_settings(), default_wake_window=2.25)
        assert settings.schedule.default_wake_window == 2.25
        assert settings.schedule.bedtime == "19:00"

    def test_original_is_unchanged(self):
        settings = default_settings()
        update_schedule_settings(settings, bedtime="19:30")
        assert settings.schedule.bedtime == "19:00"

    @pytest.mark.parametrize("hours", [0.25, 6.5, 0])
    def test_wake_window_out_of_range(self, hours):
        with pytest.raises(InvalidPolicyError):
            update_schedule_settings(default_settings(), default_wake_window=hours)

    def test_range_limits_are_inclusive(self):
        settings = update_schedule_settings(
            default_settings(), default_wake_window=6, default_nap_duration=3
        )
        assert settings.schedule.default_nap_duration == 3

        settings = update_schedule_settings(
            default_settings(), default_wake_window=0.5, default_nap_duration=0.25
        )
        assert settings.schedule.default_nap_duration == 0.25

    @pytest.mark.parametrize("hours", [10 / 60, 3.5])
    def test_nap_duration_out_of_range(self, hours):
        with pytest.raises(InvalidPolicyError):
            update_schedule_settings(default_settings(), default_nap_duration=hours)

    def test_bad_bedtime(self):
        with pytest.raises(TimeParseError):
            update_schedule_settings(default_settings(), bedtime="late")

    def test_unknown_field(self):
        with pytest.raises(TypeError):
            update_schedule_settings(default_settings(), nap_count=3)


class TestProfile:
    def test_update_baby_info(self):
        settings = update_baby_info(default_settings(), name="Ada", birthday="2026-04-02")
        assert settings.baby.name == "Ada"
        assert settings.baby.birthday == "2026-04-02"

    def test_complete_onboarding(self):
        assert complete_onboarding(default_settings()).onboarding_complete is True
