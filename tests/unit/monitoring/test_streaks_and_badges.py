"""Tests for training streaks and achievement badges."""

import datetime

import pytest

from app.monitoring.badges import (
    century_club_badge,
    compute_achievement_badges,
    consistent_badge,
    iron_streak_badge,
    pr_machine_badge,
    recovery_pro_badge,
    week_warrior_badge,
)
from app.monitoring.streaks import compute_training_streaks, longest_run
from app.schemas.achievements import TrainingStreaks
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.performance import PersonalRecord
from app.schemas.weekly import ComplianceRate
from app.schemas.wellness import WellnessCheckin

AS_OF = datetime.date(2025, 3, 31)


def _day(offset: int) -> datetime.date:
    return AS_OF - datetime.timedelta(days=offset)


def _load(offset: int) -> DailyLoadEntry:
    return DailyLoadEntry(athlete_id="a1", date=_day(offset), rpe=5, duration_minutes=60, training_load=300)


def _loads(*offsets: int) -> list[DailyLoadEntry]:
    return [_load(offset) for offset in offsets]


def _record(offset: int) -> PersonalRecord:
    return PersonalRecord(
        metric_id=f"m{offset}",
        pr_value=1.0,
        date_achieved=_day(offset),
        is_recent=offset < 7,
        best_score_method="highest",
    )


def _compliance(monthly_percent: int) -> ComplianceRate:
    return ComplianceRate(
        weekly_actual=0,
        weekly_target=5,
        weekly_percent=0,
        monthly_actual=0,
        monthly_target=21,
        monthly_percent=monthly_percent,
    )


# ======================================================================
# Training streaks
# ======================================================================


class TestComputeTrainingStreaks:
    def test_empty(self):
        streaks = compute_training_streaks([], as_of=AS_OF)
        assert streaks.current_streak == 0
        assert streaks.longest_streak == 0

    def test_current_and_longest(self):
        loads = _loads(0, 1, 2, 10, 11, 12, 13, 14)
        streaks = compute_training_streaks(loads, as_of=AS_OF)
        assert streaks.current_streak == 3
        assert streaks.longest_streak == 5

    def test_streak_may_end_yesterday(self):
        streaks = compute_training_streaks(_loads(1, 2), as_of=AS_OF)
        assert streaks.current_streak == 2

    def test_two_day_gap_breaks_current(self):
        streaks = compute_training_streaks(_loads(2, 3, 4), as_of=AS_OF)
        assert streaks.current_streak == 0
        assert streaks.longest_streak == 3

    def test_same_day_sessions_count_once(self):
        streaks = compute_training_streaks(_loads(0, 0, 1, 1), as_of=AS_OF)
        assert streaks.current_streak == 2
        assert streaks.longest_streak == 2

    def test_future_entries_ignored(self):
        streaks = compute_training_streaks(_loads(-1, -2, 0), as_of=AS_OF)
        assert streaks.current_streak == 1
        assert streaks.longest_streak == 1

    @pytest.mark.parametrize(
        "offsets",
        [(0,), (1, 2, 3), (0, 2, 4, 6), (0, 1, 5, 6, 7, 8), tuple(range(40))],
    )
    def test_longest_never_below_current(self, offsets):
        streaks = compute_training_streaks(_loads(*offsets), as_of=AS_OF)
        assert streaks.longest_streak >= streaks.current_streak

    def test_longest_run(self):
        days = [_day(offset) for offset in (9, 8, 7, 3, 2)]
        assert longest_run(days) == 3
        assert longest_run([]) == 0


# ======================================================================
# Individual badges
# ======================================================================


class TestStreakBadges:
    def test_week_warrior_earned(self):
        badge = week_warrior_badge(TrainingStreaks(current_streak=0, longest_streak=9), AS_OF)
        assert badge.id == "week-warrior"
        assert badge.earned is True
        assert badge.earned_date == AS_OF
        assert badge.progress == 7
        assert badge.target == 7

    def test_iron_streak_in_progress(self):
        badge = iron_streak_badge(TrainingStreaks(current_streak=12, longest_streak=12), AS_OF)
        assert badge.earned is False
        assert badge.earned_date is None
        assert badge.progress == 12
        assert badge.target == 30


class TestPRMachineBadge:
    def test_three_recent_records(self):
        badge = pr_machine_badge([_record(1), _record(10), _record(29)], AS_OF)
        assert badge.earned is True
        assert badge.progress == 3

    def test_old_records_do_not_count(self):
        badge = pr_machine_badge([_record(1), _record(10), _record(30)], AS_OF)
        assert badge.earned is False
        assert badge.progress == 2


class TestRecoveryProBadge:
    @staticmethod
    def _checkins(scores: list[float]) -> list[WellnessCheckin]:
        return [
            WellnessCheckin(athlete_id="a1", date=_day(len(scores) - i), readiness_score=score)
            for i, score in enumerate(scores)
        ]

    def test_fourteen_high_checkins(self):
        badge = recovery_pro_badge(self._checkins([85.0] * 14), AS_OF)
        assert badge.earned is True
        assert badge.progress == 14

    def test_run_broken(self):
        badge = recovery_pro_badge(self._checkins([85.0] * 10 + [80.0] + [90.0] * 6), AS_OF)
        assert badge.earned is False
        assert badge.progress == 10


class TestConsistentBadge:
    def test_ninety_percent(self):
        badge = consistent_badge(_compliance(95), AS_OF)
        assert badge.earned is True
        assert badge.progress == 90

    def test_below(self):
        badge = consistent_badge(_compliance(89), AS_OF)
        assert badge.earned is False
        assert badge.progress == 89


class TestCenturyClubBadge:
    def test_hundred_sessions(self):
        badge = century_club_badge(_loads(*range(100)), AS_OF)
        assert badge.earned is True
        assert badge.progress == 100

    def test_progress(self):
        badge = century_club_badge(_loads(*range(42)), AS_OF)
        assert badge.earned is False
        assert badge.progress == 42


# ======================================================================
# compute_achievement_badges
# ======================================================================


class TestComputeAchievementBadges:
    def test_all_badges_present(self):
        badges = compute_achievement_badges(_loads(*range(8)), [], [], as_of=AS_OF)
        assert [b.id for b in badges] == [
            "week-warrior",
            "iron-streak",
            "pr-machine",
            "recovery-pro",
            "consistent",
            "century-club",
        ]
        earned = {b.id for b in badges if b.earned}
        assert earned == {"week-warrior"}

    def test_progress_capped(self):
        badges = compute_achievement_badges(_loads(*range(120)), as_of=AS_OF)
        assert all(b.progress <= b.target for b in badges)
        assert {b.id for b in badges if b.earned} == {"week-warrior", "iron-streak", "consistent", "century-club"}
