"""Tests for the week-over-week comparator and compliance rate."""

import datetime

import pytest

from app.monitoring.weekly import (
    compute_compliance_rate,
    compute_week_over_week,
    percent_change,
)
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.thresholds import ThresholdSettings
from app.schemas.wellness import WellnessCheckin

AS_OF = datetime.date(2025, 3, 31)


def _day(offset: int) -> datetime.date:
    return AS_OF - datetime.timedelta(days=offset)


def _load(offset: int, training_load: float = 400.0, rpe: int = 6) -> DailyLoadEntry:
    return DailyLoadEntry(
        athlete_id="a1",
        date=_day(offset),
        rpe=rpe,
        duration_minutes=training_load / rpe,
        training_load=training_load,
    )


def _checkin(offset: int, readiness: float) -> WellnessCheckin:
    return WellnessCheckin(athlete_id="a1", date=_day(offset), readiness_score=readiness)


# ======================================================================
# percent_change
# ======================================================================


class TestPercentChange:
    @pytest.mark.parametrize(
        "current, previous, expected",
        [
            (150, 100, 50),
            (50, 100, -50),
            (100, 100, 0),
            (7.0, 6.0, 17),
            (100, 0, None),
            (0, 0, None),
        ],
    )
    def test_values(self, current, previous, expected):
        assert percent_change(current, previous) == expected


# ======================================================================
# compute_week_over_week
# ======================================================================


class TestComputeWeekOverWeek:
    def test_load_spike(self):
        loads = [
            _load(0, rpe=6), _load(2, rpe=7), _load(6, rpe=8),
            _load(7, rpe=6), _load(13, rpe=6),
            _load(14, rpe=10),
        ]
        wow = compute_week_over_week(loads, [], as_of=AS_OF)

        assert wow.current_week.sessions == 3
        assert wow.current_week.total_load == 1200
        assert wow.current_week.avg_rpe == 7.0
        assert wow.previous_week.sessions == 2
        assert wow.previous_week.total_load == 800
        assert wow.changes.load_percent == 50
        assert wow.changes.sessions_percent == 50
        assert wow.changes.rpe_percent == 17
        assert wow.load_spike_alert is True

    def test_no_previous_week_is_null_not_error(self):
        wow = compute_week_over_week([_load(0), _load(1)], [], as_of=AS_OF)

        assert wow.previous_week.total_load == 0
        assert wow.previous_week.avg_rpe == 0.0
        assert wow.changes.load_percent is None
        assert wow.changes.sessions_percent is None
        assert wow.changes.rpe_percent is None
        assert wow.load_spike_alert is False

    def test_increase_equal_to_threshold_is_not_a_spike(self):
        loads = [_load(0, 1300.0), _load(8, 1000.0)]
        wow = compute_week_over_week(loads, [], as_of=AS_OF)
        assert wow.changes.load_percent == 30
        assert wow.load_spike_alert is False

    def test_custom_spike_threshold(self):
        loads = [_load(0, 1500.0), _load(8, 1000.0)]
        assert compute_week_over_week(loads, [], as_of=AS_OF).load_spike_alert is True
        cfg = ThresholdSettings(load_spike_percent=60.0)
        assert compute_week_over_week(loads, [], as_of=AS_OF, thresholds=cfg).load_spike_alert is False

    def test_readiness_averages(self):
        checkins = [_checkin(0, 70.0), _checkin(3, 80.0), _checkin(9, 60.0)]
        wow = compute_week_over_week([], checkins, as_of=AS_OF)

        assert wow.current_week.avg_readiness == 75.0
        assert wow.previous_week.avg_readiness == 60.0
        assert wow.changes.readiness_percent == 25

    def test_missing_readiness_is_none_not_zero(self):
        wow = compute_week_over_week([_load(0)], [_checkin(10, 50.0)], as_of=AS_OF)
        assert wow.current_week.avg_readiness is None
        assert wow.previous_week.avg_readiness == 50.0
        assert wow.changes.readiness_percent is None

    def test_future_entries_ignored(self):
        wow = compute_week_over_week([_load(-1), _load(0)], [], as_of=AS_OF)
        assert wow.current_week.sessions == 1


# ======================================================================
# compute_compliance_rate
# ======================================================================


class TestComputeComplianceRate:
    def test_three_of_four(self):
        rate = compute_compliance_rate([_load(0), _load(2), _load(4)], as_of=AS_OF, sessions_per_week=4)
        assert rate.weekly_actual == 3
        assert rate.weekly_target == 4
        assert rate.weekly_percent == 75
        assert rate.monthly_target == 17

    def test_default_target(self):
        rate = compute_compliance_rate([_load(0)], as_of=AS_OF)
        assert rate.weekly_target == 5
        assert rate.weekly_percent == 20
        assert rate.monthly_target == 21

    def test_over_compliance_not_capped(self):
        loads = [_load(offset) for offset in range(7)]
        rate = compute_compliance_rate(loads, as_of=AS_OF)
        assert rate.weekly_percent == 140

    def test_window_edges(self):
        loads = [_load(6), _load(7), _load(29), _load(30)]
        rate = compute_compliance_rate(loads, as_of=AS_OF)
        assert rate.weekly_actual == 1
        assert rate.monthly_actual == 3

    def test_monthly_percent(self):
        loads = [_load(offset) for offset in range(0, 30, 2)]
        rate = compute_compliance_rate(loads, as_of=AS_OF)
        assert rate.monthly_actual == 15
        assert rate.monthly_percent == round(15 / 21 * 100)

    def test_zero_target_is_zero_percent(self):
        rate = compute_compliance_rate([_load(0)], as_of=AS_OF, sessions_per_week=0)
        assert rate.weekly_percent == 0
        assert rate.monthly_percent == 0

    def test_empty(self):
        rate = compute_compliance_rate([], as_of=AS_OF)
        assert rate.weekly_actual == 0
        assert rate.monthly_percent == 0
