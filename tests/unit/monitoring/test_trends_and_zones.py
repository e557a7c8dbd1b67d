"""Tests for load trend aggregation and load zone classification."""

import datetime

import pytest

from app.monitoring.trends import compute_athlete_load_trends, compute_load_trends, sum_load_by_day
from app.monitoring.zones import classify_load, classify_load_series, compute_load_band, compute_load_zones
from app.schemas.daily_load import DailyLoadEntry

AS_OF = datetime.date(2025, 3, 31)
ZONES = {"rest", "low", "optimal", "high", "danger"}


def _day(offset: int) -> datetime.date:
    return AS_OF - datetime.timedelta(days=offset)


def _load(offset: int, training_load: float, athlete_id: str = "a1", rpe: int = 5) -> DailyLoadEntry:
    return DailyLoadEntry(
        athlete_id=athlete_id,
        athlete_name=f"Athlete {athlete_id}",
        date=_day(offset),
        rpe=rpe,
        duration_minutes=training_load / rpe,
        training_load=training_load,
    )


def _series(loads: list[float]) -> list[tuple[datetime.date, float]]:
    start = AS_OF - datetime.timedelta(days=len(loads) - 1)
    return [(start + datetime.timedelta(days=i), load) for i, load in enumerate(loads)]


# ======================================================================
# Load trends
# ======================================================================


class TestComputeLoadTrends:
    def test_team_points_average_same_day(self):
        loads = [_load(1, 200.0, "a1", rpe=5), _load(1, 300.0, "a2", rpe=6), _load(0, 400.0, "a1")]
        points = compute_load_trends(loads, as_of=AS_OF, days=7)

        assert [p.date for p in points] == [_day(1), _day(0)]
        assert points[0].training_load == 250
        assert points[0].rpe == 5.5
        assert points[1].training_load == 400

    def test_window_includes_start_day(self):
        loads = [_load(7, 100.0), _load(8, 100.0)]
        points = compute_load_trends(loads, as_of=AS_OF, days=7)
        assert [p.date for p in points] == [_day(7)]

    def test_default_days_from_thresholds(self):
        loads = [_load(30, 100.0), _load(31, 100.0)]
        assert len(compute_load_trends(loads, as_of=AS_OF)) == 1

    def test_empty_window_returns_empty_list(self):
        assert compute_load_trends([_load(60, 100.0)], as_of=AS_OF, days=7) == []
        assert compute_load_trends([], as_of=AS_OF) == []

    def test_athlete_points_one_per_session(self):
        loads = [_load(0, 300.0), _load(2, 200.0), _load(2, 100.0)]
        points = compute_athlete_load_trends(loads, as_of=AS_OF, days=7)

        assert len(points) == 3
        assert [p.date for p in points] == [_day(2), _day(2), _day(0)]
        assert points[-1].athlete_name == "Athlete a1"

    def test_sum_load_by_day(self):
        totals = sum_load_by_day([_load(0, 100.0), _load(0, 250.0), _load(1, 50.0)])
        assert totals == {_day(0): 350.0, _day(1): 50.0}


# ======================================================================
# Band and classification
# ======================================================================


class TestClassifyLoad:
    def test_band_ignores_rest_days(self):
        band = compute_load_band([0.0, 100.0, 100.0, 100.0, 0.0])
        assert band.mean == 100.0
        assert band.stdev == 0.0

    def test_band_needs_three_training_days(self):
        assert compute_load_band([0.0, 100.0, 200.0]) is None

    def test_zero_is_rest_even_without_band(self):
        assert classify_load(0.0, None) == "rest"
        assert classify_load(250.0, None) == "optimal"

    def test_spike_day_is_danger(self):
        """Nine days at 100 then 900: mean 180, sd 240, 900 > 660."""
        result = classify_load_series(_series([100.0] * 9 + [900.0]))

        assert result.days[-1].zone == "danger"
        assert all(day.zone == "optimal" for day in result.days[:-1])
        assert result.danger_streak == 1

    def test_danger_streak_counts_trailing_run(self):
        result = classify_load_series(_series([100.0] * 12 + [1000.0, 1000.0]))
        assert [d.zone for d in result.days[-2:]] == ["danger", "danger"]
        assert result.danger_streak == 2

    def test_streak_zero_when_last_day_not_danger(self):
        result = classify_load_series(_series([100.0] * 9 + [900.0, 0.0]))
        assert result.days[-1].zone == "rest"
        assert result.danger_streak == 0

    def test_low_zone(self):
        result = classify_load_series(_series([500.0, 500.0, 500.0, 500.0, 100.0]))
        assert result.days[-1].zone == "low"
        assert result.days[0].zone == "optimal"

    def test_high_zone(self):
        result = classify_load_series(_series([100.0, 200.0, 100.0, 200.0, 100.0, 200.0, 260.0]))
        assert result.days[-1].zone == "high"

    def test_zero_variance_all_optimal(self):
        result = classify_load_series(_series([300.0] * 6 + [0.0]))
        assert [d.zone for d in result.days] == ["optimal"] * 6 + ["rest"]
        assert result.danger_streak == 0

    def test_window_limits_band(self):
        """Only the trailing window feeds the band; older days are still classified."""
        series = _series([5000.0] * 5 + [100.0, 100.0, 100.0])
        result = classify_load_series(series, window=3)
        assert [d.zone for d in result.days[-3:]] == ["optimal"] * 3
        assert result.days[0].zone == "optimal"

    def test_empty_series(self):
        result = classify_load_series([])
        assert result.days == []
        assert result.danger_streak == 0


class TestComputeLoadZones:
    def test_one_entry_per_calendar_day(self):
        loads = [_load(0, 200.0), _load(0, 150.0), _load(3, 300.0)]
        result = compute_load_zones(loads, as_of=AS_OF, days=14)

        assert len(result.days) == 15
        assert result.days[0].date == _day(14)
        assert result.days[-1].date == AS_OF
        assert result.days[-1].training_load == 350.0
        assert result.days[-2].zone == "rest"

    @pytest.mark.parametrize("days", [1, 7, 30])
    def test_every_day_gets_a_zone(self, days):
        loads = [_load(offset, 100.0 + (offset % 5) * 90) for offset in range(0, 40, 2)]
        result = compute_load_zones(loads, as_of=AS_OF, days=days)
        assert len(result.days) == days + 1
        assert all(day.zone in ZONES for day in result.days)

    def test_oldest_day_is_part_of_the_band(self):
        loads = [_load(3, 1000.0), _load(2, 100.0), _load(1, 100.0), _load(0, 100.0)]
        result = compute_load_zones(loads, as_of=AS_OF, days=3)

        assert [d.training_load for d in result.days] == [1000.0, 100.0, 100.0, 100.0]
        assert result.days[0].zone == "high"
        assert [d.zone for d in result.days[1:]] == ["optimal"] * 3

    def test_default_window(self):
        result = compute_load_zones([], as_of=AS_OF)
        assert len(result.days) == 31
        assert {d.zone for d in result.days} == {"rest"}
