"""
Week-over-week comparison and compliance rate.

Both compare logged sessions over trailing calendar windows:

- week-over-week: days ``[as_of-6, as_of]`` against ``[as_of-13, as_of-7]``,
- compliance: the last 7 and 30 days against an expected session count.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from app.monitoring.windows import ensure_models, ensure_thresholds, in_window, resolve_as_of, trailing_window
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.thresholds import ThresholdSettings
from app.schemas.weekly import ComplianceRate, WeekChanges, WeekOverWeek, WeekSummary
from app.schemas.wellness import WellnessCheckin

WEEK_DAYS = 7
MONTH_DAYS = 30

# Expected sessions per week.  Policy constant, not a threshold setting.
WEEKLY_SESSION_TARGET = 5

# ======================================================================
# Week-over-week
# ======================================================================


def percent_change(current: float, previous: float) -> Optional[int]:
    """Rounded percent change, or ``None`` when there is no baseline."""
    if previous == 0:
        return None
    return round((current - previous) / previous * 100)


def summarize_week(loads: Iterable[DailyLoadEntry], checkins: Iterable[WellnessCheckin], start: datetime.date,
                   end: datetime.date, ) -> WeekSummary:
    week_loads = [e for e in loads if in_window(e.date, start, end)]
    week_checkins = [c for c in checkins if in_window(c.date, start, end)]

    sessions = len(week_loads)
    avg_rpe = round(sum(e.rpe for e in week_loads) / sessions, 1) if sessions else 0.0
    avg_readiness = (round(sum(c.readiness_score for c in week_checkins) / len(week_checkins), 1)
                     if week_checkins else None)

    return WeekSummary(sessions=sessions, total_load=round(sum(e.training_load for e in week_loads)), avg_rpe=avg_rpe,
                       avg_readiness=avg_readiness, )


def compute_week_over_week(daily_loads: Iterable, wellness_checkins: Iterable = (),
                           as_of: Optional[datetime.date] = None,
                           thresholds: Optional[ThresholdSettings] = None, ) -> WeekOverWeek:
    """Compare the current 7-day window with the previous one.

    Args:
        daily_loads: Load entries (typically one athlete's).
        wellness_checkins: Check-ins for the readiness averages.
        as_of: Reference date (defaults to today).
        thresholds: Optional :class:`ThresholdSettings` override.

    Returns:
        :class:`WeekOverWeek`.  ``load_spike_alert`` is set when the load
        increase exceeds ``thresholds.load_spike_percent``.
    """
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    loads = ensure_models(daily_loads, DailyLoadEntry, "daily_loads")
    checkins = ensure_models(wellness_checkins, WellnessCheckin, "wellness_checkins")

    current_start, _ = trailing_window(ref, WEEK_DAYS)
    previous_end = current_start - datetime.timedelta(days=1)
    previous_start, _ = trailing_window(previous_end, WEEK_DAYS)

    current = summarize_week(loads, checkins, current_start, ref)
    previous = summarize_week(loads, checkins, previous_start, previous_end)

    readiness_percent = None
    if current.avg_readiness is not None and previous.avg_readiness is not None:
        readiness_percent = percent_change(current.avg_readiness, previous.avg_readiness)

    changes = WeekChanges(sessions_percent=percent_change(current.sessions, previous.sessions),
                          load_percent=percent_change(current.total_load, previous.total_load),
                          rpe_percent=percent_change(current.avg_rpe, previous.avg_rpe),
                          readiness_percent=readiness_percent, )

    return WeekOverWeek(current_week=current, previous_week=previous, changes=changes,
                        load_spike_alert=(changes.load_percent is not None
                                          and changes.load_percent > cfg.load_spike_percent), )


# ======================================================================
# Compliance
# ======================================================================


def _percent_of(actual: int, target: int) -> int:
    return round(actual / target * 100) if target > 0 else 0


def compute_compliance_rate(daily_loads: Iterable, as_of: Optional[datetime.date] = None,
                            sessions_per_week: int = WEEKLY_SESSION_TARGET, ) -> ComplianceRate:
    """Logged sessions against the expected count, weekly and monthly.

    The monthly target is the weekly target scaled to 30 days.  Percentages
    are not capped at 100.
    """
    ref = resolve_as_of(as_of)
    loads = ensure_models(daily_loads, DailyLoadEntry, "daily_loads")

    week_start, _ = trailing_window(ref, WEEK_DAYS)
    month_start, _ = trailing_window(ref, MONTH_DAYS)
    weekly_actual = sum(1 for e in loads if in_window(e.date, week_start, ref))
    monthly_actual = sum(1 for e in loads if in_window(e.date, month_start, ref))
    monthly_target = round(sessions_per_week * MONTH_DAYS / WEEK_DAYS)

    return ComplianceRate(weekly_actual=weekly_actual, weekly_target=sessions_per_week,
                          weekly_percent=_percent_of(weekly_actual, sessions_per_week), monthly_actual=monthly_actual,
                          monthly_target=monthly_target, monthly_percent=_percent_of(monthly_actual, monthly_target), )
