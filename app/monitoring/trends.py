"""
Load trend aggregation.

Collapses per-session load entries into a time series windowed by a day
count.  Team series average across the athletes that logged on a given
day; athlete series keep one point per session.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, Optional

from app.monitoring.windows import ensure_models, ensure_thresholds, in_window, resolve_as_of
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.load import LoadTrendPoint
from app.schemas.thresholds import ThresholdSettings


def _window_entries(entries: list[DailyLoadEntry], as_of: datetime.date, days: int, ) -> list[DailyLoadEntry]:
    start = as_of - datetime.timedelta(days=days)
    return sorted((e for e in entries if in_window(e.date, start, as_of)), key=lambda e: e.date)


def sum_load_by_day(entries: Iterable[DailyLoadEntry]) -> dict[datetime.date, float]:
    """Total training load per calendar day (multiple sessions are summed)."""
    totals: dict[datetime.date, float] = defaultdict(float)
    for entry in entries:
        totals[entry.date] += entry.training_load
    return dict(totals)


def compute_load_trends(entries: Iterable, as_of: Optional[datetime.date] = None, days: Optional[int] = None,
                        thresholds: Optional[ThresholdSettings] = None, ) -> list[LoadTrendPoint]:
    """Team-wide series: one point per day, averaged over that day's sessions.

    Args:
        entries: Load entries (any athletes).
        as_of: Reference date (defaults to today).
        days: Window length; defaults to ``thresholds.default_days``.
        thresholds: Optional :class:`ThresholdSettings` override.

    Returns:
        Points in ascending date order; empty when nothing falls in the window.
    """
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    window = days if days is not None else cfg.default_days
    loads = _window_entries(ensure_models(entries, DailyLoadEntry, "daily_loads"), ref, window)

    by_day: dict[datetime.date, list[DailyLoadEntry]] = defaultdict(list)
    for entry in loads:
        by_day[entry.date].append(entry)

    points = []
    for day in sorted(by_day):
        day_entries = by_day[day]
        count = len(day_entries)
        points.append(LoadTrendPoint(date=day, training_load=round(sum(e.training_load for e in day_entries) / count),
                                     rpe=round(sum(e.rpe for e in day_entries) / count, 1), ))
    return points


def compute_athlete_load_trends(entries: Iterable, as_of: Optional[datetime.date] = None, days: Optional[int] = None,
                                thresholds: Optional[ThresholdSettings] = None, ) -> list[LoadTrendPoint]:
    """Athlete-scoped series: one point per logged session, oldest first."""
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    window = days if days is not None else cfg.default_days
    loads = _window_entries(ensure_models(entries, DailyLoadEntry, "daily_loads"), ref, window)

    return [LoadTrendPoint(date=e.date, training_load=e.training_load, rpe=e.rpe, athlete_name=e.athlete_name)
            for e in loads]
