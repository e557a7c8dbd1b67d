"""
Training load zones.

Each day's total load is placed in one of five bands relative to the
athlete's own distribution over a trailing window:

    rest     load == 0
    low      load <  mean - 1 sd
    optimal  load <= mean + 1 sd
    high     load <= mean + 2 sd
    danger   load >  mean + 2 sd

The band is computed from the non-zero day totals of every classified
day (rest days would drag the mean towards zero).  With fewer than
``MIN_BAND_SAMPLES`` training days, or zero variance, there is no band
and every training day is ``optimal``.
"""

from __future__ import annotations

import datetime
import statistics
from typing import Iterable, NamedTuple, Optional, Sequence

from loguru import logger

from app.monitoring.trends import sum_load_by_day
from app.monitoring.windows import ensure_models, ensure_thresholds, resolve_as_of
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.load import LoadZone, LoadZoneDay, LoadZoneResult
from app.schemas.thresholds import ThresholdSettings

MIN_BAND_SAMPLES = 3


class LoadBand(NamedTuple):
    mean: float
    stdev: float


def compute_load_band(loads: Sequence[float]) -> Optional[LoadBand]:
    """Population mean and standard deviation of the non-zero loads."""
    training = [load for load in loads if load > 0]
    if len(training) < MIN_BAND_SAMPLES:
        return None
    return LoadBand(mean=statistics.fmean(training), stdev=statistics.pstdev(training))


def classify_load(load: float, band: Optional[LoadBand]) -> LoadZone:
    if load <= 0:
        return "rest"
    if band is None or band.stdev == 0:
        return "optimal"
    if load < band.mean - band.stdev:
        return "low"
    if load <= band.mean + band.stdev:
        return "optimal"
    if load <= band.mean + 2 * band.stdev:
        return "high"
    return "danger"


def _danger_streak(days: Sequence[LoadZoneDay]) -> int:
    streak = 0
    for day in reversed(days):
        if day.zone != "danger":
            break
        streak += 1
    return streak


def classify_load_series(series: Sequence[tuple[datetime.date, float]], window: Optional[int] = None, ) -> LoadZoneResult:
    """Classify a chronological, day-aggregated load series.

    Args:
        series: ``(date, total_load)`` pairs, oldest first.
        window: Number of trailing days used for the band (the whole
            series when ``None`` or longer than the series).

    Returns:
        :class:`LoadZoneResult` with one zone per day and the danger streak.
    """
    trailing = series if window is None else series[-window:]
    band = compute_load_band([load for _, load in trailing])

    days = [LoadZoneDay(date=day, training_load=load, zone=classify_load(load, band)) for day, load in series]
    return LoadZoneResult(days=days, danger_streak=_danger_streak(days))


def compute_load_zones(daily_loads: Iterable, as_of: Optional[datetime.date] = None, days: Optional[int] = None,
                       thresholds: Optional[ThresholdSettings] = None, ) -> LoadZoneResult:
    """Load zones for one athlete over ``[as_of - days, as_of]``.

    Sessions on the same day are summed and days without sessions are
    filled in as rest days, so the result has one entry per calendar day.
    """
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    window = days if days is not None else cfg.default_days
    totals = sum_load_by_day(ensure_models(daily_loads, DailyLoadEntry, "daily_loads"))

    start = ref - datetime.timedelta(days=window)
    series = [(start + datetime.timedelta(days=offset), totals.get(start + datetime.timedelta(days=offset), 0.0))
              for offset in range(window + 1)]

    result = classify_load_series(series)
    if result.danger_streak:
        logger.debug(f"[ZONES] {result.danger_streak} consecutive danger days ending {ref}")
    return result
