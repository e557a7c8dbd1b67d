"""
Testing-derived statistics: personal records, radar comparison and
per-metric athlete rankings.

Every better/worse judgment follows the metric's ``best_score_method``:
``highest`` means bigger is better, ``lowest`` means smaller is better
(sprint times, for example).  Trials with ``best_score is None`` were not
attempted and are ignored everywhere.  Metrics missing from the lookup
are treated as ``highest`` and reported with ``None`` name/unit.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from loguru import logger

from app.monitoring.windows import ensure_models, in_window, resolve_as_of, trailing_window
from app.schemas.athlete import Athlete
from app.schemas.performance import AthleteRanking, PersonalRecord, RadarPoint
from app.schemas.testing import BestScoreMethod, Metric, TestingTrialResult

RECENT_PR_DAYS = 7
RADAR_WINDOW_DAYS = 30
# Fewer metrics than this do not make a readable radar chart; the list is
# still returned and the caller decides whether to draw it.
RADAR_MIN_METRICS = 3

# ======================================================================
# Helpers
# ======================================================================


def is_better(score: float, other: float, method: BestScoreMethod) -> bool:
    """Strictly better, so ties keep the earlier result."""
    return score < other if method == "lowest" else score > other


def best_trial(trials: Iterable[TestingTrialResult], method: BestScoreMethod, ) -> Optional[TestingTrialResult]:
    """Best attempted trial; on equal scores the earliest date wins."""
    best = None
    for trial in sorted(trials, key=lambda t: t.date):
        if trial.best_score is None:
            continue
        if best is None or is_better(trial.best_score, best.best_score, method):
            best = trial
    return best


def _method_for(metric: Optional[Metric]) -> BestScoreMethod:
    return metric.best_score_method if metric is not None else "highest"


def _group_by_metric(trials: Iterable[TestingTrialResult], as_of: datetime.date, ) -> dict[str, list[TestingTrialResult]]:
    grouped: dict[str, list[TestingTrialResult]] = {}
    for trial in trials:
        if trial.best_score is None or trial.date > as_of:
            continue
        grouped.setdefault(trial.metric_id, []).append(trial)
    return grouped


def _sort_key(metric_id: str, metric: Optional[Metric]) -> tuple[str, str]:
    return (metric.name if metric is not None else metric_id).lower(), metric_id


# ======================================================================
# Personal records
# ======================================================================


def compute_personal_records(trial_results: Iterable, metrics: Iterable = (),
                             as_of: Optional[datetime.date] = None, ) -> list[PersonalRecord]:
    """Best-ever score per metric for one athlete's trial results.

    Args:
        trial_results: The athlete's :class:`TestingTrialResult` items.
        metrics: Metric lookup (name, unit, direction).
        as_of: Reference date (defaults to today).  Results after it are
            ignored; records achieved within the last 7 days are recent.

    Returns:
        One :class:`PersonalRecord` per attempted metric, ordered by name.
    """
    ref = resolve_as_of(as_of)
    trials = ensure_models(trial_results, TestingTrialResult, "trial_results")
    metric_map = {m.id: m for m in ensure_models(metrics, Metric, "metrics")}
    recent_start, _ = trailing_window(ref, RECENT_PR_DAYS)

    records = []
    for metric_id, group in _group_by_metric(trials, ref).items():
        metric = metric_map.get(metric_id)
        method = _method_for(metric)
        best = best_trial(group, method)
        records.append(PersonalRecord(metric_id=metric_id, metric_name=metric.name if metric else None,
                                      metric_unit=metric.unit if metric else None, pr_value=best.best_score,
                                      date_achieved=best.date, is_recent=in_window(best.date, recent_start, ref),
                                      best_score_method=method, ))

    records.sort(key=lambda r: _sort_key(r.metric_id, metric_map.get(r.metric_id)))
    return records


# ======================================================================
# Radar
# ======================================================================


def _latest(trials: list[TestingTrialResult], start: datetime.date, end: datetime.date, ) -> Optional[TestingTrialResult]:
    window = [t for t in trials if in_window(t.date, start, end)]
    return max(window, key=lambda t: t.date) if window else None


def _normalize(score: float, low: float, high: float, method: BestScoreMethod) -> int:
    span = (high - low) or 1.0
    raw = (score - low) / span * 100
    value = round(100 - raw if method == "lowest" else raw)
    return max(0, min(100, value))


def compute_radar_data(trial_results: Iterable, metrics: Iterable = (),
                       as_of: Optional[datetime.date] = None, ) -> list[RadarPoint]:
    """Compare the last 30 days with the 30 days before, scaled 0-100.

    Only metrics with a result in both periods are included.  Scores are
    scaled against the metric's full min-max range in the supplied results;
    for ``lowest`` metrics the scale is inverted so 100 is always best.
    """
    ref = resolve_as_of(as_of)
    trials = ensure_models(trial_results, TestingTrialResult, "trial_results")
    metric_map = {m.id: m for m in ensure_models(metrics, Metric, "metrics")}

    current_start, _ = trailing_window(ref, RADAR_WINDOW_DAYS)
    previous_end = current_start - datetime.timedelta(days=1)
    previous_start, _ = trailing_window(previous_end, RADAR_WINDOW_DAYS)

    points = []
    for metric_id, group in _group_by_metric(trials, ref).items():
        current = _latest(group, current_start, ref)
        previous = _latest(group, previous_start, previous_end)
        if current is None or previous is None:
            continue

        metric = metric_map.get(metric_id)
        method = _method_for(metric)
        scores = [t.best_score for t in group]
        low, high = min(scores), max(scores)
        points.append(RadarPoint(metric_id=metric_id, metric_name=metric.name if metric else None,
                                 current=_normalize(current.best_score, low, high, method),
                                 previous=_normalize(previous.best_score, low, high, method), ))

    points.sort(key=lambda p: _sort_key(p.metric_id, metric_map.get(p.metric_id)))
    if 0 < len(points) < RADAR_MIN_METRICS:
        logger.debug(f"[RADAR] Only {len(points)} metric(s) with results in both periods")
    return points


# ======================================================================
# Rankings
# ======================================================================


def compute_athlete_rankings(metric: Metric, trial_results: Iterable, athletes: Iterable = (),
                             as_of: Optional[datetime.date] = None, ) -> list[AthleteRanking]:
    """Rank athletes by their best score on one metric (rank 1 is best).

    Equal scores are ordered by athlete name, then id, and still receive
    distinct consecutive ranks.
    """
    ref = resolve_as_of(as_of)
    trials = [t for t in ensure_models(trial_results, TestingTrialResult, "trial_results") if t.metric_id == metric.id]
    names = {a.id: a.name for a in ensure_models(athletes, Athlete, "athletes")}

    by_athlete: dict[str, list[TestingTrialResult]] = {}
    for trial in _group_by_metric(trials, ref).get(metric.id, []):
        by_athlete.setdefault(trial.athlete_id, []).append(trial)

    bests = [(athlete_id, best_trial(group, metric.best_score_method).best_score)
             for athlete_id, group in by_athlete.items()]
    sign = 1 if metric.best_score_method == "lowest" else -1
    bests.sort(key=lambda item: (sign * item[1], names.get(item[0]) or "", item[0]))

    return [AthleteRanking(athlete_id=athlete_id, athlete_name=names.get(athlete_id), metric_name=metric.name,
                           best_score=score, rank=rank, )
            for rank, (athlete_id, score) in enumerate(bests, start=1)]
