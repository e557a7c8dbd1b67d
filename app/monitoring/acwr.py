"""
ACWR (Acute:Chronic Workload Ratio) - per-athlete risk indicators.

The ACWR is a **monitoring** tool.  It is used as:

- an indicator of load spikes relative to what the athlete is used to,
- an attention signal for coaches,
- context for the risk flags raised on the athlete view.

Computation
-----------

1. **Acute load** - sum of session loads over the last 7 days, today
   included (day 0).
2. **Chronic load** - sum over the last 28 days divided by exactly 4.
   The divisor is fixed even when the athlete has less than four weeks
   of history, so chronic load is understated for new athletes.  This
   keeps ratios comparable with historical reports.
3. **Ratio** - ``acute / chronic`` rounded to 2 decimals, or ``0`` when
   the chronic load is zero.
4. **Risk level** - strict comparisons against the configured cutoffs: a
   ratio exactly equal to a cutoff is not elevated.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from loguru import logger

from app.monitoring.injuries import count_active_injuries
from app.monitoring.windows import ensure_models, ensure_thresholds, in_window, resolve_as_of, trailing_window
from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.injury import InjuryRecord
from app.schemas.risk import RiskAlert, RiskIndicator, RiskLevel, Trajectory
from app.schemas.thresholds import ThresholdSettings

# ======================================================================
# Windows
# ======================================================================

ACUTE_DAYS = 7
CHRONIC_DAYS = 28
CHRONIC_WEEKS = 4

# Trajectory bands (percent change of this week's load versus last week's).
_ELEVATED_IMPROVING = -10.0
_ELEVATED_WORSENING = 10.0
_SAFE_IMPROVING = -20.0
_SAFE_WORSENING = 30.0

# ======================================================================
# Risk labelling
# ======================================================================


def compute_risk_level(acwr: float, thresholds: Optional[ThresholdSettings] = None) -> RiskLevel:
    """Map an ACWR value to ``low`` / ``moderate`` / ``high``."""
    cfg = ensure_thresholds(thresholds)
    if acwr > cfg.acwr_high:
        return "high"
    if acwr > cfg.acwr_moderate:
        return "moderate"
    return "low"


def compute_acwr_ratio(acute_load: float, chronic_load: float) -> float:
    """Ratio rounded to 2 decimals; ``0.0`` when there is no chronic load."""
    if chronic_load <= 0:
        return 0.0
    return round(acute_load / chronic_load, 2)


def compute_trajectory(acute_load: float, previous_acute_load: float, acwr: float,
                       thresholds: Optional[ThresholdSettings] = None, ) -> Trajectory:
    """Compare this week's load with last week's.

    When the ratio is already elevated, any meaningful reduction counts as
    improving.  In the safe range, moderate increases are fine and only a
    large jump is worsening.
    """
    cfg = ensure_thresholds(thresholds)
    if previous_acute_load <= 0:
        return "stable"

    change = (acute_load - previous_acute_load) / previous_acute_load * 100
    if acwr > cfg.acwr_moderate:
        if change < _ELEVATED_IMPROVING:
            return "improving"
        if change > _ELEVATED_WORSENING:
            return "worsening"
        return "stable"

    if change > _SAFE_WORSENING:
        return "worsening"
    if change < _SAFE_IMPROVING:
        return "improving"
    return "stable"


# ======================================================================
# Per-athlete computation
# ======================================================================


def _sum_load(entries: Iterable[DailyLoadEntry], start: datetime.date, end: datetime.date) -> float:
    return sum(e.training_load for e in entries if in_window(e.date, start, end))


def _compute_indicator(athlete: Athlete, loads: list[DailyLoadEntry], injuries: list[InjuryRecord],
                       as_of: datetime.date, cfg: ThresholdSettings, ) -> RiskIndicator:
    acute_start, _ = trailing_window(as_of, ACUTE_DAYS)
    chronic_start, _ = trailing_window(as_of, CHRONIC_DAYS)
    previous_end = acute_start - datetime.timedelta(days=1)
    previous_start, _ = trailing_window(previous_end, ACUTE_DAYS)

    acute_load = _sum_load(loads, acute_start, as_of)
    previous_acute_load = _sum_load(loads, previous_start, previous_end)
    chronic_load = _sum_load(loads, chronic_start, as_of) / CHRONIC_WEEKS

    acwr = compute_acwr_ratio(acute_load, chronic_load)
    active_injuries = count_active_injuries(injuries)

    return RiskIndicator(athlete_id=athlete.id, athlete_name=athlete.name, acute_load=round(acute_load),
                         chronic_load=round(chronic_load), acwr=acwr, risk_level=compute_risk_level(acwr, cfg),
                         active_injuries=active_injuries,
                         trajectory=compute_trajectory(acute_load, previous_acute_load, acwr, cfg), )


# ======================================================================
# Main entry points
# ======================================================================


def compute_athlete_risk_indicators(athletes: Iterable, daily_loads: Iterable, injuries: Iterable,
                                    as_of: Optional[datetime.date] = None,
                                    thresholds: Optional[ThresholdSettings] = None, ) -> list[RiskIndicator]:
    """Compute one :class:`RiskIndicator` per athlete.

    Args:
        athletes: Athletes to report on (output order follows this list).
        daily_loads: Load entries for any of the athletes.
        injuries: Injury records for any of the athletes.
        as_of: Reference date (defaults to today).
        thresholds: Optional :class:`ThresholdSettings` override.

    Returns:
        Indicators in athlete order.  Athletes without history get zero
        loads, ``acwr == 0`` and ``risk_level == "low"``.
    """
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    athlete_list = ensure_models(athletes, Athlete, "athletes")
    load_list = ensure_models(daily_loads, DailyLoadEntry, "daily_loads")
    injury_list = ensure_models(injuries, InjuryRecord, "injuries")

    loads_by_athlete: dict[str, list[DailyLoadEntry]] = {}
    for entry in load_list:
        loads_by_athlete.setdefault(entry.athlete_id, []).append(entry)
    injuries_by_athlete: dict[str, list[InjuryRecord]] = {}
    for injury in injury_list:
        injuries_by_athlete.setdefault(injury.athlete_id, []).append(injury)

    indicators = [
        _compute_indicator(athlete, loads_by_athlete.get(athlete.id, []), injuries_by_athlete.get(athlete.id, []),
                           ref, cfg)
        for athlete in athlete_list
    ]
    logger.debug(f"[RISK] Computed {len(indicators)} risk indicators as of {ref} "
                 f"({sum(1 for i in indicators if i.risk_level != 'low')} elevated)")
    return indicators


def compute_risk_alerts(indicators: Iterable[RiskIndicator], as_of: Optional[datetime.date] = None,
                        thresholds: Optional[ThresholdSettings] = None, ) -> list[RiskAlert]:
    """Team alerts for athletes above the moderate cutoff, danger first."""
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    alerts: list[RiskAlert] = []

    for indicator in indicators:
        if indicator.acwr > cfg.acwr_high:
            alerts.append(RiskAlert(athlete_id=indicator.athlete_id, athlete_name=indicator.athlete_name,
                                    message=f"ACWR at {indicator.acwr}: high injury risk", severity="danger",
                                    date=ref, ))
        elif indicator.acwr > cfg.acwr_moderate:
            alerts.append(RiskAlert(athlete_id=indicator.athlete_id, athlete_name=indicator.athlete_name,
                                    message=f"ACWR at {indicator.acwr}: moderate risk, monitor closely",
                                    severity="warning", date=ref, ))

    # Stable sort keeps athlete order within each severity.
    return sorted(alerts, key=lambda a: 0 if a.severity == "danger" else 1)
