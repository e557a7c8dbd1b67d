"""
Risk flag synthesis for the athlete view.

Each rule is evaluated independently and several flags may fire at once.
A rule whose input signal is missing (no indicator, no check-ins, no
baseline week) stays silent rather than raising a flag about it.

Rules
-----

acwr-high / acwr-moderate
    The indicator's risk level is ``high`` (danger) or ``moderate``
    (warning).
low-readiness
    The most recent check-in has a readiness score below 40 (warning).
load-spike
    This week's load is up more than ``load_spike_percent`` on last week
    (danger).
recovery-concern
    RPE above 8 on each of the 3+ most recent sessions (warning).
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from loguru import logger

from app.monitoring.weekly import compute_week_over_week
from app.monitoring.windows import ensure_models, ensure_thresholds, resolve_as_of
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.risk import RiskFlag, RiskIndicator
from app.schemas.thresholds import ThresholdSettings
from app.schemas.wellness import WellnessCheckin

LOW_READINESS = 40.0
READINESS_LOOKBACK = 7

HIGH_RPE = 8
HIGH_RPE_SESSIONS = 3
RPE_LOOKBACK = 10


def _leading_run(values: Iterable[bool]) -> int:
    run = 0
    for value in values:
        if not value:
            break
        run += 1
    return run


def _acwr_flag(indicator: Optional[RiskIndicator], cfg: ThresholdSettings) -> Optional[RiskFlag]:
    if indicator is None:
        return None
    if indicator.risk_level == "high":
        return RiskFlag(id="acwr-high", type="acwr", severity="danger", title="High workload spike risk",
                        message=f"ACWR is {indicator.acwr} (threshold {cfg.acwr_high}). "
                                f"Consider reducing training load to allow recovery.", )
    if indicator.risk_level == "moderate":
        return RiskFlag(id="acwr-moderate", type="acwr", severity="warning", title="Elevated workload ratio",
                        message=f"ACWR is {indicator.acwr} (above {cfg.acwr_moderate}). Monitor load carefully.", )
    return None


def _readiness_flag(checkins: list[WellnessCheckin], as_of: datetime.date) -> Optional[RiskFlag]:
    recent = sorted((c for c in checkins if c.date <= as_of), key=lambda c: c.date, reverse=True)
    if not recent or recent[0].readiness_score >= LOW_READINESS:
        return None

    low_days = _leading_run(c.readiness_score < LOW_READINESS for c in recent[:READINESS_LOOKBACK])
    return RiskFlag(id="low-readiness", type="fatigue", severity="warning", title="Low readiness",
                    message=f"Readiness below {LOW_READINESS:g} on the last {low_days} check-in(s) "
                            f"(latest {recent[0].readiness_score:g}). Consider rest or a recovery session.", )


def _load_spike_flag(loads: list[DailyLoadEntry], as_of: datetime.date,
                     cfg: ThresholdSettings) -> Optional[RiskFlag]:
    week = compute_week_over_week(loads, (), as_of=as_of, thresholds=cfg)
    if not week.load_spike_alert:
        return None
    return RiskFlag(id="load-spike", type="overtraining", severity="danger", title="Load spike",
                    message=f"Training load up {week.changes.load_percent}% on last week "
                            f"(threshold {cfg.load_spike_percent:g}%). Gradual progression recommended.", )


def _recovery_flag(loads: list[DailyLoadEntry], as_of: datetime.date) -> Optional[RiskFlag]:
    recent = sorted((e for e in loads if e.date <= as_of), key=lambda e: e.date, reverse=True)
    high_rpe = _leading_run(e.rpe > HIGH_RPE for e in recent[:RPE_LOOKBACK])
    if high_rpe < HIGH_RPE_SESSIONS:
        return None
    return RiskFlag(id="recovery-concern", type="recovery", severity="warning", title="Recovery concern",
                    message=f"RPE above {HIGH_RPE} for {high_rpe} consecutive sessions. "
                            f"Schedule a lighter session or rest day.", )


def compute_risk_flags(indicator: Optional[RiskIndicator], wellness_checkins: Iterable = (),
                       daily_loads: Iterable = (), as_of: Optional[datetime.date] = None,
                       thresholds: Optional[ThresholdSettings] = None, ) -> list[RiskFlag]:
    """Fuse workload, wellness and load-spike signals into alert flags.

    Args:
        indicator: The athlete's :class:`RiskIndicator` (may be ``None``).
        wellness_checkins: The athlete's check-ins.
        daily_loads: The athlete's load entries.
        as_of: Reference date (defaults to today).
        thresholds: Optional :class:`ThresholdSettings` override.

    Returns:
        Flags in rule order, at most one per ``id``.
    """
    cfg = ensure_thresholds(thresholds)
    ref = resolve_as_of(as_of)
    checkins = ensure_models(wellness_checkins, WellnessCheckin, "wellness_checkins")
    loads = ensure_models(daily_loads, DailyLoadEntry, "daily_loads")

    candidates = [
        _acwr_flag(indicator, cfg),
        _readiness_flag(checkins, ref),
        _load_spike_flag(loads, ref, cfg),
        _recovery_flag(loads, ref),
    ]

    flags: list[RiskFlag] = []
    seen: set[str] = set()
    for flag in candidates:
        if flag is None or flag.id in seen:
            continue
        seen.add(flag.id)
        flags.append(flag)

    if flags:
        logger.debug(f"[FLAGS] {len(flags)} flag(s) as of {ref}: {', '.join(f.id for f in flags)}")
    return flags
