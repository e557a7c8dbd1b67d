"""
Injury analytics: days lost and team summaries.

Ongoing injuries keep accruing days until they are resolved, so their
days lost is always measured up to the reference date, whatever value
is stored on the record.
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Iterable, Optional

from app.monitoring.windows import ensure_models, resolve_as_of
from app.schemas.injury import InjuryRecord, InjuryRegionSummary, InjurySummaryResponse, InjuryTypeSummary

UNKNOWN_REGION = "Unknown"
DEFAULT_TYPE = "injury"


def compute_days_lost(injury: InjuryRecord, as_of: Optional[datetime.date] = None) -> int:
    """Whole days lost to one injury (never negative)."""
    if injury.status != "resolved":
        ref = resolve_as_of(as_of)
        return max(0, (ref - injury.date_occurred).days)
    if injury.days_lost is not None:
        return injury.days_lost
    if injury.date_resolved is not None:
        return max(0, (injury.date_resolved - injury.date_occurred).days)
    return 0


def count_active_injuries(injuries: Iterable[InjuryRecord]) -> int:
    return sum(1 for i in injuries if i.status == "active")


def count_open_injuries(injuries: Iterable[InjuryRecord]) -> int:
    """Injuries not yet resolved (active, rehab or monitoring)."""
    return sum(1 for i in injuries if i.status != "resolved")


def summarize_injuries_by_body_region(injuries: Iterable, as_of: Optional[datetime.date] = None,
                                      ) -> list[InjuryRegionSummary]:
    """Count and total days lost per body region, most frequent first."""
    ref = resolve_as_of(as_of)
    counts: Counter[str] = Counter()
    days: Counter[str] = Counter()
    for injury in ensure_models(injuries, InjuryRecord, "injuries"):
        region = injury.body_region or UNKNOWN_REGION
        counts[region] += 1
        days[region] += compute_days_lost(injury, ref)

    # Counter.most_common keeps first-seen order among equal counts.
    return [InjuryRegionSummary(body_region=region, count=count, days_lost=days[region])
            for region, count in counts.most_common()]


def summarize_injuries_by_type(injuries: Iterable) -> list[InjuryTypeSummary]:
    counts = Counter(i.type or DEFAULT_TYPE for i in ensure_models(injuries, InjuryRecord, "injuries"))
    return [InjuryTypeSummary(type=injury_type, count=count) for injury_type, count in counts.most_common()]


def summarize_injuries(injuries: Iterable, as_of: Optional[datetime.date] = None) -> InjurySummaryResponse:
    records = ensure_models(injuries, InjuryRecord, "injuries")
    return InjurySummaryResponse(by_body_region=summarize_injuries_by_body_region(records, as_of),
                                 by_type=summarize_injuries_by_type(records), )
