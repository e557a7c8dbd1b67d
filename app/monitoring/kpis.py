"""Headline numbers for the team dashboard."""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from app.monitoring.injuries import count_open_injuries
from app.monitoring.windows import ensure_models, in_window, resolve_as_of, trailing_window
from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.dashboard import KpiCard
from app.schemas.injury import InjuryRecord

KPI_LOAD_DAYS = 7


def compute_dashboard_kpis(athletes: Iterable, injuries: Iterable = (), daily_loads: Iterable = (),
                           testing_session_dates: Iterable[datetime.date] = (),
                           as_of: Optional[datetime.date] = None, ) -> list[KpiCard]:
    """Active athletes, open injuries, 7-day average session load and
    testing sessions held so far this month."""
    ref = resolve_as_of(as_of)
    athlete_list = ensure_models(athletes, Athlete, "athletes")
    injury_list = ensure_models(injuries, InjuryRecord, "injuries")
    loads = ensure_models(daily_loads, DailyLoadEntry, "daily_loads")

    load_start, _ = trailing_window(ref, KPI_LOAD_DAYS)
    week_loads = [e.training_load for e in loads if in_window(e.date, load_start, ref)]
    avg_load = round(sum(week_loads) / len(week_loads)) if week_loads else 0

    month_start = ref.replace(day=1)
    sessions_this_month = sum(1 for day in testing_session_dates if in_window(day, month_start, ref))

    return [
        KpiCard(label="Active athletes", value=sum(1 for a in athlete_list if a.status == "active"), icon="users"),
        KpiCard(label="Open injuries", value=count_open_injuries(injury_list), icon="alert-triangle"),
        KpiCard(label="Avg session load (7d)", value=avg_load, icon="activity"),
        KpiCard(label="Testing sessions this month", value=sessions_this_month, icon="clipboard"),
    ]
