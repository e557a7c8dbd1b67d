"""
Analytics endpoints - workload risk, load trends, injuries, KPIs,
rankings and the per-athlete bundle.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.dashboard import AthleteAnalyticsResponse, KpiCard
from app.schemas.injury import InjurySummaryResponse
from app.schemas.load import LoadTrendPoint
from app.schemas.performance import AthleteRanking
from app.schemas.risk import RiskAlert, RiskIndicator
from app.services.analytics_service import AnalyticsService

router = APIRouter()

AS_OF_DESCRIPTION = "Reference date (defaults to today)"


@router.get(
    "/risk",
    summary="ACWR risk indicator for every active athlete.",
    response_model=list[RiskIndicator],
)
def get_risk_indicators(
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_risk_indicators(as_of)


@router.get(
    "/risk/alerts",
    summary="Team alerts for athletes above the moderate ACWR cutoff.",
    response_model=list[RiskAlert],
)
def get_risk_alerts(
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_risk_alerts(as_of)


@router.get(
    "/load-trends",
    summary="Team (per-day average) or athlete (per-session) load series.",
    response_model=list[LoadTrendPoint],
)
def get_load_trends(
    days: Optional[int] = Query(None, ge=1, le=365, description="Window length (defaults to the stored setting)"),
    athlete_id: Optional[int] = Query(None, description="Restrict to one athlete"),
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_load_trends(days=days, athlete_id=athlete_id, as_of=as_of)


@router.get(
    "/injuries/summary",
    summary="Injury counts by body region and by type.",
    response_model=InjurySummaryResponse,
)
def get_injury_summary(
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_injury_summary(as_of)


@router.get(
    "/kpis",
    summary="Dashboard headline numbers.",
    response_model=list[KpiCard],
)
def get_kpis(
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_kpis(as_of)


@router.get(
    "/rankings/{metric_id}",
    summary="Athletes ranked by their best score on one metric.",
    response_model=list[AthleteRanking],
)
def get_rankings(
    metric_id: int,
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_rankings(metric_id, as_of)


@router.get(
    "/athletes/{athlete_id}",
    summary="Full analytics bundle for one athlete.",
    response_model=AthleteAnalyticsResponse,
)
def get_athlete_analytics(
    athlete_id: int,
    as_of: Optional[datetime.date] = Query(None, description=AS_OF_DESCRIPTION),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_athlete_analytics(athlete_id, as_of)
