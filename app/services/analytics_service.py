"""
Analytics service.

Fetches record-store rows through the repositories, maps them to engine
entities and runs the analytics engine with the stored thresholds.  No
computation happens here beyond choosing which rows to load.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.core.config import settings
from app.core.logger import log_context
from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.daily_load import DailyLoadRepository
from app.db.repositories.injury import InjuryRepository
from app.db.repositories.testing import TestingRepository
from app.db.repositories.wellness import WellnessCheckinRepository
from app.models.athlete import AthleteDB
from app.monitoring.acwr import CHRONIC_DAYS, compute_athlete_risk_indicators, compute_risk_alerts
from app.monitoring.badges import compute_achievement_badges
from app.monitoring.flags import compute_risk_flags
from app.monitoring.injuries import compute_days_lost, summarize_injuries
from app.monitoring.kpis import KPI_LOAD_DAYS, compute_dashboard_kpis
from app.monitoring.performance import compute_athlete_rankings, compute_personal_records, compute_radar_data
from app.monitoring.streaks import compute_training_streaks
from app.monitoring.trends import compute_athlete_load_trends, compute_load_trends
from app.monitoring.weekly import compute_compliance_rate, compute_week_over_week
from app.monitoring.windows import resolve_as_of, trailing_window
from app.monitoring.zones import compute_load_zones
from app.schemas.athlete import Athlete
from app.schemas.dashboard import AthleteAnalyticsResponse, KpiCard
from app.schemas.injury import InjurySummaryResponse
from app.schemas.load import LoadTrendPoint
from app.schemas.performance import AthleteRanking
from app.schemas.risk import RiskAlert, RiskIndicator
from app.services.mappers import (to_athlete, to_daily_load, to_injury, to_metric, to_trial_result,
                                  to_wellness_checkin, )
from app.services.threshold_service import ThresholdService


class AnalyticsService:
    """Service for derived athlete analytics."""

    def __init__(self, session: Session):
        self.athletes = AthleteRepository(session)
        self.daily_loads = DailyLoadRepository(session)
        self.injuries = InjuryRepository(session)
        self.wellness = WellnessCheckinRepository(session)
        self.testing = TestingRepository(session)
        self.thresholds = ThresholdService(session)

    # ------------------------------------------------------------------
    # Team views
    # ------------------------------------------------------------------

    def get_risk_indicators(self, as_of: Optional[datetime.date] = None) -> list[RiskIndicator]:
        ref = resolve_as_of(as_of)
        athletes = self._active_athletes()
        start, _ = trailing_window(ref, CHRONIC_DAYS)
        loads = [to_daily_load(row) for row in self.daily_loads.get_by_date_range(start, ref)]
        injuries = [to_injury(row) for row in self.injuries.list_all()]

        logger.info(f"[ANALYTICS] Risk indicators for {len(athletes)} athletes as of {ref}")
        return compute_athlete_risk_indicators(athletes, loads, injuries, as_of=ref, thresholds=self.thresholds.get())

    def get_risk_alerts(self, as_of: Optional[datetime.date] = None) -> list[RiskAlert]:
        ref = resolve_as_of(as_of)
        indicators = self.get_risk_indicators(ref)
        return compute_risk_alerts(indicators, as_of=ref, thresholds=self.thresholds.get())

    def get_load_trends(self, days: Optional[int] = None, athlete_id: Optional[int] = None,
                        as_of: Optional[datetime.date] = None, ) -> list[LoadTrendPoint]:
        ref = resolve_as_of(as_of)
        thresholds = self.thresholds.get()
        window = days if days is not None else thresholds.default_days
        start = ref - datetime.timedelta(days=window)

        if athlete_id is None:
            rows = self.daily_loads.get_by_date_range(start, ref)
            logger.info(f"[ANALYTICS] Team load trends over {window} days as of {ref}")
            return compute_load_trends([to_daily_load(r) for r in rows], as_of=ref, days=window,
                                       thresholds=thresholds)

        athlete = self._get_athlete_or_404(athlete_id)
        rows = self.daily_loads.get_by_date_range(start, ref, athlete_id=athlete_id)
        logger.info(f"[ANALYTICS] Load trends for athlete {athlete_id} over {window} days as of {ref}")
        return compute_athlete_load_trends([to_daily_load(r, athlete.name) for r in rows], as_of=ref, days=window,
                                           thresholds=thresholds)

    def get_injury_summary(self, as_of: Optional[datetime.date] = None) -> InjurySummaryResponse:
        injuries = [to_injury(row) for row in self.injuries.list_all()]
        return summarize_injuries(injuries, as_of=as_of)

    def get_kpis(self, as_of: Optional[datetime.date] = None) -> list[KpiCard]:
        ref = resolve_as_of(as_of)
        athletes = [to_athlete(row) for row in self.athletes.list_all()]
        injuries = [to_injury(row) for row in self.injuries.list_all()]
        load_start, _ = trailing_window(ref, KPI_LOAD_DAYS)
        loads = [to_daily_load(row) for row in self.daily_loads.get_by_date_range(load_start, ref)]
        session_dates = self.testing.list_session_dates(ref.replace(day=1), ref)

        return compute_dashboard_kpis(athletes, injuries, loads, session_dates, as_of=ref)

    def get_rankings(self, metric_id: int, as_of: Optional[datetime.date] = None) -> list[AthleteRanking]:
        metric_row = self.testing.get_metric(metric_id)
        if not metric_row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metric not found", )

        results = [to_trial_result(r, s) for r, s in self.testing.list_results(metric_id=metric_id)]
        athletes = [to_athlete(row) for row in self.athletes.list_all()]
        return compute_athlete_rankings(to_metric(metric_row), results, athletes, as_of=as_of)

    # ------------------------------------------------------------------
    # Athlete view
    # ------------------------------------------------------------------

    def get_athlete_analytics(self, athlete_id: int,
                              as_of: Optional[datetime.date] = None, ) -> AthleteAnalyticsResponse:
        ref = resolve_as_of(as_of)
        thresholds = self.thresholds.get()
        athlete = to_athlete(self._get_athlete_or_404(athlete_id))

        with log_context(f"athlete={athlete_id}"):
            loads = [to_daily_load(row, athlete.name) for row in self.daily_loads.get_by_athlete(athlete_id)]
            injuries = [to_injury(row, athlete.name) for row in self.injuries.list_all(athlete_id=athlete_id)]
            checkins = [to_wellness_checkin(row) for row in self.wellness.get_by_athlete(athlete_id)]
            metrics = [to_metric(row) for row in self.testing.list_metrics()]
            results = [to_trial_result(r, s) for r, s in self.testing.list_results(athlete_id=athlete_id)]

            logger.info(f"[ANALYTICS] Athlete {athlete_id} analytics as of {ref}: {len(loads)} loads, "
                        f"{len(checkins)} check-ins, {len(results)} trial results")

            risk = compute_athlete_risk_indicators([athlete], loads, injuries, as_of=ref, thresholds=thresholds)[0]
            compliance = compute_compliance_rate(loads, as_of=ref, sessions_per_week=settings.WEEKLY_SESSION_TARGET)
            streaks = compute_training_streaks(loads, as_of=ref)
            records = compute_personal_records(results, metrics, as_of=ref)

            return AthleteAnalyticsResponse(
                athlete_id=athlete.id,
                athlete_name=athlete.name,
                risk=risk,
                flags=compute_risk_flags(risk, checkins, loads, as_of=ref, thresholds=thresholds),
                load_zones=compute_load_zones(loads, as_of=ref, thresholds=thresholds),
                week_over_week=compute_week_over_week(loads, checkins, as_of=ref, thresholds=thresholds),
                compliance=compliance,
                personal_records=records,
                radar=compute_radar_data(results, metrics, as_of=ref),
                streaks=streaks,
                badges=compute_achievement_badges(loads, records, checkins, as_of=ref, streaks=streaks,
                                                  compliance=compliance),
                injury_days_lost=sum(compute_days_lost(i, ref) for i in injuries),
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _active_athletes(self) -> list[Athlete]:
        return [to_athlete(row) for row in self.athletes.list_all(status="active")]

    def _get_athlete_or_404(self, athlete_id: int) -> AthleteDB:
        athlete = self.athletes.get_by_id(athlete_id)
        if not athlete:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found", )
        return athlete
