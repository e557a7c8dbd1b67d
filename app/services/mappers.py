"""
Row-to-entity mapping.

Turns record-store rows into the normalized entities the analytics
engine consumes: string ids, snake_case fields, trial results carrying
their session's athlete and date.
"""

from typing import Optional

from app.models.athlete import AthleteDB
from app.models.daily_load import DailyLoadDB
from app.models.injury import InjuryDB
from app.models.testing import MetricDB, TestingSessionDB, TrialResultDB
from app.models.wellness import WellnessCheckinDB
from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.injury import InjuryRecord
from app.schemas.testing import Metric, TestingTrialResult
from app.schemas.wellness import WellnessCheckin


def to_athlete(row: AthleteDB) -> Athlete:
    return Athlete(id=str(row.id), name=row.name, status=row.status, sport_id=row.sport_id)


def to_daily_load(row: DailyLoadDB, athlete_name: Optional[str] = None) -> DailyLoadEntry:
    return DailyLoadEntry(id=str(row.id), athlete_id=str(row.athlete_id), athlete_name=athlete_name, date=row.date,
                          rpe=row.rpe, duration_minutes=row.duration_minutes, training_load=row.training_load,
                          session_type=row.session_type, )


def to_injury(row: InjuryDB, athlete_name: Optional[str] = None) -> InjuryRecord:
    return InjuryRecord(id=str(row.id), athlete_id=str(row.athlete_id), athlete_name=athlete_name, type=row.type,
                        body_region=row.body_region, status=row.status, date_occurred=row.date_occurred,
                        date_resolved=row.date_resolved, days_lost=row.days_lost, )


def to_wellness_checkin(row: WellnessCheckinDB) -> WellnessCheckin:
    return WellnessCheckin(id=str(row.id), athlete_id=str(row.athlete_id), date=row.date,
                           sleep_hours=row.sleep_hours, sleep_quality=row.sleep_quality, soreness=row.soreness,
                           fatigue=row.fatigue, mood=row.mood, hydration=row.hydration,
                           readiness_score=row.readiness_score, )


def to_metric(row: MetricDB) -> Metric:
    return Metric(id=str(row.id), name=row.name, unit=row.unit, best_score_method=row.best_score_method)


def to_trial_result(result: TrialResultDB, session: TestingSessionDB) -> TestingTrialResult:
    return TestingTrialResult(athlete_id=str(session.athlete_id), metric_id=str(result.metric_id), date=session.date,
                              best_score=result.best_score, average_score=result.average_score, )
