"""
Dashboard response schemas.

Bundles returned by the analytics endpoints; each field is computed by a
separate engine function.
"""

from typing import Optional, Union

from pydantic import BaseModel

from app.schemas.achievements import AchievementBadge, TrainingStreaks
from app.schemas.load import LoadZoneResult
from app.schemas.performance import PersonalRecord, RadarPoint
from app.schemas.risk import RiskFlag, RiskIndicator
from app.schemas.weekly import ComplianceRate, WeekOverWeek


class KpiCard(BaseModel):
    label: str
    value: Union[int, float, str]
    icon: Optional[str] = None


class AthleteAnalyticsResponse(BaseModel):
    """Everything the athlete detail view derives from raw records."""

    athlete_id: str
    athlete_name: str
    risk: RiskIndicator
    flags: list[RiskFlag]
    load_zones: LoadZoneResult
    week_over_week: WeekOverWeek
    compliance: ComplianceRate
    personal_records: list[PersonalRecord]
    radar: list[RadarPoint]
    streaks: TrainingStreaks
    badges: list[AchievementBadge]
    injury_days_lost: int
