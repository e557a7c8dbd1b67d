"""Pydantic schemas: analytics inputs and computed outputs."""

from app.schemas.thresholds import ThresholdSettings, DEFAULT_THRESHOLDS
from app.schemas.athlete import Athlete
from app.schemas.daily_load import DailyLoadEntry
from app.schemas.injury import (
    InjuryRecord,
    InjuryRegionSummary,
    InjuryTypeSummary,
    InjurySummaryResponse,
)
from app.schemas.wellness import WellnessCheckin
from app.schemas.testing import Metric, TestingTrialResult
from app.schemas.risk import RiskIndicator, RiskAlert, RiskFlag
from app.schemas.load import LoadTrendPoint, LoadZoneDay, LoadZoneResult
from app.schemas.weekly import WeekSummary, WeekChanges, WeekOverWeek, ComplianceRate
from app.schemas.performance import PersonalRecord, RadarPoint, AthleteRanking
from app.schemas.achievements import TrainingStreaks, AchievementBadge
from app.schemas.dashboard import KpiCard, AthleteAnalyticsResponse

__all__ = [
    "ThresholdSettings",
    "DEFAULT_THRESHOLDS",
    "Athlete",
    "DailyLoadEntry",
    "InjuryRecord",
    "InjuryRegionSummary",
    "InjuryTypeSummary",
    "InjurySummaryResponse",
    "WellnessCheckin",
    "Metric",
    "TestingTrialResult",
    "RiskIndicator",
    "RiskAlert",
    "RiskFlag",
    "LoadTrendPoint",
    "LoadZoneDay",
    "LoadZoneResult",
    "WeekSummary",
    "WeekChanges",
    "WeekOverWeek",
    "ComplianceRate",
    "PersonalRecord",
    "RadarPoint",
    "AthleteRanking",
    "TrainingStreaks",
    "AchievementBadge",
    "KpiCard",
    "AthleteAnalyticsResponse",
]
