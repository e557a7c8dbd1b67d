"""SQLModel database models."""

from app.models.athlete import AthleteDB
from app.models.daily_load import DailyLoadDB
from app.models.injury import InjuryDB
from app.models.wellness import WellnessCheckinDB
from app.models.testing import MetricDB, TestingSessionDB, TrialResultDB
from app.models.threshold_setting import ThresholdSettingDB

__all__ = [
    "AthleteDB",
    "DailyLoadDB",
    "InjuryDB",
    "WellnessCheckinDB",
    "MetricDB",
    "TestingSessionDB",
    "TrialResultDB",
    "ThresholdSettingDB",
]
