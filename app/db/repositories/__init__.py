"""Database repositories."""

from app.db.repositories.athlete import AthleteRepository
from app.db.repositories.daily_load import DailyLoadRepository
from app.db.repositories.injury import InjuryRepository
from app.db.repositories.wellness import WellnessCheckinRepository
from app.db.repositories.testing import TestingRepository
from app.db.repositories.threshold_setting import ThresholdSettingRepository

__all__ = [
    "AthleteRepository",
    "DailyLoadRepository",
    "InjuryRepository",
    "WellnessCheckinRepository",
    "TestingRepository",
    "ThresholdSettingRepository",
]
