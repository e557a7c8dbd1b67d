"""
Base database configuration.

Import all models here so ``SQLModel.metadata`` knows every table before
``create_all`` runs.
"""

from app.models.athlete import AthleteDB  # noqa: F401
from app.models.daily_load import DailyLoadDB  # noqa: F401
from app.models.injury import InjuryDB  # noqa: F401
from app.models.wellness import WellnessCheckinDB  # noqa: F401
from app.models.testing import MetricDB, TestingSessionDB, TrialResultDB  # noqa: F401
from app.models.threshold_setting import ThresholdSettingDB  # noqa: F401
