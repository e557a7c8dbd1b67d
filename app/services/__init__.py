"""Business logic services."""

from app.services.analytics_service import AnalyticsService
from app.services.threshold_service import ThresholdService

__all__ = [
    "AnalyticsService",
    "ThresholdService",
]
