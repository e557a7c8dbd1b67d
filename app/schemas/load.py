"""
Load trend and load zone schemas.

Load zones compare each day's load with the athlete's own recent
distribution (mean +/- standard deviation), not with absolute numbers.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

LoadZone = Literal["rest", "low", "optimal", "high", "danger"]


class LoadTrendPoint(BaseModel):
    """One point of a load time series."""

    date: datetime.date
    training_load: float
    rpe: float
    athlete_name: Optional[str] = None


class LoadZoneDay(BaseModel):
    date: datetime.date
    training_load: float
    zone: LoadZone


class LoadZoneResult(BaseModel):
    """Day-by-day zones plus the current run of danger days."""

    days: list[LoadZoneDay]
    danger_streak: int = Field(..., ge=0, description="Consecutive danger days ending at the most recent day", )
