"""
Wellness check-in schema.

Five subjective sub-scores (1-5) plus sleep duration.  The 0-100
``readiness_score`` is derived from them when the check-in is stored
(see :func:`app.monitoring.wellness.compute_readiness_score`).
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WellnessCheckin(BaseModel):
    """A daily wellness check-in."""

    id: Optional[str] = None
    athlete_id: str
    date: datetime.date
    sleep_hours: float = Field(0.0, ge=0.0, le=24.0)
    sleep_quality: int = Field(3, ge=1, le=5)
    soreness: int = Field(3, ge=1, le=5)
    fatigue: int = Field(3, ge=1, le=5)
    mood: int = Field(3, ge=1, le=5)
    hydration: int = Field(3, ge=1, le=5)
    readiness_score: float = Field(..., ge=0.0, le=100.0, description="Composite readiness 0-100")
