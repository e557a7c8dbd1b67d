"""Personal record, radar and ranking schemas."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.testing import BestScoreMethod


class PersonalRecord(BaseModel):
    """Best-ever score for one metric.

    ``metric_name`` and ``metric_unit`` are None when the metric is not in
    the supplied lookup.
    """

    metric_id: str
    metric_name: Optional[str] = None
    metric_unit: Optional[str] = None
    pr_value: float
    date_achieved: datetime.date
    is_recent: bool
    best_score_method: BestScoreMethod


class RadarPoint(BaseModel):
    """Normalised (0-100) score for the last 30 days versus 30-60 days ago."""

    metric_id: str
    metric_name: Optional[str] = None
    current: int = Field(..., ge=0, le=100)
    previous: int = Field(..., ge=0, le=100)


class AthleteRanking(BaseModel):
    athlete_id: str
    athlete_name: Optional[str] = None
    metric_name: Optional[str] = None
    best_score: float
    rank: int = Field(..., ge=1)
