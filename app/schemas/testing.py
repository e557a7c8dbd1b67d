"""
Testing (performance assessment) schemas.

Each metric declares whether a higher or a lower score is better.  That
direction drives every better/worse judgment: personal records,
rankings, and radar normalisation.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

BestScoreMethod = Literal["highest", "lowest"]


class Metric(BaseModel):
    """A measurable test (e.g. countermovement jump height)."""

    id: str
    name: str
    unit: str = ""
    best_score_method: BestScoreMethod = "highest"


class TestingTrialResult(BaseModel):
    """Best/average score for one metric within one testing session."""

    athlete_id: str
    metric_id: str
    date: datetime.date = Field(..., description="Date of the testing session")
    best_score: Optional[float] = Field(None, description="None means the metric was not attempted")
    average_score: Optional[float] = None
