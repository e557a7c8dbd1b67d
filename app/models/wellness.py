"""
Wellness check-in database model.

Defines the wellness_checkins table.  One check-in per athlete per day
(enforced by unique constraint).
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class WellnessCheckinDB(SQLModel, table=True):
    __tablename__ = "wellness_checkins"
    __table_args__ = (
        UniqueConstraint("athlete_id", "date", name="uq_wellness_athlete_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Sub-scores (1-5)
    sleep_hours: float = Field(default=0.0)
    sleep_quality: int = Field(default=3)
    soreness: int = Field(default=3)
    fatigue: int = Field(default=3)
    mood: int = Field(default=3)
    hydration: int = Field(default=3)

    # Derived when stored (0-100)
    readiness_score: float = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
