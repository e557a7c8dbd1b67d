"""
Daily training load database model.

One row per logged session.  ``training_load`` is stored as computed at
creation time (RPE x duration) and never recomputed.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class DailyLoadDB(SQLModel, table=True):
    __tablename__ = "daily_loads"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    rpe: int = Field(nullable=False)
    duration_minutes: float = Field(nullable=False)
    training_load: float = Field(nullable=False)
    session_type: str = Field(default="", max_length=50)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
