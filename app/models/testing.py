"""
Testing database models.

A testing session belongs to one athlete and holds one trial result per
metric attempted.  Metrics declare whether the highest or the lowest
score is best.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class MetricDB(SQLModel, table=True):
    __tablename__ = "metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=100)
    unit: str = Field(default="", max_length=20)
    best_score_method: str = Field(default="highest", nullable=False, max_length=10)
    sport_id: Optional[str] = Field(default=None, max_length=50, index=True)


class TestingSessionDB(SQLModel, table=True):
    __tablename__ = "testing_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class TrialResultDB(SQLModel, table=True):
    """Best and average score for one metric within a testing session.

    ``best_score`` is NULL when the metric was not attempted.
    """

    __tablename__ = "trial_results"
    __table_args__ = (
        UniqueConstraint("session_id", "metric_id", name="uq_trial_session_metric"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="testing_sessions.id", nullable=False, index=True)
    metric_id: int = Field(foreign_key="metrics.id", nullable=False, index=True)
    best_score: Optional[float] = Field(default=None)
    average_score: Optional[float] = Field(default=None)
