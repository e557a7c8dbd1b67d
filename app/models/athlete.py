"""
Athlete database model.

Defines the athletes table.  Every record-store table below references
an athlete by ``athlete_id``.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class AthleteDB(SQLModel, table=True):
    """A monitored athlete."""

    __tablename__ = "athletes"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255, index=True)
    status: str = Field(default="active", nullable=False, max_length=20)
    sport_id: Optional[str] = Field(default=None, max_length=50)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
