"""Injury database model."""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class InjuryDB(SQLModel, table=True):
    """An injury or illness episode.

    ``days_lost`` is usually filled in when the injury is resolved.
    """

    __tablename__ = "injuries"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", nullable=False, index=True)

    type: str = Field(default="injury", max_length=20)
    body_region: Optional[str] = Field(default=None, max_length=100)
    status: str = Field(default="active", nullable=False, max_length=20, index=True)
    date_occurred: datetime.date = Field(nullable=False)
    date_resolved: Optional[datetime.date] = Field(default=None)
    days_lost: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
