"""
Daily training load schema.

One entry per logged session.  ``training_load`` is the session-RPE
load (``rpe * duration_minutes``) fixed when the entry was created; the
analytics engine only consumes it and never recomputes it.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DailyLoadEntry(BaseModel):
    """A single logged training session."""

    id: Optional[str] = None
    athlete_id: str
    athlete_name: Optional[str] = None
    date: datetime.date
    rpe: int = Field(..., ge=1, le=10, description="Rate of perceived exertion (1-10)")
    duration_minutes: float = Field(..., gt=0.0, description="Session duration in minutes")
    training_load: float = Field(..., ge=0.0, description="rpe x duration_minutes")
    session_type: str = Field("", description="Free-text session category")
