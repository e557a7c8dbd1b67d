"""Training streak and achievement badge schemas."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TrainingStreaks(BaseModel):
    """Consecutive-day training runs.

    ``longest_streak`` is always >= ``current_streak``.
    """

    current_streak: int = Field(..., ge=0, description="Run ending today or yesterday")
    longest_streak: int = Field(..., ge=0, description="Longest run anywhere in history")


class AchievementBadge(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    earned: bool
    earned_date: Optional[datetime.date] = None
    progress: int = Field(..., ge=0, description="Progress towards target, capped at target")
    target: int
