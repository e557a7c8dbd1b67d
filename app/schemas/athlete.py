"""Athlete lookup schema."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class Athlete(BaseModel):
    """Minimal athlete record used to label analytics output."""

    id: str
    name: str
    status: Literal["active", "inactive"] = "active"
    sport_id: Optional[str] = Field(None, description="Sport the athlete is registered under")
