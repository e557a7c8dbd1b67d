"""
Injury schemas.

``days_lost`` is normally only populated once an injury is resolved.
Ongoing injuries are treated as still accruing days, counted from
``date_occurred`` to the reference date.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

InjuryStatus = Literal["active", "rehab", "monitoring", "resolved"]


class InjuryRecord(BaseModel):
    """A single injury or illness episode."""

    id: Optional[str] = None
    athlete_id: str
    athlete_name: Optional[str] = None
    type: str = Field("injury", description="injury or illness")
    body_region: Optional[str] = None
    status: InjuryStatus
    date_occurred: datetime.date
    date_resolved: Optional[datetime.date] = None
    days_lost: Optional[int] = Field(None, ge=0)


class InjuryRegionSummary(BaseModel):
    """Injury count and days lost for one body region."""

    body_region: str
    count: int
    days_lost: int


class InjuryTypeSummary(BaseModel):
    """Injury count for one injury type."""

    type: str
    count: int


class InjurySummaryResponse(BaseModel):
    by_body_region: list[InjuryRegionSummary]
    by_type: list[InjuryTypeSummary]
