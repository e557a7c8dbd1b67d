"""Week-over-week and compliance schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class WeekSummary(BaseModel):
    """Aggregates over one 7-day window."""

    sessions: int
    total_load: int
    avg_rpe: float = Field(..., description="0 when the week has no sessions")
    avg_readiness: Optional[float] = Field(None, description="None when the week has no wellness check-ins", )


class WeekChanges(BaseModel):
    """Percent change per metric; None when there is no baseline."""

    sessions_percent: Optional[int] = None
    load_percent: Optional[int] = None
    rpe_percent: Optional[int] = None
    readiness_percent: Optional[int] = None


class WeekOverWeek(BaseModel):
    current_week: WeekSummary
    previous_week: WeekSummary
    changes: WeekChanges
    load_spike_alert: bool


class ComplianceRate(BaseModel):
    """Logged sessions against the expected session count.

    Percentages are not capped: values above 100 mean over-compliance.
    """

    weekly_actual: int
    weekly_target: int
    weekly_percent: int
    monthly_actual: int
    monthly_target: int
    monthly_percent: int
