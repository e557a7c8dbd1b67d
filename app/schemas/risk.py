"""
Workload-risk schemas.

The ACWR (acute:chronic workload ratio) is an *attention signal*, not an
injury predictor.  Risk levels are operational categories:

- ``low``       - ACWR <= acwr_moderate
- ``moderate``  - acwr_moderate < ACWR <= acwr_high
- ``high``      - ACWR > acwr_high
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field

RiskLevel = Literal["low", "moderate", "high"]
Trajectory = Literal["improving", "stable", "worsening"]
Severity = Literal["warning", "danger"]


class RiskIndicator(BaseModel):
    """Per-athlete ACWR snapshot."""

    athlete_id: str
    athlete_name: str
    acute_load: int = Field(..., description="Sum of load over the last 7 days")
    chronic_load: int = Field(..., description="28-day load divided by 4 (average week)")
    acwr: float = Field(..., ge=0.0, description="acute / chronic, 2 decimals; 0 without chronic load")
    risk_level: RiskLevel
    active_injuries: int = Field(..., ge=0, description="Injuries with status 'active'")
    trajectory: Trajectory = Field("stable", description="Direction of this week's load versus the previous week", )


class RiskAlert(BaseModel):
    """Team-level ACWR alert."""

    athlete_id: str
    athlete_name: str
    message: str
    severity: Severity
    date: datetime.date


class RiskFlag(BaseModel):
    """Athlete-level alert flag.

    ``id`` is stable per flag kind so clients can remember dismissals.
    """

    id: str
    type: Literal["acwr", "fatigue", "overtraining", "recovery"]
    severity: Severity
    title: str
    message: str
