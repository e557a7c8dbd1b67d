"""
Threshold settings schema.

Thresholds are *operational cutoffs*, supplied per request and threaded
through every analytics call as a parameter.  They are never read from
ambient state inside the engine.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ThresholdSettings(BaseModel):
    """Risk-classification cutoffs and the default analysis window."""

    model_config = ConfigDict(frozen=True)

    acwr_moderate: float = Field(1.3, gt=0.0, description="ACWR above this value is moderate risk")
    acwr_high: float = Field(1.5, gt=0.0, description="ACWR above this value is high risk")
    load_spike_percent: float = Field(30.0, ge=0.0,
                                      description="Week-over-week load increase (%) that counts as a spike", )
    default_days: int = Field(30, ge=1, le=365, description="Default rolling-window length in days")

    @model_validator(mode="after")
    def check_acwr_order(self) -> "ThresholdSettings":
        if self.acwr_high < self.acwr_moderate:
            raise ValueError("acwr_high must be greater than or equal to acwr_moderate")
        return self


# Singleton default thresholds
DEFAULT_THRESHOLDS = ThresholdSettings()
