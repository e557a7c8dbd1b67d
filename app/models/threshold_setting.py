"""
Threshold settings database model.

Key/value rows (``acwr_moderate``, ``acwr_high``, ``load_spike_percent``,
``default_days``).  Values are stored as text and parsed when read.
"""

import datetime

from sqlmodel import Field, SQLModel


class ThresholdSettingDB(SQLModel, table=True):
    __tablename__ = "threshold_settings"

    key: str = Field(primary_key=True, max_length=50)
    value: str = Field(nullable=False, max_length=50)

    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
