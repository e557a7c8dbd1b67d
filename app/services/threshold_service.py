"""
Threshold settings service.

Stored key/value rows override the environment defaults from
:mod:`app.core.config`.  The engine itself never reads settings: callers
pass the returned :class:`ThresholdSettings` into every computation.
"""

import math

from loguru import logger
from pydantic import ValidationError
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.threshold_setting import ThresholdSettingRepository
from app.schemas.thresholds import ThresholdSettings

THRESHOLD_KEYS = ("acwr_moderate", "acwr_high", "load_spike_percent", "default_days")


class ThresholdService:
    """Read and write the stored threshold settings."""

    def __init__(self, session: Session):
        self.repository = ThresholdSettingRepository(session)

    def get(self) -> ThresholdSettings:
        defaults = settings.default_thresholds()
        stored = self.repository.get_all()

        values = defaults.model_dump()
        for key in THRESHOLD_KEYS:
            raw = stored.get(key)
            if raw is None:
                continue
            try:
                value = float(raw)
            except ValueError:
                logger.warning(f"[THRESHOLDS] Ignoring non-numeric stored value {key}={raw!r}")
                continue
            if not math.isfinite(value):
                logger.warning(f"[THRESHOLDS] Ignoring non-finite stored value {key}={raw!r}")
                continue
            values[key] = value

        try:
            return ThresholdSettings(**{**values, "default_days": int(values["default_days"])})
        except ValidationError as e:
            logger.warning(f"[THRESHOLDS] Stored thresholds are invalid, using defaults: {e.error_count()} error(s)")
            return defaults

    def update(self, data: ThresholdSettings) -> ThresholdSettings:
        self.repository.upsert_many({key: str(getattr(data, key)) for key in THRESHOLD_KEYS})
        logger.info(f"[THRESHOLDS] Updated: {data.model_dump()}")
        return self.get()
