"""
Threshold settings repository.

Key/value reads and upserts for :class:`ThresholdSettingDB`.
"""

import datetime

from sqlmodel import Session, select

from app.models.threshold_setting import ThresholdSettingDB


class ThresholdSettingRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> dict[str, str]:
        rows = self.session.exec(select(ThresholdSettingDB)).all()
        return {row.key: row.value for row in rows}

    def upsert_many(self, values: dict[str, str]) -> None:
        """Insert or update every key in one transaction."""
        now = datetime.datetime.utcnow()
        for key, value in values.items():
            row = self.session.get(ThresholdSettingDB, key)
            if row is None:
                row = ThresholdSettingDB(key=key, value=value, updated_at=now)
            else:
                row.value = value
                row.updated_at = now
            self.session.add(row)
        self.session.commit()
