"""
Daily load repository.

Handles database reads for :class:`DailyLoadDB`.  Range queries feed the
ACWR, trend and zone computations.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.daily_load import DailyLoadDB


class DailyLoadRepository:
    """Repository for DailyLoadDB database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete(self, athlete_id: int) -> list[DailyLoadDB]:
        statement = (select(DailyLoadDB).where(DailyLoadDB.athlete_id == athlete_id)
                     .order_by(DailyLoadDB.date, DailyLoadDB.id))
        return list(self.session.exec(statement).all())

    def get_by_date_range(self, start: datetime.date, end: datetime.date,
                          athlete_id: Optional[int] = None, ) -> list[DailyLoadDB]:
        statement = select(DailyLoadDB).where(DailyLoadDB.date >= start, DailyLoadDB.date <= end)
        if athlete_id is not None:
            statement = statement.where(DailyLoadDB.athlete_id == athlete_id)
        statement = statement.order_by(DailyLoadDB.date, DailyLoadDB.id)
        return list(self.session.exec(statement).all())
