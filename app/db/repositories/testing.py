"""
Testing repository.

Metrics, testing sessions and trial results.  Trial results are always
returned joined with their session, which carries the athlete and date.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.testing import MetricDB, TestingSessionDB, TrialResultDB


class TestingRepository:
    """Repository for metric, testing session and trial result reads."""

    __test__ = False

    def __init__(self, session: Session):
        self.session = session

    def get_metric(self, metric_id: int) -> Optional[MetricDB]:
        return self.session.get(MetricDB, metric_id)

    def list_metrics(self) -> list[MetricDB]:
        statement = select(MetricDB).order_by(MetricDB.name, MetricDB.id)
        return list(self.session.exec(statement).all())

    def list_session_dates(self, start: datetime.date, end: datetime.date) -> list[datetime.date]:
        statement = (select(TestingSessionDB.date).where(TestingSessionDB.date >= start,
                                                         TestingSessionDB.date <= end, )
                     .order_by(TestingSessionDB.date))
        return list(self.session.exec(statement).all())

    def list_results(self, athlete_id: Optional[int] = None,
                     metric_id: Optional[int] = None, ) -> list[tuple[TrialResultDB, TestingSessionDB]]:
        statement = select(TrialResultDB, TestingSessionDB).where(TrialResultDB.session_id == TestingSessionDB.id)
        if athlete_id is not None:
            statement = statement.where(TestingSessionDB.athlete_id == athlete_id)
        if metric_id is not None:
            statement = statement.where(TrialResultDB.metric_id == metric_id)
        statement = statement.order_by(TestingSessionDB.date, TrialResultDB.id)
        return list(self.session.exec(statement).all())
