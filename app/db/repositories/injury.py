"""Injury repository."""

from typing import Optional

from sqlmodel import Session, select

from app.models.injury import InjuryDB


class InjuryRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_all(self, athlete_id: Optional[int] = None) -> list[InjuryDB]:
        statement = select(InjuryDB)
        if athlete_id is not None:
            statement = statement.where(InjuryDB.athlete_id == athlete_id)
        statement = statement.order_by(InjuryDB.date_occurred, InjuryDB.id)
        return list(self.session.exec(statement).all())
