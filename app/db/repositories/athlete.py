"""
Athlete repository.

Handles database reads for :class:`AthleteDB`.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.athlete import AthleteDB


class AthleteRepository:
    """Repository for AthleteDB database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, athlete_id: int) -> Optional[AthleteDB]:
        return self.session.get(AthleteDB, athlete_id)

    def list_all(self, status: Optional[str] = None) -> list[AthleteDB]:
        statement = select(AthleteDB)
        if status is not None:
            statement = statement.where(AthleteDB.status == status)
        statement = statement.order_by(AthleteDB.name, AthleteDB.id)
        return list(self.session.exec(statement).all())
