"""Wellness check-in repository."""

from sqlmodel import Session, select

from app.models.wellness import WellnessCheckinDB


class WellnessCheckinRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete(self, athlete_id: int) -> list[WellnessCheckinDB]:
        statement = (select(WellnessCheckinDB).where(WellnessCheckinDB.athlete_id == athlete_id)
                     .order_by(WellnessCheckinDB.date))
        return list(self.session.exec(statement).all())
