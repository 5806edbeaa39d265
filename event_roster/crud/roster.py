from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from event_roster.models.roster import Participant, Reservation


class RosterStore:
    """Reads and writes of the participants and reservations tables. Never commits."""

    def count_participants(self, db: Session, event_id: int) -> int:
        count = db.scalar(select(func.count(Participant.id)).where(Participant.event_id == event_id))
        return int(count or 0)

    def count_reservations(self, db: Session, event_id: int) -> int:
        count = db.scalar(select(func.count(Reservation.id)).where(Reservation.event_id == event_id))
        return int(count or 0)

    def insert_participant(self, db: Session, event_id: int, nickname: str, vocation: str) -> int:
        participant = Participant(event_id=event_id, nickname=nickname, vocation=vocation)
        db.add(participant)
        db.flush()
        return participant.id

    def insert_reservation(self, db: Session, event_id: int, nickname: str, vocation: str) -> int:
        reservation = Reservation(event_id=event_id, nickname=nickname, vocation=vocation)
        db.add(reservation)
        db.flush()
        return reservation.id

    def list_participants(self, db: Session, event_id: int) -> Sequence[Participant]:
        return db.scalars(
            select(Participant).where(Participant.event_id == event_id).order_by(Participant.id)
        ).all()

    def list_reservations(self, db: Session, event_id: int) -> Sequence[Reservation]:
        return db.scalars(
            select(Reservation).where(Reservation.event_id == event_id).order_by(Reservation.id)
        ).all()

    def delete_by_event(self, db: Session, event_id: int) -> None:
        for model in (Participant, Reservation):
            db.execute(
                delete(model).where(model.event_id == event_id).execution_options(synchronize_session="fetch")
            )

    def totals(self, db: Session) -> tuple[int, int]:
        """(participants, reservations) across all events."""
        total_participants = db.scalar(select(func.count(Participant.id)))
        total_reservations = db.scalar(select(func.count(Reservation.id)))
        return int(total_participants or 0), int(total_reservations or 0)


roster_store = RosterStore()
