from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from event_roster.core.exceptions import EventNotFoundError
from event_roster.models.events import Event


class EventStore:
    """Reads and writes of the events table. Never commits; callers own the transaction."""

    def create_event(
        self,
        db: Session,
        *,
        name: str,
        time: str,
        max_slots: int,
        observations: str,
        password: str,
    ) -> int:
        event = Event(
            name=name,
            time=time,
            max_slots=max_slots,
            observations=observations,
            password=password,
        )
        db.add(event)
        db.flush()  # gets event.id
        return event.id

    def get_event(self, db: Session, event_id: int) -> Event:
        event = db.scalar(select(Event).where(Event.id == event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_max_slots(self, db: Session, event_id: int, *, for_update: bool = False) -> int:
        """
        Capacity of the event.
        With for_update the event row stays locked until the transaction ends
        (ignored by backends without row locks, such as SQLite).
        """
        stmt = select(Event.max_slots).where(Event.id == event_id)
        if for_update:
            stmt = stmt.with_for_update()
        max_slots = db.scalar(stmt)
        if max_slots is None:
            raise EventNotFoundError(event_id)
        return max_slots

    def get_secret(self, db: Session, event_id: int) -> str:
        password = db.scalar(select(Event.password).where(Event.id == event_id))
        if password is None:
            raise EventNotFoundError(event_id)
        return password

    def delete_event(self, db: Session, event_id: int) -> int:
        res = db.execute(
            delete(Event).where(Event.id == event_id).execution_options(synchronize_session="fetch")
        )
        return res.rowcount  # type: ignore

    def list_events(self, db: Session) -> Sequence[Event]:
        return db.scalars(select(Event).order_by(Event.id)).all()

    def totals(self, db: Session) -> tuple[int, int]:
        """(number of events, sum of their slots)."""
        total_events, total_slots = db.execute(
            select(func.count(Event.id), func.sum(Event.max_slots))
        ).one()
        return int(total_events or 0), int(total_slots or 0)


event_store = EventStore()
