import logging
import secrets
from collections.abc import Sequence

from sqlalchemy.orm import Session

from event_roster.core.exceptions import ForbiddenError, InvalidInputError
from event_roster.core.locks import ensure_lock_held, event_lock
from event_roster.crud.events import event_store
from event_roster.crud.roster import roster_store
from event_roster.database.db import transaction
from event_roster.models.events import Event
from event_roster.models.roster import Participant, Reservation

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Event, participants, and reservations deleted"


def generate_password() -> str:
    """8 lowercase hex characters from 4 random bytes."""
    return secrets.token_hex(4)


def create_event(
    db: Session, *, name: str, time: str, max_slots: int, observations: str | None = None
) -> tuple[int, str]:
    """Create an event. Returns (id, password); the password is never returned again."""
    if not name:
        raise InvalidInputError("Missing required field: name")
    if not time:
        raise InvalidInputError("Missing required field: time")
    if isinstance(max_slots, bool) or not isinstance(max_slots, int) or max_slots < 1:
        raise InvalidInputError("maxSlots must be a positive integer")

    password = generate_password()
    with transaction(db):
        event_id = event_store.create_event(
            db,
            name=name,
            time=time,
            max_slots=max_slots,
            observations="[]" if observations is None else observations,
            password=password,
        )

    logger.info("Created event %s with %s slots", event_id, max_slots)
    return event_id, password


def delete_event(db: Session, *, event_id: int, password: str) -> None:
    """
    Delete an event together with its participants and reservations.
    The whole removal holds the event's lock and commits as one transaction.
    """
    if not password:
        raise InvalidInputError("Missing password")

    with event_lock(event_id) as lock:
        with transaction(db):
            stored = event_store.get_secret(db, event_id)
            if stored != password:
                logger.warning("Rejected delete of event %s: wrong password", event_id)
                raise ForbiddenError()
            roster_store.delete_by_event(db, event_id)
            event_store.delete_event(db, event_id)
            ensure_lock_held(lock, event_id)

    logger.info("Deleted event %s", event_id)


def list_events(db: Session) -> Sequence[Event]:
    return event_store.list_events(db)


def get_event(db: Session, event_id: int) -> Event:
    return event_store.get_event(db, event_id)


def list_participants(db: Session, event_id: int) -> Sequence[Participant]:
    return roster_store.list_participants(db, event_id)


def list_reservations(db: Session, event_id: int) -> Sequence[Reservation]:
    return roster_store.list_reservations(db, event_id)


def get_event_stats(db: Session, event_id: int) -> dict:
    event = event_store.get_event(db, event_id)
    participant_count = roster_store.count_participants(db, event_id)
    reservation_count = roster_store.count_reservations(db, event_id)

    return {
        "event_id": event.id,
        "max_slots": event.max_slots,
        "participant_count": participant_count,
        "reservation_count": reservation_count,
        "available_slots": max(0, event.max_slots - participant_count),
    }


def get_overall_report(db: Session) -> dict:
    """Return aggregated totals across all events."""
    total_events, total_slots = event_store.totals(db)
    total_participants, total_reservations = roster_store.totals(db)

    return {
        "total_events": total_events,
        "total_slots": total_slots,
        "total_participants": total_participants,
        "total_reservations": total_reservations,
    }
