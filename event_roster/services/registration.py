import enum
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from event_roster.core.exceptions import InvalidInputError
from event_roster.core.locks import ensure_lock_held, event_lock
from event_roster.crud.events import event_store
from event_roster.crud.roster import roster_store
from event_roster.database.db import transaction

logger = logging.getLogger(__name__)

WAITLIST_MESSAGE = "Added to reservation list"


class PlacementStatus(str, enum.Enum):
    CONFIRMED = "CONFIRMED"
    WAITLISTED = "WAITLISTED"


@dataclass(frozen=True)
class Placement:
    status: PlacementStatus
    registrant_id: int

    @property
    def confirmed(self) -> bool:
        return self.status is PlacementStatus.CONFIRMED


def _require(value, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidInputError(f"Missing required field: {field}")
    return value


def register(db: Session, *, event_id: int, nickname: str, vocation: str) -> Placement:
    """
    Place a registrant on the event's roster.

    While fewer than max_slots participants exist the registrant is confirmed,
    otherwise it goes to the reservation list. The count, the comparison and the
    insert run under the event's Redis lock and inside one transaction, so
    concurrent registrations can never push the participant count past max_slots.
    """
    _require(nickname, "nickname")
    _require(vocation, "vocation")

    with event_lock(event_id) as lock:
        with transaction(db):
            placement = _register_in_transaction(db, event_id, nickname, vocation)
            ensure_lock_held(lock, event_id)

    logger.info(
        "Registrant %s on event %s: %s", placement.registrant_id, event_id, placement.status.value
    )
    return placement


def _register_in_transaction(db: Session, event_id: int, nickname: str, vocation: str) -> Placement:
    """Internal function to place a registrant within a transaction."""
    max_slots = event_store.get_max_slots(db, event_id, for_update=True)
    count = roster_store.count_participants(db, event_id)

    if count < max_slots:
        participant_id = roster_store.insert_participant(db, event_id, nickname, vocation)
        return Placement(PlacementStatus.CONFIRMED, participant_id)

    reservation_id = roster_store.insert_reservation(db, event_id, nickname, vocation)
    return Placement(PlacementStatus.WAITLISTED, reservation_id)
