from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from event_roster.core.exceptions import EventNotFoundError, InvalidInputError, StorageFailureError
from event_roster.database.db import get_db
from event_roster.schemas.roster import RegistrantCreate, RegistrantOut, RegistrationOut
from event_roster.services import events as event_service
from event_roster.services.registration import WAITLIST_MESSAGE, register

router = APIRouter(prefix="/events/{event_id}", tags=["roster"])


@router.get("/participants", response_model=list[RegistrantOut])
def list_participants(event_id: int, db: Session = Depends(get_db)):
    return event_service.list_participants(db, event_id)


@router.get("/reservations", response_model=list[RegistrantOut])
def list_reservations(event_id: int, db: Session = Depends(get_db)):
    return event_service.list_reservations(db, event_id)


@router.post("/participants", response_model=RegistrationOut, response_model_exclude_none=True)
def add_participant(event_id: int, payload: RegistrantCreate, db: Session = Depends(get_db)):
    try:
        placement = register(db, event_id=event_id, nickname=payload.nickname, vocation=payload.vocation)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except StorageFailureError as e:
        raise HTTPException(status_code=503, detail=e.message)

    if placement.confirmed:
        return {"id": placement.registrant_id}
    return {"message": WAITLIST_MESSAGE}
