from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from event_roster.core.exceptions import (
    EventNotFoundError,
    ForbiddenError,
    InvalidInputError,
    StorageFailureError,
)
from event_roster.database.db import get_db
from event_roster.schemas.events import (
    EventCreate,
    EventCreated,
    EventDelete,
    EventOut,
    EventStatsOut,
    MessageOut,
)
from event_roster.services import events as event_service

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventOut])
def list_events(db: Session = Depends(get_db)):
    return event_service.list_events(db)


@router.post("", response_model=EventCreated)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    try:
        event_id, password = event_service.create_event(
            db,
            name=payload.name,
            time=payload.time,
            max_slots=payload.max_slots,
            observations=payload.observations,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StorageFailureError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return {"id": event_id, "password": password}


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    try:
        return event_service.get_event(db, event_id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/{event_id}/stats", response_model=EventStatsOut)
def event_stats(event_id: int, db: Session = Depends(get_db)):
    try:
        return event_service.get_event_stats(db, event_id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{event_id}", response_model=MessageOut)
def delete_event(event_id: int, payload: EventDelete, db: Session = Depends(get_db)):
    try:
        event_service.delete_event(db, event_id=event_id, password=payload.password)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=e.message)
    except StorageFailureError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return {"message": event_service.DELETED_MESSAGE}
