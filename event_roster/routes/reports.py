from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from event_roster.database.db import get_db
from event_roster.schemas.reports import ReportOut
from event_roster.services.events import get_overall_report

router = APIRouter(prefix="/report", tags=["reports"])


@router.get("", response_model=ReportOut)
def overall_report(db: Session = Depends(get_db)):
    """Aggregate report across all events."""
    return get_overall_report(db)
