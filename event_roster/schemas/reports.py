from event_roster.schemas.events import CamelModel


class ReportOut(CamelModel):
    total_events: int
    total_slots: int
    total_participants: int
    total_reservations: int
