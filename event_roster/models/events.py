
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from event_roster.database.db import Base


class Event(Base):
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    time: Mapped[str] = mapped_column(String(100), nullable=False)
    max_slots: Mapped[int] = mapped_column(Integer, nullable=False)
    observations: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    password: Mapped[str] = mapped_column(String(64), nullable=False)

    participants: Mapped[list["Participant"]] = relationship(
        back_populates="event", passive_deletes=True, order_by="Participant.id"
    )
    reservations: Mapped[list["Reservation"]] = relationship(
        back_populates="event", passive_deletes=True, order_by="Reservation.id"
    )
