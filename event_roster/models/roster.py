from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from event_roster.database.db import Base


class RegistrantMixin:
    """Columns shared by confirmed participants and waitlisted reservations."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    vocation: Mapped[str] = mapped_column(String(100), nullable=False)

    @declared_attr
    def event_id(cls) -> Mapped[int]:
        return mapped_column(ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)


class Participant(RegistrantMixin, Base):
    __tablename__ = "participants"

    event: Mapped["Event"] = relationship(back_populates="participants")


class Reservation(RegistrantMixin, Base):
    __tablename__ = "reservations"

    event: Mapped["Event"] = relationship(back_populates="reservations")
