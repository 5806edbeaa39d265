from pydantic import BaseModel, Field

from event_roster.schemas.events import CamelModel


class RegistrantCreate(BaseModel):
    nickname: str = Field(min_length=1, max_length=100)
    vocation: str = Field(min_length=1, max_length=100)


class RegistrantOut(CamelModel):
    id: int
    event_id: int
    nickname: str
    vocation: str


class RegistrationOut(BaseModel):
    """{id} when the registrant got a slot, {message} when it was waitlisted."""

    id: int | None = None
    message: str | None = None
