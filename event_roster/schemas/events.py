
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ---------- Event ----------
class EventCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    time: str = Field(min_length=1, max_length=100)
    max_slots: int = Field(ge=1)
    observations: str | None = None


class EventCreated(BaseModel):
    id: int
    password: str


class EventOut(CamelModel):
    id: int
    name: str
    time: str
    max_slots: int
    observations: str


class EventDelete(BaseModel):
    password: str = Field(min_length=1)


class EventStatsOut(CamelModel):
    event_id: int
    max_slots: int
    participant_count: int
    reservation_count: int
    available_slots: int


class MessageOut(BaseModel):
    message: str
