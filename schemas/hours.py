from pydantic import Field
from datetime import date as date_type, datetime
from schemas.common import SalonModel, generate_id, utcnow


class HoursEntryCreate(SalonModel):
    therapist_id: str = Field(min_length=1)
    date: date_type
    hours: float = Field(ge=0, le=24)


class HoursEntry(SalonModel):
    entry_id: str
    therapist_id: str
    date: str  # YYYY-MM-DD, compared as a string
    hours: float
    updated_at: datetime = Field(default_factory=utcnow)


def generate_entry_id(therapist_id: str) -> str:
    return generate_id("HR", therapist_id)
