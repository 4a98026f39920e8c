from pydantic import Field
from typing import Any, Dict, Literal, Optional
from datetime import datetime
from schemas.common import SalonModel, UTCDateTime, generate_id, utcnow

FormStatus = Literal["draft", "completed", "archived"]


class ConsultationFormCreate(SalonModel):
    customer_id: str = Field(min_length=1)
    answers: Dict[str, Any] = {}
    completed_at: Optional[UTCDateTime] = None
    status: FormStatus = "completed"
    notes: Optional[str] = None


class ConsultationForm(SalonModel):
    form_id: str
    customer_id: str
    therapist_id: str
    owner_id: str
    answers: Dict[str, Any] = {}
    completed_at: datetime
    status: FormStatus = "completed"
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


def generate_form_id(customer_id: str) -> str:
    return generate_id("CF", customer_id)
