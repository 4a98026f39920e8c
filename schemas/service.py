from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from schemas.common import SalonModel, generate_id, reject_null, utcnow


class ServiceBase(SalonModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    duration: int = Field(ge=0)  # Duration in minutes
    category: str = Field(min_length=1)
    active: bool = True


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(SalonModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None

    @field_validator("name", "price", "duration", "category", "active")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class Service(ServiceBase):
    service_id: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


def generate_service_id(name: str) -> str:
    return generate_id("SV", name)
