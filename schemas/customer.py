from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from schemas.common import SalonModel, UTCDateTime, generate_id, reject_null, utcnow


class Address(SalonModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class CustomerBase(SalonModel):
    name: str
    phone: str
    email: Optional[EmailStr] = None
    address: Optional[Address] = None
    notes: Optional[str] = None
    active: bool = True

    @field_validator("name", "phone")
    @classmethod
    def required_text(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} is required")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        # An empty string from the form means "no email"
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(SalonModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[Address] = None
    notes: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("name", "phone", "active")
    @classmethod
    def required_fields(cls, value, info):
        value = reject_null(value)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError(f"{info.field_name} is required")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value


class CustomerVisitUpdate(SalonModel):
    last_visit: Optional[UTCDateTime] = None
    last_consultation_form_date: Optional[UTCDateTime] = None


class Customer(CustomerBase):
    customer_id: str
    last_visit: Optional[datetime] = None
    last_consultation_form_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


def generate_customer_id(name: str) -> str:
    return generate_id("CU", name)
