from pydantic import Field, field_validator, model_validator
from typing import List, Literal, Optional
from datetime import datetime
from schemas.common import SalonModel, UTCDateTime, generate_id, reject_null, utcnow

AppointmentStatus = Literal["scheduled", "completed", "cancelled", "no-show"]
PaymentStatus = Literal["pending", "paid", "partial"]
AppointmentPaymentMethod = Literal["cash", "card", "transfer", "other"]


class BookedService(SalonModel):
    service_id: str
    price: float = Field(ge=0)


class CustomerDetails(SalonModel):
    customer_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class ServiceDetails(SalonModel):
    service_id: str
    name: str
    price: float
    duration: int


class AppointmentBase(SalonModel):
    customer_id: str = Field(min_length=1)
    services: List[BookedService] = []
    start_time: UTCDateTime
    end_time: UTCDateTime
    status: AppointmentStatus = "scheduled"
    notes: Optional[str] = None
    payment_status: PaymentStatus = "pending"
    payment_method: Optional[AppointmentPaymentMethod] = None


class AppointmentCreate(AppointmentBase):

    @model_validator(mode="after")
    def check_interval(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class AppointmentUpdate(SalonModel):
    customer_id: Optional[str] = None
    services: Optional[List[BookedService]] = None
    start_time: Optional[UTCDateTime] = None
    end_time: Optional[UTCDateTime] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    payment_method: Optional[AppointmentPaymentMethod] = None

    @field_validator("customer_id", "services", "start_time", "end_time", "status", "payment_status")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

    @model_validator(mode="after")
    def check_interval(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class Appointment(AppointmentBase):
    appointment_id: str
    total_amount: float = 0
    customer: Optional[CustomerDetails] = None
    service_details: List[ServiceDetails] = []
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


def calculate_total_amount(services: List[BookedService]) -> float:
    return round(sum(service.price for service in services), 2)


def generate_appointment_id(customer_id: str) -> str:
    return generate_id("AP", customer_id)
