from pydantic import Field, StrictFloat, StrictInt, field_validator
from typing import List, Literal, Optional
from datetime import datetime
from schemas.common import SalonModel, generate_id, utcnow

PaymentMethod = Literal["cash", "card", "other"]
TransactionStatus = Literal["pending", "completed", "refunded", "cancelled"]

# Whole numbers are accepted; booleans and numeric strings are not
Amount = StrictFloat


class CustomerSnapshot(SalonModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None


class TherapistSnapshot(SalonModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: Optional[str] = None


class LineItem(SalonModel):
    name: str = Field(min_length=1)
    category: Optional[str] = None
    price: Amount = Field(gt=0)
    quantity: StrictInt = Field(gt=0)
    discount: Amount = Field(0, ge=0)


class TransactionCreate(SalonModel):
    customer: CustomerSnapshot
    therapist: TherapistSnapshot
    items: List[LineItem] = Field(min_length=1)
    subtotal: Amount = Field(gt=0)
    discount: Amount = Field(0, ge=0)
    total: Amount = Field(gt=0)
    payment_method: PaymentMethod
    notes: Optional[str] = None

    @field_validator("payment_method", mode="before")
    @classmethod
    def lowercase_payment_method(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Transaction(SalonModel):
    transaction_id: str
    date: datetime
    customer: CustomerSnapshot
    therapist: TherapistSnapshot
    items: List[LineItem]
    subtotal: float
    discount: float = 0
    total: float
    payment_method: PaymentMethod
    status: TransactionStatus = "completed"
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


def generate_transaction_id(customer_name: str) -> str:
    return generate_id("TX", customer_name, length=6)
