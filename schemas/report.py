from pydantic import Field, model_validator
from typing import List, Optional
from datetime import date as date_type
from schemas.common import SalonModel, UTCDateTime
from schemas.transaction import Transaction


class ReportQuery(SalonModel):
    start_date: UTCDateTime
    end_date: UTCDateTime
    therapist_id: Optional[str] = None
    customer_id: Optional[str] = None
    category: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class ReportSummary(SalonModel):
    total: float
    subtotal: float
    discount: float
    transaction_count: int


class SummaryReport(SalonModel):
    transactions: List[Transaction]
    summary: ReportSummary


class TransactionReport(SalonModel):
    transactions: List[Transaction]
    count: int


class UniqueValues(SalonModel):
    therapists: List[str] = []
    customers: List[str] = []
    categories: List[str] = []


class CommissionQuery(SalonModel):
    therapist_id: str = Field(min_length=1)
    start_date: date_type
    end_date: date_type


class Commission(SalonModel):
    therapist_id: str
    therapist_name: str
    employment_type: Optional[str] = None
    revenue: float = 0
    hours: float = 0
    wage: float = 0
    holiday_pay: float = 0
    employer_nic: float = 0
    commission: float = 0
    salon_share: float = 0
    therapist_share: float = 0


class DashboardStats(SalonModel):
    today: ReportSummary
    month: ReportSummary
    customer_count: int
    recent_transactions: List[Transaction] = []
