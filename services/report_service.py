from datetime import datetime, timedelta
from typing import List
import logging
from config.database import Database
from crud import transaction_crud, hours_crud, user_crud
from schemas.report import (
    Commission, CommissionQuery, DashboardStats, ReportQuery, ReportSummary, SummaryReport,
    TransactionReport, UniqueValues
)
from schemas.transaction import Transaction
from services.errors import NotFoundError

logger = logging.getLogger(__name__)

HOLIDAY_PAY_RATE = 0.12
EMPLOYER_NIC_RATE = 0.138
COMMISSION_RATE = 0.10
SELF_EMPLOYED_SHARE = 0.40

ALL = "all"


def build_query(report: ReportQuery) -> dict:
    """Date range is inclusive on both ends; "all" or a missing filter matches everything."""
    query = {"date": {"$gte": report.start_date, "$lte": report.end_date}}
    if report.therapist_id and report.therapist_id != ALL:
        query["therapist.id"] = report.therapist_id
    if report.customer_id and report.customer_id != ALL:
        query["customer.id"] = report.customer_id
    if report.category and report.category != ALL:
        query["items.category"] = report.category
    return query


def summarize(transactions: List[Transaction]) -> ReportSummary:
    return ReportSummary(
        total=round(sum(tx.total for tx in transactions), 2),
        subtotal=round(sum(tx.subtotal for tx in transactions), 2),
        discount=round(sum(tx.discount for tx in transactions), 2),
        transaction_count=len(transactions)
    )


async def summary_report(db: Database, report: ReportQuery) -> SummaryReport:
    transactions = await transaction_crud.find_transactions(db, build_query(report))
    logger.info(f"Summary report {report.start_date} - {report.end_date}: {len(transactions)} transactions")
    return SummaryReport(transactions=transactions, summary=summarize(transactions))


async def transaction_report(db: Database, report: ReportQuery) -> TransactionReport:
    transactions = await transaction_crud.find_transactions(db, build_query(report))
    return TransactionReport(transactions=transactions, count=len(transactions))


async def unique_values(db: Database) -> UniqueValues:
    therapists = await db.transactions.distinct("therapist.name")
    customers = await db.transactions.distinct("customer.name")
    categories = await db.transactions.distinct("items.category")
    return UniqueValues(
        therapists=sorted(v for v in therapists if v),
        customers=sorted(v for v in customers if v),
        categories=sorted(v for v in categories if v)
    )


async def therapist_commission(db: Database, query: CommissionQuery) -> Commission:
    """Work out how a therapist's takings over a period split between them and the salon.

    Employed therapists are paid hours * hourly rate plus 12% holiday pay; the
    salon also bears 13.8% employer NIC on the wage. On top of that they earn
    10% of whatever revenue is left after those costs. Self-employed
    therapists keep 40% of revenue.
    """
    therapist = await user_crud.get_user(db, query.therapist_id)
    if not therapist:
        raise NotFoundError("Therapist not found")

    start = datetime.combine(query.start_date, datetime.min.time())
    end = datetime.combine(query.end_date, datetime.min.time()) + timedelta(days=1)
    transactions = await transaction_crud.find_transactions(db, {
        "therapist.id": query.therapist_id,
        "date": {"$gte": start, "$lt": end}
    })
    revenue = sum(tx.total for tx in transactions)
    hours = await hours_crud.total_hours(db, query.therapist_id, query.start_date, query.end_date)

    result = Commission(
        therapist_id=therapist.user_id,
        therapist_name=therapist.name,
        employment_type=therapist.employment_type,
        revenue=round(revenue, 2),
        hours=hours
    )

    if therapist.employment_type == "employed":
        wage = hours * (therapist.hourly_rate or 0)
        holiday_pay = wage * HOLIDAY_PAY_RATE
        employer_nic = wage * EMPLOYER_NIC_RATE
        commission = max(0.0, (revenue - (wage + holiday_pay + employer_nic)) * COMMISSION_RATE)
        therapist_share = wage + holiday_pay + commission

        result.wage = round(wage, 2)
        result.holiday_pay = round(holiday_pay, 2)
        result.employer_nic = round(employer_nic, 2)
        result.commission = round(commission, 2)
        result.therapist_share = round(therapist_share, 2)
        result.salon_share = round(revenue - therapist_share, 2)
    else:
        result.therapist_share = round(revenue * SELF_EMPLOYED_SHARE, 2)
        result.salon_share = round(revenue * (1 - SELF_EMPLOYED_SHARE), 2)

    return result


async def dashboard_stats(db: Database, now: datetime) -> DashboardStats:
    """Takings for today and the current month plus headline counts."""
    day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    month_start = day_start.replace(day=1)

    today = await transaction_crud.find_transactions(db, {"date": {"$gte": day_start, "$lte": now}})
    month = await transaction_crud.find_transactions(db, {"date": {"$gte": month_start, "$lte": now}})

    return DashboardStats(
        today=summarize(today),
        month=summarize(month),
        customer_count=await db.customers.count_documents({}),
        recent_transactions=await transaction_crud.get_recent_transactions(db, limit=10)
    )
