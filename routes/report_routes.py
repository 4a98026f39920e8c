from fastapi import APIRouter, Depends
from schemas.report import (
    Commission, CommissionQuery, ReportQuery, SummaryReport, TransactionReport, UniqueValues
)
from services import report_service
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    dependencies=[Depends(require_session)]
)


@router.post("/summary", response_model=SummaryReport)
async def get_summary_report(report: ReportQuery, db: Database = Depends(get_db)):
    return await report_service.summary_report(db, report)


@router.post("/transactions", response_model=TransactionReport)
async def get_transaction_report(report: ReportQuery, db: Database = Depends(get_db)):
    return await report_service.transaction_report(db, report)


@router.get("/unique", response_model=UniqueValues)
async def get_unique_values(db: Database = Depends(get_db)):
    return await report_service.unique_values(db)


@router.post("/commission", response_model=Commission)
async def get_commission(query: CommissionQuery, db: Database = Depends(get_db)):
    return await report_service.therapist_commission(db, query)
