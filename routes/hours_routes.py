from fastapi import APIRouter, HTTPException, Depends
from typing import List, Optional
from datetime import date
from schemas.hours import HoursEntry, HoursEntryCreate
from crud import hours_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/hours",
    tags=["hours"],
    dependencies=[Depends(require_session)]
)


@router.get("/", response_model=List[HoursEntry])
async def get_hours(
    therapistId: Optional[str] = None,
    startDate: Optional[date] = None,
    endDate: Optional[date] = None,
    db: Database = Depends(get_db)
):
    return await hours_crud.get_hours(db, therapistId, startDate, endDate)


@router.post("/", response_model=HoursEntry)
async def save_hours(entry: HoursEntryCreate, db: Database = Depends(get_db)):
    return await hours_crud.save_hours(db, entry)


@router.delete("/{entry_id}")
async def delete_hours(entry_id: str, db: Database = Depends(get_db)):
    if not await hours_crud.delete_hours(db, entry_id):
        raise HTTPException(status_code=404, detail="Hours entry not found")
    return {"message": "Hours entry deleted successfully"}
