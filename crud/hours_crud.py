from typing import List, Optional
from datetime import date
import logging
from schemas.hours import HoursEntry, HoursEntryCreate, generate_entry_id
from schemas.common import utcnow
from config.database import Database

logger = logging.getLogger(__name__)


async def save_hours(db: Database, entry: HoursEntryCreate) -> HoursEntry:
    """Record hours for a therapist on a day, replacing any earlier figure for that day."""
    day = entry.date.isoformat()
    existing = await db.therapist_hours.find_one({"therapist_id": entry.therapist_id, "date": day})

    if existing:
        await db.therapist_hours.update_one(
            {"entry_id": existing["entry_id"]},
            {"$set": {"hours": entry.hours, "updated_at": utcnow()}}
        )
        entry_id = existing["entry_id"]
    else:
        entry_id = generate_entry_id(entry.therapist_id)
        await db.therapist_hours.insert_one({
            "entry_id": entry_id,
            "therapist_id": entry.therapist_id,
            "date": day,
            "hours": entry.hours,
            "updated_at": utcnow()
        })

    logger.info(f"Recorded {entry.hours}h for therapist {entry.therapist_id} on {day}")
    saved = await db.therapist_hours.find_one({"entry_id": entry_id})
    return HoursEntry(**saved)


async def get_hours(db: Database, therapist_id: Optional[str] = None, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[HoursEntry]:
    query = {}
    if therapist_id:
        query["therapist_id"] = therapist_id
    date_range = {}
    if start_date:
        date_range["$gte"] = start_date.isoformat()
    if end_date:
        date_range["$lte"] = end_date.isoformat()
    if date_range:
        query["date"] = date_range

    entries = await db.therapist_hours.find(query).sort("date", 1).to_list(length=None)
    return [HoursEntry(**entry) for entry in entries]


async def total_hours(db: Database, therapist_id: str, start_date: date, end_date: date) -> float:
    entries = await get_hours(db, therapist_id, start_date, end_date)
    return sum(entry.hours for entry in entries)


async def delete_hours(db: Database, entry_id: str) -> bool:
    result = await db.therapist_hours.delete_one({"entry_id": entry_id})
    return result.deleted_count > 0
