from typing import List, Optional
from datetime import datetime
import logging
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError
from schemas.customer import Customer, CustomerCreate, CustomerUpdate, CustomerVisitUpdate, generate_customer_id
from schemas.common import utcnow
from config.database import Database
from services.errors import IntegrityViolationError

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "A customer with this email already exists"


async def _ensure_unique_email(db: Database, email: Optional[str], exclude_customer_id: Optional[str] = None):
    if not email:
        return
    query = {"email": email}
    if exclude_customer_id:
        query["customer_id"] = {"$ne": exclude_customer_id}
    if await db.customers.find_one(query):
        raise IntegrityViolationError(DUPLICATE_EMAIL)


async def create_customer(db: Database, customer: CustomerCreate) -> Customer:
    await _ensure_unique_email(db, customer.email)

    customer_dict = customer.model_dump(exclude_none=True)
    customer_dict["customer_id"] = generate_customer_id(customer.name)
    customer_dict["last_visit"] = None
    customer_dict["last_consultation_form_date"] = None
    customer_dict["created_at"] = utcnow()
    customer_dict["updated_at"] = customer_dict["created_at"]

    try:
        await db.customers.insert_one(customer_dict)
    except DuplicateKeyError:
        raise IntegrityViolationError(DUPLICATE_EMAIL)

    logger.info(f"Created customer {customer_dict['customer_id']}")
    return Customer(**customer_dict)


async def get_customer(db: Database, customer_id: str) -> Optional[Customer]:
    customer = await db.customers.find_one({"customer_id": customer_id})
    return Customer(**customer) if customer else None


async def get_all_customers(db: Database, active: Optional[bool] = None) -> List[Customer]:
    query = {} if active is None else {"active": active}
    customers = await db.customers.find(query).sort("created_at", DESCENDING).to_list(length=None)
    return [Customer(**customer) for customer in customers]


async def update_customer(db: Database, customer_id: str, customer_data: CustomerUpdate) -> Optional[Customer]:
    update = customer_data.model_dump(exclude_unset=True)
    await _ensure_unique_email(db, update.get("email"), exclude_customer_id=customer_id)
    update["updated_at"] = utcnow()

    changes = {"$set": update}
    # A cleared email is removed, not stored as null, so the sparse unique index skips it
    if "email" in update and update["email"] is None:
        del update["email"]
        changes["$unset"] = {"email": ""}

    try:
        result = await db.customers.update_one({"customer_id": customer_id}, changes)
    except DuplicateKeyError:
        raise IntegrityViolationError(DUPLICATE_EMAIL)

    if not result.matched_count:
        return None
    return await get_customer(db, customer_id)


async def record_visit_dates(db: Database, customer_id: str, visit: CustomerVisitUpdate) -> Optional[Customer]:
    """Set lastVisit and/or lastConsultationFormDate, leaving everything else alone."""
    update = visit.model_dump(exclude_unset=True, exclude_none=True)
    update["updated_at"] = utcnow()
    result = await db.customers.update_one({"customer_id": customer_id}, {"$set": update})
    if not result.matched_count:
        return None
    return await get_customer(db, customer_id)


async def set_last_consultation_form_date(db: Database, customer_id: str, completed_at: datetime) -> bool:
    result = await db.customers.update_one(
        {"customer_id": customer_id},
        {"$set": {"last_consultation_form_date": completed_at, "updated_at": utcnow()}}
    )
    return result.matched_count > 0


async def delete_customer(db: Database, customer_id: str) -> bool:
    result = await db.customers.delete_one({"customer_id": customer_id})
    if result.deleted_count:
        logger.info(f"Deleted customer {customer_id}")
    return result.deleted_count > 0
