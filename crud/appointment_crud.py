from typing import Dict, List, Optional
from datetime import datetime
import logging
from pymongo import DESCENDING
from schemas.appointment import (
    Appointment, AppointmentCreate, AppointmentUpdate,
    CustomerDetails, ServiceDetails, calculate_total_amount, generate_appointment_id
)
from schemas.common import utcnow
from config.database import Database
from services.errors import InvalidInputError

# Set up logging
logger = logging.getLogger(__name__)

OVERLAP_MESSAGE = "There is an overlapping appointment"


async def _populate(db: Database, appointments: List[dict]) -> List[Appointment]:
    """Attach customer and service details to raw appointment documents."""
    customer_ids = {appt["customer_id"] for appt in appointments}
    service_ids = {booked["service_id"] for appt in appointments for booked in appt.get("services", [])}

    customers: Dict[str, dict] = {}
    if customer_ids:
        found = await db.customers.find({"customer_id": {"$in": list(customer_ids)}}).to_list(length=None)
        customers = {customer["customer_id"]: customer for customer in found}

    services: Dict[str, dict] = {}
    if service_ids:
        found = await db.services.find({"service_id": {"$in": list(service_ids)}}).to_list(length=None)
        services = {service["service_id"]: service for service in found}

    enriched = []
    for appt in appointments:
        customer = customers.get(appt["customer_id"])
        details = [
            ServiceDetails(
                service_id=service["service_id"],
                name=service["name"],
                price=service["price"],
                duration=service["duration"]
            )
            for service in (services.get(booked["service_id"]) for booked in appt.get("services", []))
            if service
        ]
        enriched.append(Appointment(
            **appt,
            customer=CustomerDetails(
                customer_id=customer["customer_id"],
                name=customer["name"],
                email=customer.get("email"),
                phone=customer.get("phone")
            ) if customer else None,
            service_details=details
        ))
    return enriched


async def find_overlapping(db: Database, start_time: datetime, end_time: datetime, exclude_appointment_id: Optional[str] = None) -> Optional[dict]:
    """Any appointment whose [start, end) interval intersects the given one."""
    query = {
        "start_time": {"$lt": end_time},
        "end_time": {"$gt": start_time},
    }
    if exclude_appointment_id:
        query["appointment_id"] = {"$ne": exclude_appointment_id}
    return await db.appointments.find_one(query)


async def create_appointment(db: Database, appointment: AppointmentCreate) -> Appointment:
    """Create a new appointment in the database.

    No overlap check happens here; only rescheduling through
    update_appointment is checked.
    """
    appointment_dict = appointment.model_dump()
    appointment_dict["appointment_id"] = generate_appointment_id(appointment.customer_id)
    appointment_dict["total_amount"] = calculate_total_amount(appointment.services)
    appointment_dict["created_at"] = utcnow()
    appointment_dict["updated_at"] = appointment_dict["created_at"]

    await db.appointments.insert_one(appointment_dict)
    logger.info(f"Created appointment {appointment_dict['appointment_id']} for customer {appointment.customer_id}")

    appointment_dict.pop("_id", None)
    return (await _populate(db, [appointment_dict]))[0]


async def get_appointment(db: Database, appointment_id: str) -> Optional[Appointment]:
    appointment = await db.appointments.find_one({"appointment_id": appointment_id})
    if not appointment:
        return None
    return (await _populate(db, [appointment]))[0]


async def get_all_appointments(db: Database) -> List[Appointment]:
    appointments = await db.appointments.find().sort("start_time", DESCENDING).to_list(length=None)
    return await _populate(db, appointments)


async def update_appointment(db: Database, appointment_id: str, appointment_data: AppointmentUpdate) -> Optional[Appointment]:
    update = appointment_data.model_dump(exclude_unset=True)

    if appointment_data.start_time and appointment_data.end_time:
        # Not atomic with the write below; two concurrent reschedules can both pass
        overlapping = await find_overlapping(
            db, appointment_data.start_time, appointment_data.end_time, exclude_appointment_id=appointment_id
        )
        if overlapping:
            logger.info(f"Rejected reschedule of {appointment_id}: overlaps {overlapping['appointment_id']}")
            raise InvalidInputError(OVERLAP_MESSAGE)

    if appointment_data.services is not None:
        update["total_amount"] = calculate_total_amount(appointment_data.services)
    update["updated_at"] = utcnow()

    result = await db.appointments.update_one(
        {"appointment_id": appointment_id},
        {"$set": update}
    )
    if not result.matched_count:
        return None
    return await get_appointment(db, appointment_id)


async def delete_appointment(db: Database, appointment_id: str) -> bool:
    result = await db.appointments.delete_one({"appointment_id": appointment_id})
    if result.deleted_count:
        logger.info(f"Deleted appointment {appointment_id}")
    return result.deleted_count > 0
