from typing import List, Optional
import logging
from schemas.service import Service, ServiceCreate, ServiceUpdate, generate_service_id
from schemas.common import utcnow
from config.database import Database

logger = logging.getLogger(__name__)


async def create_service(db: Database, service: ServiceCreate) -> Service:
    """Create a new service"""
    service_dict = service.model_dump()
    service_dict["service_id"] = generate_service_id(service.name)
    service_dict["created_at"] = utcnow()
    service_dict["updated_at"] = service_dict["created_at"]

    await db.services.insert_one(service_dict)
    logger.info(f"Created service {service_dict['service_id']} ({service.name})")
    return Service(**service_dict)


async def get_service(db: Database, service_id: str) -> Optional[Service]:
    """Get a service by ID"""
    service = await db.services.find_one({"service_id": service_id})
    if service:
        return Service(**service)
    return None


async def get_all_services(db: Database, category: Optional[str] = None, active: Optional[bool] = None) -> List[Service]:
    """Get all services, optionally narrowed to a category or active state"""
    query = {}
    if category:
        query["category"] = category
    if active is not None:
        query["active"] = active
    services = await db.services.find(query).sort("name", 1).to_list(length=None)
    return [Service(**service) for service in services]


async def get_categories(db: Database) -> List[str]:
    categories = await db.services.distinct("category")
    return sorted(category for category in categories if category)


async def update_service(db: Database, service_id: str, service_data: ServiceUpdate) -> Optional[Service]:
    """Update a service with the provided data"""
    update = service_data.model_dump(exclude_unset=True)
    update["updated_at"] = utcnow()

    result = await db.services.update_one(
        {"service_id": service_id},
        {"$set": update}
    )

    if result.matched_count:
        return await get_service(db, service_id)
    return None


async def delete_service(db: Database, service_id: str) -> bool:
    result = await db.services.delete_one({"service_id": service_id})
    if result.deleted_count:
        logger.info(f"Deleted service {service_id}")
    return result.deleted_count > 0
