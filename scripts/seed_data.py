from config.database import Database
from crud import service_crud
from schemas.service import ServiceCreate
import asyncio

SERVICE_CATALOG = [
    {"name": "Cut & Blow Dry", "price": 45.0, "duration": 60, "category": "Hair"},
    {"name": "Full Head Colour", "price": 85.0, "duration": 120, "category": "Hair"},
    {"name": "Gel Manicure", "price": 30.0, "duration": 45, "category": "Nails"},
    {"name": "Classic Pedicure", "price": 35.0, "duration": 50, "category": "Nails"},
    {"name": "Express Facial", "price": 40.0, "duration": 30, "category": "Skin"},
    {"name": "Deep Tissue Massage", "price": 65.0, "duration": 60, "category": "Massage"},
]


async def insert_test_data():
    db = await Database.connect()

    try:
        existing = {service.name for service in await service_crud.get_all_services(db)}
        for entry in SERVICE_CATALOG:
            if entry["name"] in existing:
                print(f"Service already exists: {entry['name']}")
                continue
            service = await service_crud.create_service(db, ServiceCreate(**entry))
            print(f"Created service: {service.name} (ID: {service.service_id})")

        count = await db.services.count_documents({})
        print(f"Total services in database: {count}")
    finally:
        db.close()


if __name__ == "__main__":
    asyncio.run(insert_test_data())
