from fastapi import APIRouter, HTTPException, Depends, status
from typing import List, Optional
from schemas.service import ServiceCreate, ServiceUpdate, Service
from crud import service_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/services",
    tags=["services"],
    dependencies=[Depends(require_session)]
)


@router.get("/", response_model=List[Service])
async def get_all_services(category: Optional[str] = None, active: Optional[bool] = None, db: Database = Depends(get_db)):
    return await service_crud.get_all_services(db, category, active)


@router.post("/", response_model=Service, status_code=status.HTTP_201_CREATED)
async def create_service(service: ServiceCreate, db: Database = Depends(get_db)):
    return await service_crud.create_service(db, service)


@router.get("/categories", response_model=List[str])
async def get_categories(db: Database = Depends(get_db)):
    return await service_crud.get_categories(db)


@router.get("/{service_id}", response_model=Service)
async def get_service(service_id: str, db: Database = Depends(get_db)):
    service = await service_crud.get_service(db, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.put("/{service_id}", response_model=Service)
async def update_service(service_id: str, service_data: ServiceUpdate, db: Database = Depends(get_db)):
    """Update a service with the provided data"""
    service = await service_crud.update_service(db, service_id, service_data)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.delete("/{service_id}")
async def delete_service(service_id: str, db: Database = Depends(get_db)):
    if not await service_crud.delete_service(db, service_id):
        raise HTTPException(status_code=404, detail="Service not found")
    return {"message": "Service deleted successfully"}
