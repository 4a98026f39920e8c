from fastapi import APIRouter, HTTPException, Depends, status
from typing import List, Optional
from schemas.customer import Customer, CustomerCreate, CustomerUpdate, CustomerVisitUpdate
from crud import customer_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    dependencies=[Depends(require_session)]
)


@router.get("/", response_model=List[Customer])
async def get_all_customers(active: Optional[bool] = None, db: Database = Depends(get_db)):
    return await customer_crud.get_all_customers(db, active)


@router.post("/", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def create_customer(customer: CustomerCreate, db: Database = Depends(get_db)):
    return await customer_crud.create_customer(db, customer)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, db: Database = Depends(get_db)):
    customer = await customer_crud.get_customer(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.put("/{customer_id}", response_model=Customer)
async def update_customer(customer_id: str, customer_data: CustomerUpdate, db: Database = Depends(get_db)):
    customer = await customer_crud.update_customer(db, customer_id, customer_data)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.patch("/{customer_id}", response_model=Customer)
async def record_visit_dates(customer_id: str, visit: CustomerVisitUpdate, db: Database = Depends(get_db)):
    customer = await customer_crud.record_visit_dates(db, customer_id, visit)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str, db: Database = Depends(get_db)):
    if not await customer_crud.delete_customer(db, customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return {"message": "Customer deleted successfully"}
