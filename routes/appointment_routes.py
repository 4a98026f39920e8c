from fastapi import APIRouter, HTTPException, Depends, status
from typing import List
from schemas.appointment import AppointmentCreate, AppointmentUpdate, Appointment
from crud import appointment_crud, customer_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
    dependencies=[Depends(require_session)]
)


@router.get("/", response_model=List[Appointment])
async def get_all_appointments(db: Database = Depends(get_db)):
    return await appointment_crud.get_all_appointments(db)


@router.post("/", response_model=Appointment, status_code=status.HTTP_201_CREATED)
async def create_appointment(appointment: AppointmentCreate, db: Database = Depends(get_db)):
    if not await customer_crud.get_customer(db, appointment.customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return await appointment_crud.create_appointment(db, appointment)


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(appointment_id: str, db: Database = Depends(get_db)):
    appointment = await appointment_crud.get_appointment(db, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.put("/{appointment_id}", response_model=Appointment)
async def update_appointment(appointment_id: str, appointment_data: AppointmentUpdate, db: Database = Depends(get_db)):
    appointment = await appointment_crud.update_appointment(db, appointment_id, appointment_data)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.delete("/{appointment_id}")
async def delete_appointment(appointment_id: str, db: Database = Depends(get_db)):
    if not await appointment_crud.delete_appointment(db, appointment_id):
        raise HTTPException(status_code=404, detail="Appointment not found")
    return {"message": "Appointment deleted successfully"}
