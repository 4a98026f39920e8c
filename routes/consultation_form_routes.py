from fastapi import APIRouter, BackgroundTasks, HTTPException, Depends, status
from typing import List, Optional
from schemas.auth import SessionData
from schemas.consultation_form import ConsultationForm, ConsultationFormCreate
from crud import consultation_form_crud, customer_crud, user_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/consultation-forms",
    tags=["consultation-forms"]
)


@router.post("/", response_model=ConsultationForm, status_code=status.HTTP_201_CREATED)
async def create_consultation_form(
    form: ConsultationFormCreate,
    background_tasks: BackgroundTasks,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db)
):
    """Store a consultation form filled in by the signed-in therapist.

    The customer's last consultation date is updated after the response is
    sent; see ``sync_customer_consultation_date``.
    """
    if not await customer_crud.get_customer(db, form.customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    owner = await user_crud.get_owner(db)
    if not owner:
        raise HTTPException(status_code=404, detail="Owner not found")

    saved = await consultation_form_crud.create_consultation_form(
        db, form, therapist_id=session.user_id, owner_id=owner.user_id
    )
    background_tasks.add_task(consultation_form_crud.sync_customer_consultation_date, db, saved)
    return saved


@router.get("/", response_model=List[ConsultationForm], dependencies=[Depends(require_session)])
async def get_consultation_forms(customerId: Optional[str] = None, db: Database = Depends(get_db)):
    return await consultation_form_crud.get_consultation_forms(db, customerId)


@router.get("/{form_id}", response_model=ConsultationForm, dependencies=[Depends(require_session)])
async def get_consultation_form(form_id: str, db: Database = Depends(get_db)):
    form = await consultation_form_crud.get_consultation_form(db, form_id)
    if not form:
        raise HTTPException(status_code=404, detail="Consultation form not found")
    return form
