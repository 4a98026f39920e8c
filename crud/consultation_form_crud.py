from typing import List, Optional
import logging
from pymongo import DESCENDING
from schemas.consultation_form import ConsultationForm, ConsultationFormCreate, generate_form_id
from schemas.common import utcnow
from config.database import Database
from crud.customer_crud import set_last_consultation_form_date

logger = logging.getLogger(__name__)


async def create_consultation_form(db: Database, form: ConsultationFormCreate, therapist_id: str, owner_id: str) -> ConsultationForm:
    form_dict = form.model_dump()
    form_dict["form_id"] = generate_form_id(form.customer_id)
    form_dict["therapist_id"] = therapist_id
    form_dict["owner_id"] = owner_id
    form_dict["completed_at"] = form.completed_at or utcnow()
    form_dict["created_at"] = utcnow()

    await db.consultation_forms.insert_one(form_dict)
    logger.info(f"Saved consultation form {form_dict['form_id']} for customer {form.customer_id} ({form.status})")
    return ConsultationForm(**form_dict)


async def sync_customer_consultation_date(db: Database, form: ConsultationForm):
    """Copy a completed form's date onto its customer.

    Runs after the form is stored. A failure here is logged and dropped;
    the form itself stays saved.
    """
    if form.status != "completed":
        return
    try:
        updated = await set_last_consultation_form_date(db, form.customer_id, form.completed_at)
        if not updated:
            logger.warning(f"Customer {form.customer_id} not found while recording consultation form {form.form_id}")
    except Exception as e:
        logger.error(
            f"Error updating lastConsultationFormDate for customer {form.customer_id}: {str(e)}",
            exc_info=True
        )


async def get_consultation_form(db: Database, form_id: str) -> Optional[ConsultationForm]:
    form = await db.consultation_forms.find_one({"form_id": form_id})
    return ConsultationForm(**form) if form else None


async def get_consultation_forms(db: Database, customer_id: Optional[str] = None) -> List[ConsultationForm]:
    query = {"customer_id": customer_id} if customer_id else {}
    forms = await db.consultation_forms.find(query).sort("completed_at", DESCENDING).to_list(length=None)
    return [ConsultationForm(**form) for form in forms]
