"""Page endpoints.

Each page returns the data its screen renders. Every page except the login
view depends on ``require_page_access``, which repeats the edge middleware's
role check.
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from config.database import get_db, Database
from crud import customer_crud, consultation_form_crud, hours_crud, service_crud, settings_crud, user_crud
from schemas.auth import SessionData
from schemas.common import utcnow
from services import report_service
from services.access_control import post_login_destination
from services.errors import PageRedirect
from routes.deps import get_session, require_page_access

router = APIRouter(tags=["pages"])


@router.get("/")
async def login_page(
    callbackUrl: Optional[str] = None,
    session: Optional[SessionData] = Depends(get_session),
    db: Database = Depends(get_db)
):
    if session is not None:
        raise PageRedirect(post_login_destination(session.role, callbackUrl))
    return {"callbackUrl": callbackUrl, "logo": (await settings_crud.get_logo(db)).logo}


@router.get("/dashboard")
async def dashboard_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {
        "user": session,
        "stats": await report_service.dashboard_stats(db, utcnow())
    }


@router.get("/pos")
async def pos_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {
        "user": session,
        "services": await service_crud.get_all_services(db, active=True),
        "therapists": await user_crud.get_active_therapists(db),
        "customers": await customer_crud.get_all_customers(db, active=True)
    }


@router.get("/reports")
async def reports_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {
        "user": session,
        "filters": await report_service.unique_values(db),
        "therapists": await user_crud.get_active_therapists(db)
    }


@router.get("/customers")
async def customers_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {"user": session, "customers": await customer_crud.get_all_customers(db)}


@router.get("/users")
async def users_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {"user": session, "users": await user_crud.get_all_users(db)}


@router.get("/services")
async def services_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {
        "user": session,
        "services": await service_crud.get_all_services(db),
        "categories": await service_crud.get_categories(db)
    }


@router.get("/hours")
async def hours_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {
        "user": session,
        "therapists": await user_crud.get_active_therapists(db),
        "hours": await hours_crud.get_hours(db)
    }


@router.get("/consultation-form/{customer_id}")
async def consultation_form_page(
    customer_id: str,
    session: SessionData = Depends(require_page_access),
    db: Database = Depends(get_db)
):
    customer = await customer_crud.get_customer(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return {
        "user": session,
        "customer": customer,
        "forms": await consultation_form_crud.get_consultation_forms(db, customer_id)
    }


@router.get("/welcome")
async def welcome_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    return {"user": session, "logo": (await settings_crud.get_logo(db)).logo}


@router.get("/test-data")
async def test_data_page(session: SessionData = Depends(require_page_access), db: Database = Depends(get_db)):
    """Record counts for the owner's data maintenance screen."""
    return {
        "user": session,
        "counts": {
            "users": await db.users.count_documents({}),
            "customers": await db.customers.count_documents({}),
            "services": await db.services.count_documents({}),
            "transactions": await db.transactions.count_documents({}),
            "appointments": await db.appointments.count_documents({})
        }
    }
