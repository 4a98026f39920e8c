from fastapi import APIRouter, Depends
from schemas.settings import LogoSettings, LogoUpdate
from crud import settings_crud
from config.database import get_db, Database
from routes.deps import require_session

router = APIRouter(
    prefix="/settings",
    tags=["settings"]
)


# Public: the login page shows the logo before anyone signs in
@router.get("/logo", response_model=LogoSettings)
async def get_logo(db: Database = Depends(get_db)):
    return await settings_crud.get_logo(db)


@router.post("/logo", response_model=LogoSettings, dependencies=[Depends(require_session)])
async def update_logo(logo_data: LogoUpdate, db: Database = Depends(get_db)):
    return await settings_crud.update_logo(db, logo_data.logo)
