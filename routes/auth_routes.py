from fastapi import APIRouter, Depends, Response
from config import settings
from config.database import get_db, Database
from schemas.auth import LoginRequest, LoginResponse, SessionData
from services import auth_service
from services.access_control import post_login_destination
from routes.deps import require_session

router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)


@router.post("/login", response_model=LoginResponse)
async def login(login_data: LoginRequest, response: Response, db: Database = Depends(get_db)):
    user = await auth_service.authenticate_user(
        db, login_data.username, login_data.password.get_secret_value()
    )
    token = auth_service.create_session_token(user)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax"
    )
    return LoginResponse(
        user=user,
        redirect_to=post_login_destination(user.role, login_data.callback_url)
    )


@router.post("/logout")
async def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


@router.get("/session", response_model=SessionData)
async def get_session(session: SessionData = Depends(require_session)):
    return session
