from typing import Optional
from fastapi import Depends, Request
from config import settings
from schemas.auth import SessionData
from services.auth_service import decode_session_token
from services.access_control import is_allowed, landing_page, login_url
from services.errors import AuthenticationError, PageRedirect


def get_session(request: Request) -> Optional[SessionData]:
    """Decode the session cookie, if there is one."""
    return decode_session_token(request.cookies.get(settings.SESSION_COOKIE_NAME))


def require_session(session: Optional[SessionData] = Depends(get_session)) -> SessionData:
    """API guard: a valid session or 401."""
    if session is None:
        raise AuthenticationError("Unauthorized")
    return session


def require_page_access(request: Request, session: Optional[SessionData] = Depends(get_session)) -> SessionData:
    """Page guard, run after the edge middleware for every page route."""
    path = request.url.path
    if session is None:
        raise PageRedirect(login_url(path))
    if not is_allowed(path, session.role):
        raise PageRedirect(landing_page(session.role))
    return session
