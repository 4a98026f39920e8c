"""The page guard dependency on its own, without the edge middleware in front of it."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request
from config import settings
from config.database import get_db
from main import page_redirect_handler
from routes import page_routes
from routes.deps import require_page_access
from schemas.auth import SessionData
from services.auth_service import create_session_token
from services.errors import PageRedirect


@pytest.fixture
def pages_only(db):
    app = FastAPI()
    app.include_router(page_routes.router)
    app.add_exception_handler(PageRedirect, page_redirect_handler)
    app.dependency_overrides[get_db] = lambda: db
    return TestClient(app)


def request_for(path):
    return Request({"type": "http", "method": "GET", "path": path, "headers": [], "query_string": b""})


def test_no_session_is_sent_to_login_with_callback(pages_only):
    response = pages_only.get("/reports", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/?callbackUrl=/reports"


def test_therapist_on_dashboard_is_sent_to_pos(pages_only, therapist):
    pages_only.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(therapist))
    response = pages_only.get("/dashboard", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/pos"


def test_owner_passes_the_guard(pages_only, owner):
    pages_only.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(owner))
    assert pages_only.get("/dashboard", follow_redirects=False).status_code == 200


def test_guard_called_directly():
    manager = SessionData(user_id="USMAN0001", username="max", role="manager")

    with pytest.raises(PageRedirect) as redirect:
        require_page_access(request_for("/users"), manager)
    assert redirect.value.location == "/pos"

    with pytest.raises(PageRedirect) as redirect:
        require_page_access(request_for("/hours"), None)
    assert redirect.value.location == "/?callbackUrl=/hours"

    assert require_page_access(request_for("/customers"), manager) is manager
