from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from pymongo.errors import DuplicateKeyError
from config import settings
from config.database import Database
from config.logging_config import setup_logging
from services.access_control import is_allowed, is_protected_page, landing_page, login_url
from services.auth_service import decode_session_token
from services.errors import SalonError, PageRedirect
from routes import (
    auth_routes,
    user_routes,
    customer_routes,
    service_routes,
    transaction_routes,
    appointment_routes,
    consultation_form_routes,
    hours_routes,
    settings_routes,
    report_routes,
    page_routes
)
import logging
import uvicorn

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Salon POS API")
    app.state.db = await Database.connect()
    yield
    app.state.db.close()
    logger.info("Salon POS API stopped")


app = FastAPI(title="Salon POS API", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def page_access_gate(request: Request, call_next):
    """Turn away page requests before they reach a handler."""
    path = request.url.path
    if is_protected_page(path):
        session = decode_session_token(request.cookies.get(settings.SESSION_COOKIE_NAME))
        if session is None:
            return RedirectResponse(login_url(path))
        if not is_allowed(path, session.role):
            logger.info(f"User {session.username} ({session.role}) denied {path}")
            return RedirectResponse(landing_page(session.role))
    return await call_next(request)


@app.exception_handler(SalonError)
async def salon_error_handler(request: Request, exc: SalonError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(PageRedirect)
async def page_redirect_handler(request: Request, exc: PageRedirect):
    return RedirectResponse(exc.location)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return JSONResponse(status_code=400, content={"detail": "; ".join(messages)})


@app.exception_handler(DuplicateKeyError)
async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    logger.warning(f"Duplicate key on {request.url.path}: {exc.details}")
    return JSONResponse(status_code=400, content={"detail": "A record with this value already exists"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Include all routers
for api_router in (
    auth_routes.router,
    user_routes.router,
    customer_routes.router,
    service_routes.router,
    transaction_routes.router,
    appointment_routes.router,
    consultation_form_routes.router,
    hours_routes.router,
    settings_routes.router,
    report_routes.router
):
    app.include_router(api_router, prefix="/api")

app.include_router(page_routes.router)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
