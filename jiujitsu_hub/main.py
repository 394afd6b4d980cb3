# /jiujitsu_hub/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Configuration ---
from .core.config import CORS_ORIGINS, configure_logging

# --- Application-specific Router Imports ---
from .routers import (
    auth_router,
    settings_router,
    students_router,
    academies_router,
    graduations_router,
    schedules_router,
    attendance_router,
    professors_router,
    finance_router,
    dashboard_router,
    directory_router,
)

# --- Database & Service Imports for Startup Logic ---
from .db.base import Base
from .db.database import engine, SessionLocal
from .services.database_service import DatabaseService
from .services import auth_service, settings_service

configure_logging()
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup: schema, default settings, master admin.
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        db = DatabaseService(session)
        settings_service.ensure_default_settings(db)
        auth_service.ensure_master_admin(db)
    finally:
        session.close()
    logger.info("Jiu-Jitsu Hub API started.")
    yield
    logger.info("Jiu-Jitsu Hub API shutting down.")


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Jiu-Jitsu Hub API",
    description="Academy, student, graduation, attendance and billing management for jiu-jitsu networks.",
    version="1.2.0",
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Rendering ---
# The front end reads `message` from every error body.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": "Dados inválidos.", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(settings_router.router, prefix="/api/settings", tags=["Settings"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(academies_router.router, prefix="/api/academies", tags=["Academies"])
app.include_router(graduations_router.router, prefix="/api/graduations", tags=["Graduations"])
app.include_router(schedules_router.router, prefix="/api/schedules", tags=["Schedules"])
app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"])
app.include_router(professors_router.router, prefix="/api/professors", tags=["Professors"])
app.include_router(finance_router.router, prefix="/api/finance", tags=["Finance"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(directory_router.router, prefix="/api", tags=["Directory"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Jiu-Jitsu Hub API is running!", "version": app.version}
