import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from . import models  # noqa: F401 - register tables with Base
from .config import ALLOWED_ORIGINS, LOG_LEVEL
from .database import Base, engine
from .domain.bookings.router import router as bookings_router
from .domain.schedules.router import router as schedules_router
from .domain.staff.router import router as staff_router
from .domain.stores.router import router as stores_router
from .exceptions import StaffPortalError, ValidationFailure
from .responses import message, response_error

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("boto3").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise
    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Staff Portal API", version=__version__, lifespan=lifespan)


@app.exception_handler(StaffPortalError)
async def staff_portal_exception_handler(request: Request, exc: StaffPortalError):
    """Render domain errors in the {message, error} envelope"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.code}: {exc.message} {exc.details}")
    else:
        logger.info(f"{request.method} {request.url.path} - {exc.status_code} {exc.code}")
    return response_error(exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields, rejected before reaching a service"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    failure = ValidationFailure(
        message("validation.failed"),
        {"fields": jsonable_encoder(exc.errors())},
    )
    return response_error(failure)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail, "error": {"code": f"http_{exc.status_code}"}},
        headers=getattr(exc, "headers", None),
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(staff_router)
app.include_router(schedules_router)
app.include_router(bookings_router)
app.include_router(stores_router)


@app.get("/")
def root():
    return {"message": "Staff Portal API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
