"""
Recruitment Dashboard - Main Application

FastAPI backend with:
- MongoDB for application records
- Search / filter / sort / pagination over applications
- Aggregated analytics and week / month trends for the admin dashboard

Run: uvicorn recruitment_dashboard.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recruitment_dashboard.api.routes import api_router
from recruitment_dashboard.core import errors
from recruitment_dashboard.core.config import get_settings
from recruitment_dashboard.core.logging_setup import setup_logging
from recruitment_dashboard.db.mongodb import init_mongo_indexes, close_mongo_client
from recruitment_dashboard.services.recruitment_store import reset_recruitment_store

settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Recruitment Dashboard",
    description="""
    Admin backend for the recruitment drive.

    ## Features
    - **Applications**: Submit, search, filter, sort and paginate
    - **Analytics**: Counts by year, branch and day, plus weekly / monthly trends

    ## Database
    - MongoDB: Application records (unique email, WhatsApp number, college ID)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# ============================================================
# ERROR ENVELOPES
# ============================================================

@app.exception_handler(errors.ValidationError)
async def validation_error_handler(request: Request, exc: errors.ValidationError):
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": exc.message, "field": exc.field}
    )


@app.exception_handler(errors.DuplicateKeyError)
async def duplicate_key_handler(request: Request, exc: errors.DuplicateKeyError):
    return JSONResponse(
        status_code=409,
        content={"success": False, "error": exc.message, "field": exc.field}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": "Invalid request parameters"}
    )


@app.exception_handler(errors.RecruitmentError)
async def recruitment_error_handler(request: Request, exc: errors.RecruitmentError):
    logger.error("Unhandled service error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


# ============================================================
# LIFECYCLE
# ============================================================

@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup (the store retries on first insert)."""
    try:
        init_mongo_indexes()
    except Exception:
        logger.exception("MongoDB index initialization failed, deferring to first insert")


@app.on_event("shutdown")
async def shutdown_event():
    reset_recruitment_store()
    close_mongo_client()
    logger.info("MongoDB client closed")


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Recruitment Dashboard"}


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    from recruitment_dashboard.db.mongodb import test_mongo_connection

    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
