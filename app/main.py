"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.errors import AnalyticsInputError
from app.core.logger import log_context, setup_logger

setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Athlete workload-risk and performance analytics.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.middleware("http")
async def request_log_context(request: Request, call_next):
    with log_context(f"{request.method} {request.url.path}"):
        return await call_next(request)


@app.exception_handler(AnalyticsInputError)
async def analytics_input_error_handler(request: Request, exc: AnalyticsInputError):
    logger.warning(f"[API] {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "label": exc.label, "errors": exc.details},
    )


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Athlete Monitor API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "athlete-monitor-api",
        "version": settings.VERSION
    }
