"""
StudyGenie Backend API
FastAPI application that turns uploaded study material into student-friendly breakdowns

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    MAX_UPLOAD_SIZE,
    get_model_config,
)
from .routes import documents_router, upload_router
from .core import (
    setup_logging,
    get_logger,
    set_request_id,
    clear_context,
)
from .services.infrastructure.storage import get_document_repository

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = os.getenv("JSON_LOGS", "false").lower() == "true"

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
)

logger = get_logger(__name__, service="api")
logger.info("Starting StudyGenie Backend API", extra={
    "log_level": log_level,
    "json_logs": use_json_logs
})


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info("Analysis model configured", extra={
        "model": get_model_config("analysis").model_name,
        "max_upload_size": MAX_UPLOAD_SIZE,
    })
    try:
        yield
    finally:
        repository = get_document_repository()
        logger.info("Shutting down, dropping in-memory documents", extra={"document_count": repository.count()})
        repository.clear()


# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Attach a correlation ID to every request and log request/response."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
        "client": request.client.host if request.client else "unknown",
    })

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        response.headers.setdefault("X-Content-Type-Options", "nosniff")

        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })
        return response
    finally:
        clear_context()

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(documents_router)
app.include_router(upload_router)


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "message": "StudyGenie API - Student-friendly breakdowns of study material",
        "version": API_VERSION
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for container orchestration.

    Validates backend credentials (Gemini API key OR Vertex AI project
    config). Returns 200 if healthy, 503 otherwise.
    """
    checks = {
        "status": "healthy",
        "checks": {}
    }

    all_healthy = True

    use_vertex_ai = os.getenv("USE_VERTEX_AI", "false").lower() == "true"
    checks["checks"]["llm_backend"] = {
        "use_vertex_ai": use_vertex_ai,
        "backend": "vertex_ai" if use_vertex_ai else "gemini_api",
        "model": get_model_config("analysis").model_name,
    }

    if use_vertex_ai:
        gcp_project_id = os.getenv("GCP_PROJECT_ID")
        checks["checks"]["vertex_ai"] = {
            "project_id_configured": bool(gcp_project_id),
            "location": os.getenv("GCP_LOCATION", "us-central1"),
        }
        if not gcp_project_id:
            all_healthy = False
            logger.warning("Health check: GCP_PROJECT_ID not configured (USE_VERTEX_AI=true)")
    else:
        gemini_key_exists = bool(os.getenv("GEMINI_API_KEY"))
        checks["checks"]["gemini_api_key"] = {
            "configured": gemini_key_exists
        }
        if not gemini_key_exists:
            all_healthy = False
            logger.warning("Health check: GEMINI_API_KEY not configured (USE_VERTEX_AI=false)")

    checks["checks"]["document_store"] = {
        "backend": "in_memory",
        "document_count": get_document_repository().count(),
    }

    if not all_healthy:
        checks["status"] = "unhealthy"
        raise HTTPException(
            status_code=503,
            detail=checks
        )

    return checks


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "studygenie.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
