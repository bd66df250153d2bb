import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.logging_config import setup_logging
from app.api.endpoints import candidates, health

# Configure logging
setup_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up Recruitment API...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")
    if not settings.LEGACY_API_URL:
        logger.warning("LEGACY_API_URL is not set; candidates will not be pushed to the legacy system")

    yield

    # Shutdown
    logger.info("Shutting down Recruitment API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Candidate registration with job offer assignment and legacy system sync",
    lifespan=lifespan
)

# Include routers
app.include_router(candidates.router, prefix=settings.API_PREFIX)
app.include_router(health.router)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report body parsing failures in the same {"error": message} shape as the service"""
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first['msg']}" if field else first["msg"]
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(status_code=422, content={"error": message})


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_level="info"
    )
