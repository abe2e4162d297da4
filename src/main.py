"""Main FastAPI application entry point."""

from datetime import UTC
from datetime import datetime

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.database import ping_database
from src.core.events import lifespan
from src.exceptions import BaseAppException
from src.routers.auth import router as auth_router
from src.routers.employee_auth import router as employee_auth_router
from src.utilities.enums import Environment


settings = get_settings()

# Create main FastAPI application with lifespan
app = FastAPI(
    title="Customer Portal",
    description="Customer and employee authentication API",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.debug,
    docs_url="/docs" if settings.environment != Environment.PRODUCTION else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.environment != Environment.PRODUCTION else None,
)

# ─── Middleware ────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials="*" not in settings.allowed_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── Exception Handlers ────────────────────────────────────────────────
@app.exception_handler(BaseAppException)
async def app_exception_handler(_: Request, exc: BaseAppException) -> JSONResponse:
    """Render application exceptions as ``{message, ...}`` envelopes."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as a 400 validation failure."""
    errors = [error.get("msg", "Invalid request") for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


# ─── Main Routers ──────────────────────────────────────────────────────
@app.get("/api/test", include_in_schema=False)
async def api_test() -> dict[str, str]:
    """Liveness check that also reports database reachability."""
    return {
        "message": "API server is running!",
        "database": "connected" if await ping_database() else "disconnected",
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/api/health", include_in_schema=False)
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {
        "status": "OK",
        "database": "connected" if await ping_database() else "disconnected",
        "server_time": datetime.now(UTC).isoformat(),
        "environment": settings.environment,
    }


app.include_router(auth_router)
app.include_router(employee_auth_router)
