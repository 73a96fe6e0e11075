"""
Covenant - Contract Risk and Compliance Engine

FastAPI application entry point. The service is stateless: callers send
contract and compliance snapshots and receive derived results.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from covenant import __version__
from covenant.api.routes import compliance_router, dashboard_router, risk_router
from covenant.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its id and elapsed time."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or f"req_{int(time.time() * 1000)}"

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.6f}"

        logger.info(
            f"{request.method} {request.url.path} [{request_id}] "
            f"-> {response.status_code} in {elapsed:.3f}s"
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting Covenant {__version__} ({settings.environment})")
    yield
    logger.info("Covenant shutdown complete")


app = FastAPI(
    title="Covenant",
    description="Contract risk assessment and compliance aggregation engine",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    openapi_url="/openapi.json" if not settings.is_production else None,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID", "X-Process-Time"],
    max_age=600,
)


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "model_version": settings.model_version,
    }


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "name": "Covenant",
        "description": "Contract risk assessment and compliance aggregation engine",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn engine failures into a 500 response."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")

    content = {"error": "Internal server error"}
    if not settings.is_production:
        content["detail"] = f"{type(exc).__name__}: {exc}"
    return JSONResponse(status_code=500, content=content)


app.include_router(risk_router, prefix=f"{settings.api_prefix}/risk", tags=["risk"])
app.include_router(compliance_router, prefix=f"{settings.api_prefix}/compliance", tags=["compliance"])
app.include_router(dashboard_router, prefix=f"{settings.api_prefix}/dashboard", tags=["dashboard"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
