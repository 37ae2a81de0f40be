"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from around.api import auth, cards, users
from around.api.error_handlers import register_error_handlers, unhandled_error_handler
from around.api.rate_limit import enforce_rate_limit
from around.config import get_settings
from around.logging_config import REQUEST_LOGGER, configure_logging

settings = get_settings()
request_logger = logging.getLogger(REQUEST_LOGGER)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings)
    logging.getLogger(__name__).info(f"Starting in {settings.environment} mode")
    yield


app = FastAPI(
    title="Around API",
    description="Users, picture cards and likes",
    version="0.1.0",
    lifespan=lifespan,
    dependencies=[Depends(enforce_rate_limit)],
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:3001"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_and_secure(request: Request, call_next):
    """Log every request and add security and rate limit headers to the response."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        # Unhandled errors still get the headers and the log line
        response = await unhandled_error_handler(request, exc)
    elapsed_ms = (time.perf_counter() - started) * 1000

    response.headers.update(SECURITY_HEADERS)
    rate_limit = getattr(request.state, "rate_limit", None)
    if rate_limit is not None:
        response.headers.update(rate_limit.headers())

    request_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


register_error_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(cards.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    uvicorn.run("around.main:app", host=settings.host, port=settings.port)
