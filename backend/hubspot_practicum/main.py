"""
HubSpot custom object practicum - FastAPI application.
Request logging, error handling, server-rendered pages, health check.
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request as StarletteRequest
from starlette.staticfiles import StaticFiles

from hubspot_practicum import __version__
from hubspot_practicum.api.routes import api_router
from hubspot_practicum.core.config import get_settings

STATIC_DIR = Path(__file__).resolve().parent / "static"

# Console logging for the whole package (handlers, HubSpot client, requests)
_log_handler = logging.StreamHandler(sys.stdout)
_log_handler.setLevel(logging.INFO)
_log_handler.setFormatter(logging.Formatter("%(levelname)s:     %(message)s"))
_package_logger = logging.getLogger("hubspot_practicum")
_package_logger.setLevel(logging.INFO)
if not _package_logger.handlers:
    _package_logger.addHandler(_log_handler)
_package_logger.propagate = True

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request (method + path) with the response status."""

    async def dispatch(self, request: StarletteRequest, call_next: Callable) -> Response:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    logger.info("Starting HubSpot custom object practicum")
    logger.info("Custom object endpoint: %s", settings.custom_object_endpoint)
    if not settings.private_app_access:
        logger.warning(
            "PRIVATE_APP_ACCESS not set; homepage will be empty and form submissions skipped."
        )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="HubSpot Custom Object Practicum",
    version=__version__,
    description="Lists and creates HubSpot custom object records through server-rendered pages.",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)


# Error handling middleware
@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        return PlainTextResponse("Internal server error", status_code=500)


if STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
else:
    logger.warning("Static directory is missing (%s); /static will not be served", STATIC_DIR)


@app.get("/health")
def health():
    return {"status": "healthy"}


app.include_router(api_router)


def run() -> None:
    """Start the HTTP listener (http://localhost:3000 unless HOST/PORT say otherwise)."""
    import uvicorn

    settings = get_settings()
    logger.info("Listening on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
