# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Candidate Export API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   candidate-export            # console script, same as run() below
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from app import __version__
from app.config import settings
from app.exceptions import (
    CandidateExportException,
    candidate_export_exception_handler,
    unhandled_exception_handler,
)
from app.routers import export, health

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing is shared between requests except the settings, so there is
    no connection to open here; startup only reports the configuration.
    """
    logger.info(f"Starting Candidate Export API in {settings.ENVIRONMENT} mode")
    logger.info(
        f"Teamtailor: {settings.teamtailor_base_url} "
        f"(api version {settings.TEAMTAILOR_API_VERSION}, page size {settings.TEAMTAILOR_PAGE_SIZE})"
    )

    yield

    logger.info("Shutting down Candidate Export API")


# Create FastAPI application
app = FastAPI(
    title="Teamtailor CSV Export API",
    description="""
## Candidate CSV Export

Exports Teamtailor candidates and their job applications as a CSV file.

| Column | Source |
|--------|--------|
| `candidate_id` | candidate id |
| `first_name` | candidate `first-name` |
| `last_name` | candidate `last-name` |
| `email` | candidate `email` |
| `job_application_id` | job application id (empty if none) |
| `job_application_created_at` | job application `created-at` (empty if none) |

```bash
curl -OJ http://localhost:3000/api/export/candidates
```
""",
    version=__version__,
    openapi_url="/api-docs.json",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Export",
            "description": "CSV export operations",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log: method, path, status and time until the response starts."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} 500 {elapsed_ms:.1f}ms")
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(CandidateExportException, candidate_export_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# CSV export endpoints
app.include_router(
    export.router,
    prefix="/api/export",
    tags=["Export"]
)

# Static files last: the mount matches every remaining path
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


def run() -> None:
    """Start the API server with uvicorn."""
    logger.info(f"Server running on http://localhost:{settings.PORT}")
    logger.info(f"Download CSV at http://localhost:{settings.PORT}/api/export/candidates")
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
