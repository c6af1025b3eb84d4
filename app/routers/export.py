# =============================================================================
# app/routers/export.py - CSV Export Endpoints
# =============================================================================
# Streams the Teamtailor candidates and their job applications as a CSV
# download.
# =============================================================================

import logging
from datetime import date

from fastapi import APIRouter
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from app.dependencies import TeamtailorClientDep
from core.services.csv_export import CSV_MEDIA_TYPE, CsvExportStream, stream_candidate_csv

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Error returned when the export fails before streaming starts."""
    error: str
    message: str


class BadGatewayResponse(ErrorResponse):
    """Error returned when Teamtailor fails or times out."""
    status: int


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/candidates",
    responses={
        200: {
            "description": "CSV file download",
            "content": {"text/csv": {"schema": {"type": "string"}}},
        },
        500: {"model": ErrorResponse, "description": "Internal server error"},
        502: {"model": BadGatewayResponse, "description": "Teamtailor API error"},
    },
)
async def export_candidates(client: TeamtailorClientDep):
    """
    Export candidates as CSV.

    One row per candidate and job application; candidates without
    applications get one row with empty application columns.
    Pages are streamed as they arrive from Teamtailor.
    """
    filename = f"candidates-{date.today().isoformat()}.csv"
    logger.info(f"Starting candidate export: {filename}")

    stream = CsvExportStream(stream_candidate_csv(client))
    await stream.prime()

    try:
        return StreamingResponse(
            stream.body(),
            media_type=CSV_MEDIA_TYPE,
            headers={
                "Content-Disposition": f'attachment; filename="{filename}"',
                "Cache-Control": "no-cache",
            }
        )
    except Exception:
        await stream.aclose()
        raise
