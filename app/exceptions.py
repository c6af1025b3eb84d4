# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the export API.
#
# Every failure of the export pipeline is fatal to the export in progress.
# While no byte of the CSV has been sent yet, the handlers below turn the
# failure into a structured JSON body:
#   - RemoteApiError / RemoteTimeout -> 502 {error, message, status}
#   - everything else                -> 500 {error, message}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CandidateExportException(Exception):
    """
    Base exception for the candidate export.

    Attributes:
        message: Human-readable message, returned to the client
        error: HTTP reason phrase used as the "error" field of the body
        status_code: HTTP status of the error response
        stage: Pipeline stage that failed (fetch, flatten, encode)
        details: Additional context for server-side logs
    """

    def __init__(
        self,
        message: str,
        error: str = "Internal Server Error",
        status_code: int = 500,
        stage: str = "export",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        self.status_code = status_code
        self.stage = stage
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {
            "error": self.error,
            "message": self.message,
        }


# =============================================================================
# Remote (Teamtailor) Exceptions
# =============================================================================

class RemoteApiError(CandidateExportException):
    """Raised when Teamtailor answers with a non-2xx status."""

    def __init__(self, message: str, status: int, response_body: Any = None):
        super().__init__(
            message=message,
            error="Bad Gateway",
            status_code=502,
            stage="fetch",
            details={"status": status, "response": response_body},
        )
        self.status = status
        self.response_body = response_body

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status
        return result


class RemoteTimeout(RemoteApiError):
    """Raised when a Teamtailor request exceeds the configured timeout."""

    # Reported to clients as the remote status of a timed out request
    STATUS = 408

    def __init__(self, timeout: float):
        super().__init__(
            message=f"Teamtailor API request timed out after {timeout:g}s",
            status=self.STATUS,
            response_body={"timeout": timeout},
        )
        self.timeout = timeout


class MalformedResponse(CandidateExportException):
    """Raised when a Teamtailor page is not a valid JSON:API collection document."""

    def __init__(self, url: str, error: str):
        super().__init__(
            message=f"Malformed Teamtailor response: {error}",
            stage="fetch",
            details={"url": url, "error": error},
        )
        self.url = url


# =============================================================================
# Output Exceptions
# =============================================================================

class SinkError(CandidateExportException):
    """Raised when CSV output cannot be encoded or written."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to write CSV output: {error}",
            stage="encode",
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def candidate_export_exception_handler(
    request: Request,
    exc: CandidateExportException
) -> JSONResponse:
    """
    Convert CandidateExportException to JSON response.

    Only reached when the response has not started yet; once CSV bytes
    are on the wire the stream aborts the connection instead.
    """
    logger.error(
        f"Export failed at stage '{exc.stage}' for {request.url.path}: "
        f"{exc.message} {exc.details}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Map any other failure to a 500 with the same body shape."""
    logger.exception(f"Unexpected error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": str(exc) or "Unknown error",
        }
    )
