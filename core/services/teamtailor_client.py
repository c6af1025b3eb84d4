# =============================================================================
# core/services/teamtailor_client.py - Teamtailor API Client
# =============================================================================
# Paginated access to the Teamtailor JSON:API endpoints over httpx.
#
# Usage:
#   async with TeamtailorClient.from_settings(settings) as client:
#       async for page in client.stream_pages():
#           ...
#
# Pages are fetched strictly one at a time: the next request is only sent
# when the consumer asks for the next page. Failures are never retried.
# =============================================================================

import asyncio
import json
import logging
from typing import Any, AsyncIterator
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from app.config import Settings
from app.exceptions import MalformedResponse, RemoteApiError, RemoteTimeout
from core.models.jsonapi import JsonApiDocument

logger = logging.getLogger(__name__)

JSON_API_MEDIA_TYPE = "application/vnd.api+json"

# Query parameters of the first candidates page. Sparse fieldsets keep the
# payload small; include=job-applications avoids one call per candidate.
CANDIDATE_FIELDS = "first-name,last-name,email,job-applications"
JOB_APPLICATION_FIELDS = "created-at"


class TeamtailorClient:
    """
    Async client for the Teamtailor REST API.

    One instance per export request; it owns its httpx.AsyncClient and
    must be closed (aclose() or `async with`).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        api_version: str,
        page_size: int = 100,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Token token={api_key}",
                "X-Api-Version": api_version,
                "Accept": JSON_API_MEDIA_TYPE,
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "TeamtailorClient":
        """Build a client from the application settings."""
        return cls(
            api_key=settings.TEAMTAILOR_API_KEY,
            base_url=settings.teamtailor_base_url,
            api_version=settings.TEAMTAILOR_API_VERSION,
            page_size=settings.TEAMTAILOR_PAGE_SIZE,
            timeout=settings.TEAMTAILOR_TIMEOUT_SECONDS,
        )

    async def __aenter__(self) -> "TeamtailorClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    # -------------------------------------------------------------------------
    # URL Building
    # -------------------------------------------------------------------------

    def build_url(self, path: str, params: dict[str, Any] | None = None) -> str:
        """
        Join a path to the base URL and append a query string.

        Brackets and commas are kept literal so that JSON:API parameters
        such as fields[candidates]=a,b stay readable in logs.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        if params:
            query = urlencode({k: str(v) for k, v in params.items()}, safe="[],")
            url = f"{url}?{query}"
        return url

    def build_candidates_url(self) -> str:
        """URL of the first candidates page."""
        return self.build_url(
            "candidates",
            {
                "fields[candidates]": CANDIDATE_FIELDS,
                "fields[job-applications]": JOB_APPLICATION_FIELDS,
                "page[size]": self.page_size,
                "include": "job-applications",
            },
        )

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    async def fetch(self, path: str, params: dict[str, Any] | None = None) -> JsonApiDocument:
        """Fetch a document relative to the base URL."""
        return await self.fetch_page(self.build_url(path, params))

    async def fetch_page(self, url: str) -> JsonApiDocument:
        """
        Fetch and parse one JSON:API document.

        Args:
            url: Complete URL, e.g. a links.next value from a previous page

        Returns:
            The parsed document

        Raises:
            RemoteTimeout: If the request exceeds the timeout
            RemoteApiError: If Teamtailor answers with a non-2xx status
            MalformedResponse: If the body is not a JSON:API collection document
        """
        logger.debug(f"GET {url}")

        try:
            # httpx times each phase separately; wait_for bounds the whole call
            response = await asyncio.wait_for(self._client.get(url), self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"Teamtailor request timed out after {self.timeout:g}s: {url}")
            raise RemoteTimeout(self.timeout) from e

        if not response.is_success:
            # Read the body once, then try to decode it
            error_text = response.text
            try:
                error_body = json.loads(error_text)
            except ValueError:
                error_body = error_text

            raise RemoteApiError(
                f"Teamtailor API request failed: {response.status_code} {response.reason_phrase}",
                response.status_code,
                error_body,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(url, f"body is not valid JSON ({e})") from e

        try:
            return JsonApiDocument.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponse(url, str(e)) from e

    async def stream_pages(self) -> AsyncIterator[JsonApiDocument]:
        """
        Yield candidate pages, following links.next until it is absent.

        Each call starts again from the first page. Nothing is fetched
        ahead of the consumer.
        """
        url: str | None = self.build_candidates_url()
        page_number = 0

        while url:
            page = await self.fetch_page(url)
            page_number += 1

            if page_number == 1 and page.meta:
                total = page.meta.get("record-count")
                if total is not None:
                    logger.info(f"Exporting {total} candidates from Teamtailor")

            logger.debug(f"Fetched page {page_number} with {len(page.data)} candidates")
            yield page

            url = page.next_url
