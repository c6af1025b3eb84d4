# =============================================================================
# core/services/csv_export.py - Streaming CSV Export
# =============================================================================
# Encodes row batches as CSV and streams them to the HTTP response.
#
# Pipeline, one page at a time:
#   TeamtailorClient.stream_pages -> page_to_rows -> CsvEncoder -> response
#
# The first chunk (header + first page) is produced before the response
# starts, so a failing first request can still become a JSON error. Later
# chunks are only produced when the server has sent the previous one, which
# keeps at most one page of rows in memory.
# =============================================================================

import asyncio
import csv
import io
import logging
from typing import AsyncIterator, Iterable

from app.exceptions import SinkError
from core.models.export import CSV_HEADERS, CsvRow
from core.services.candidate_rows import stream_candidate_rows
from core.services.teamtailor_client import TeamtailorClient

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


class CsvEncoder:
    """
    Encodes rows as UTF-8 CSV text.

    Fields are quoted only when they contain a delimiter, quote or newline;
    embedded quotes are doubled. Lines end with "\\n".
    """

    def __init__(self, headers: Iterable[str] = CSV_HEADERS):
        self.headers = tuple(headers)

    def _encode(self, records: Iterable[Iterable[str]]) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        try:
            writer.writerows(records)
            return buffer.getvalue().encode("utf-8")
        except (csv.Error, UnicodeEncodeError) as e:
            raise SinkError(str(e)) from e

    def header(self) -> bytes:
        """The header line."""
        return self._encode([self.headers])

    def encode(self, rows: Iterable[CsvRow]) -> bytes:
        """One line per row, in the given order."""
        return self._encode(row.as_tuple() for row in rows)


async def stream_candidate_csv(client: TeamtailorClient) -> AsyncIterator[bytes]:
    """
    Yield the candidate export as CSV chunks.

    The first chunk holds the header and the first page; every following
    chunk holds one page. The client is closed when the generator ends,
    fails or is closed early.
    """
    encoder = CsvEncoder()
    header_sent = False
    row_count = 0

    async with client:
        async for rows in stream_candidate_rows(client):
            chunk = encoder.encode(rows)
            row_count += len(rows)
            if not header_sent:
                chunk = encoder.header() + chunk
                header_sent = True
            yield chunk

        if not header_sent:
            yield encoder.header()

    logger.info(f"Candidate export finished: {row_count} rows")


class CsvExportStream:
    """
    A CSV chunk stream whose first chunk is fetched up front.

    Usage:
        stream = CsvExportStream(stream_candidate_csv(client))
        await stream.prime()  # raises before any byte is sent
        return StreamingResponse(stream.body(), media_type=CSV_MEDIA_TYPE)
    """

    def __init__(self, chunks: AsyncIterator[bytes]):
        self._chunks = chunks
        self._first: bytes | None = None
        self.bytes_sent = 0

    async def prime(self) -> None:
        """
        Produce the first chunk.

        Any failure here happens before the response has started and is
        propagated unchanged to the exception handlers.
        """
        try:
            self._first = await anext(self._chunks)
        except StopAsyncIteration:
            self._first = b""
        except BaseException:
            await self._chunks.aclose()
            raise

    async def aclose(self) -> None:
        """Close the chunk generator (and with it the Teamtailor client) without streaming."""
        await self._chunks.aclose()

    async def body(self) -> AsyncIterator[bytes]:
        """
        Response body iterator.

        Failures after the first chunk cannot change the response status;
        they are logged and re-raised so the server aborts the connection.
        """
        if self._first is None:
            await self.prime()

        try:
            first, self._first = self._first, b""
            if first:
                yield first
                self.bytes_sent += len(first)

            async for chunk in self._chunks:
                yield chunk
                self.bytes_sent += len(chunk)

        except asyncio.CancelledError:
            logger.info(f"Export cancelled by client after {self.bytes_sent} bytes")
            raise
        except Exception as e:
            stage = getattr(e, "stage", "export")
            logger.error(
                f"Export aborted during stage '{stage}' after {self.bytes_sent} bytes: "
                f"{type(e).__name__}: {e}"
            )
            raise
        finally:
            await self._chunks.aclose()
