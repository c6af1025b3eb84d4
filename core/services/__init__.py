# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .teamtailor_client import TeamtailorClient
from .candidate_rows import (
    build_job_application_index,
    candidate_to_rows,
    page_to_rows,
    stream_candidate_rows,
)
from .csv_export import CsvEncoder, CsvExportStream, stream_candidate_csv

__all__ = [
    "TeamtailorClient",
    "build_job_application_index",
    "candidate_to_rows",
    "page_to_rows",
    "stream_candidate_rows",
    "CsvEncoder",
    "CsvExportStream",
    "stream_candidate_csv",
]
