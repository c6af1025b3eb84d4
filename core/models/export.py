# =============================================================================
# core/models/export.py - CSV Export Row
# =============================================================================
# A CsvRow is one denormalized (candidate, job application) pair. It is
# built once, handed to the encoder and dropped; it is never modified.
# =============================================================================

from dataclasses import astuple, dataclass, fields


@dataclass(frozen=True)
class CsvRow:
    """
    One line of the candidate export.

    Candidates without job applications produce a single row whose
    job application fields are empty strings.
    """
    candidate_id: str
    first_name: str
    last_name: str
    email: str
    job_application_id: str = ""
    job_application_created_at: str = ""

    def as_tuple(self) -> tuple[str, ...]:
        """Values in column order."""
        return astuple(self)


# Column names, in output order
CSV_HEADERS: tuple[str, ...] = tuple(f.name for f in fields(CsvRow))
