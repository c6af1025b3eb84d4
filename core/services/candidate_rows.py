# =============================================================================
# core/services/candidate_rows.py - Candidate Row Flattening
# =============================================================================
# Turns pages of candidates (with their job applications side-loaded in
# "included") into flat CsvRow batches.
#
# The job application index is built per page and dropped once the page is
# flattened: Teamtailor always includes an application in the same page as
# the candidate that references it.
# =============================================================================

from typing import AsyncIterator

from core.models.export import CsvRow
from core.models.jsonapi import JsonApiDocument, Resource
from core.services.teamtailor_client import TeamtailorClient

JOB_APPLICATIONS_TYPE = "job-applications"


def build_job_application_index(included: list[Resource]) -> dict[str, Resource]:
    """
    Index the side-loaded job applications of a page by id.

    Other resource types are skipped. On duplicate ids the last one wins.
    """
    index: dict[str, Resource] = {}
    for resource in included:
        if resource.type == JOB_APPLICATIONS_TYPE:
            index[str(resource.id)] = resource
    return index


def candidate_to_rows(
    candidate: Resource,
    job_applications: dict[str, Resource],
) -> list[CsvRow]:
    """
    Flatten one candidate into one row per job application.

    A candidate without job applications still gets a single row, with
    empty job application fields. So does a reference to an application
    that is missing from the index.
    """
    candidate_id = str(candidate.id)
    first_name = candidate.attribute("first-name")
    last_name = candidate.attribute("last-name")
    email = candidate.attribute("email")

    references = [
        ref for ref in candidate.related(JOB_APPLICATIONS_TYPE)
        if ref.type == JOB_APPLICATIONS_TYPE
    ]

    if not references:
        return [CsvRow(candidate_id, first_name, last_name, email)]

    rows = []
    for ref in references:
        job_application = job_applications.get(str(ref.id))
        if job_application is None:
            rows.append(CsvRow(candidate_id, first_name, last_name, email))
            continue

        rows.append(
            CsvRow(
                candidate_id=candidate_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                job_application_id=str(job_application.id),
                job_application_created_at=job_application.attribute("created-at"),
            )
        )
    return rows


def page_to_rows(page: JsonApiDocument) -> list[CsvRow]:
    """Flatten a page of candidates, keeping candidate order."""
    job_applications = build_job_application_index(page.included)

    rows: list[CsvRow] = []
    for candidate in page.data:
        rows.extend(candidate_to_rows(candidate, job_applications))
    return rows


async def stream_candidate_rows(client: TeamtailorClient) -> AsyncIterator[list[CsvRow]]:
    """Yield one batch of rows per candidates page."""
    async for page in client.stream_pages():
        yield page_to_rows(page)
