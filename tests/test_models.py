# =============================================================================
# tests/test_models.py - Model Tests
# =============================================================================
# Unit tests for the JSON:API document schemas and the CsvRow type:
# - Valid documents are parsed, ids coerced to strings
# - Documents without "data" are rejected
# - Relationship data normalizes to a list of identifiers
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import dataclasses

import pytest
from pydantic import ValidationError

from core.models import CSV_HEADERS, CsvRow, JsonApiDocument, Resource
from tests.fake_teamtailor import candidate, job_application, page


# =============================================================================
# JSON:API Document Tests
# =============================================================================

class TestJsonApiDocument:
    """Tests for JsonApiDocument parsing."""

    def test_valid_document(self, two_application_page):
        """Test parsing a page with data, included and links."""
        document = JsonApiDocument.model_validate(two_application_page)

        assert len(document.data) == 1
        assert len(document.included) == 2
        assert document.next_url is None

    def test_next_url(self):
        """Test that links.next is exposed as next_url."""
        document = JsonApiDocument.model_validate(
            page(data=[], next_url="https://api.teamtailor.test/v1/candidates?page[number]=2")
        )

        assert document.next_url == "https://api.teamtailor.test/v1/candidates?page[number]=2"

    def test_missing_data_is_rejected(self):
        """A document without data is malformed, not an empty page."""
        with pytest.raises(ValidationError):
            JsonApiDocument.model_validate({"links": {}})

    def test_null_included_is_empty(self):
        """Test that "included": null reads as no side-loaded resources."""
        document = JsonApiDocument.model_validate({"data": [], "included": None})

        assert document.included == []

    def test_meta_and_links_are_optional(self):
        """Test a minimal document."""
        document = JsonApiDocument.model_validate({"data": []})

        assert document.links is None
        assert document.meta is None
        assert document.next_url is None


class TestResource:
    """Tests for Resource and relationship handling."""

    def test_numeric_ids_become_strings(self):
        """Test that numeric resource and relationship ids are coerced."""
        resource = Resource.model_validate(
            candidate(42, "Ada", "Lovelace", "ada@example.com", applications=[7])
        )

        assert resource.id == "42"
        assert [ref.id for ref in resource.related("job-applications")] == ["7"]

    def test_attribute_missing_or_null(self):
        """Test that missing and null attributes read as empty strings."""
        resource = Resource.model_validate(candidate("1", "Ada", None, "ada@example.com"))

        assert resource.attribute("first-name") == "Ada"
        assert resource.attribute("last-name") == ""
        assert resource.attribute("phone") == ""

    def test_missing_relationship(self):
        """Test that an absent relationship has no identifiers."""
        resource = Resource.model_validate(candidate("1", "Ada", "Lovelace", "ada@example.com"))

        assert resource.related("job-applications") == []

    def test_to_one_relationship(self):
        """Test that a single identifier normalizes to a one-item list."""
        resource = Resource.model_validate({
            "id": "1",
            "type": "candidates",
            "attributes": {},
            "relationships": {
                "job-applications": {"data": {"type": "job-applications", "id": 5}},
            },
        })

        refs = resource.related("job-applications")
        assert len(refs) == 1
        assert refs[0].id == "5"

    def test_links_only_relationship(self):
        """Test a relationship that only carries links."""
        resource = Resource.model_validate({
            "id": "1",
            "type": "candidates",
            "relationships": {
                "job-applications": {"links": {"related": "https://example.com"}},
            },
        })

        assert resource.related("job-applications") == []
        assert resource.attributes == {}

    def test_job_application_created_at(self):
        """Test reading the created-at attribute."""
        resource = Resource.model_validate(job_application(10, "2024-01-15T10:00:00Z"))

        assert resource.id == "10"
        assert resource.attribute("created-at") == "2024-01-15T10:00:00Z"


# =============================================================================
# CsvRow Tests
# =============================================================================

class TestCsvRow:
    """Tests for the CsvRow dataclass."""

    def test_headers(self):
        """Test the fixed column order."""
        assert CSV_HEADERS == (
            "candidate_id",
            "first_name",
            "last_name",
            "email",
            "job_application_id",
            "job_application_created_at",
        )

    def test_defaults(self):
        """Test that job application fields default to empty strings."""
        row = CsvRow("1", "Ada", "Lovelace", "ada@example.com")

        assert row.as_tuple() == ("1", "Ada", "Lovelace", "ada@example.com", "", "")

    def test_immutable(self):
        """Rows cannot be modified after construction."""
        row = CsvRow("1", "Ada", "Lovelace", "ada@example.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            row.email = "other@example.com"
