# =============================================================================
# core/models/jsonapi.py - JSON:API Document Schemas
# =============================================================================
# These models describe the subset of the JSON:API document format that the
# Teamtailor collection endpoints return:
# - ResourceIdentifier: {type, id} reference used inside relationships
# - Relationship: wrapper around one or many identifiers
# - Resource: a typed resource with attributes and relationships
# - JsonApiDocument: one page of a collection (data, included, links, meta)
#
# Identifiers are always coerced to strings: Teamtailor may number them
# either way and relationship lookups are keyed by string id.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_id(value: Any) -> Any:
    """Turn numeric ids into strings, leave everything else to validation."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class ResourceIdentifier(BaseModel):
    """
    Reference to a resource by type and id.

    Example:
        {"type": "job-applications", "id": "42"}
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return _coerce_id(value)


class Relationship(BaseModel):
    """
    A relationship object.

    `data` is a list for to-many relationships, a single identifier for
    to-one relationships, and may be absent when only links are returned.
    """

    model_config = ConfigDict(extra="ignore")

    data: list[ResourceIdentifier] | ResourceIdentifier | None = None
    links: dict[str, Any] | None = None

    @property
    def identifiers(self) -> list[ResourceIdentifier]:
        """Relationship data as a list, empty when there is none."""
        if self.data is None:
            return []
        if isinstance(self.data, ResourceIdentifier):
            return [self.data]
        return self.data


class Resource(BaseModel):
    """A JSON:API resource object."""

    model_config = ConfigDict(extra="ignore")

    type: str
    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Relationship] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("attributes", "relationships", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def attribute(self, name: str) -> str:
        """
        Read an attribute as a string.

        Missing and null attributes read as "".
        """
        value = self.attributes.get(name)
        if value is None:
            return ""
        return str(value)

    def related(self, name: str) -> list[ResourceIdentifier]:
        """Identifiers of a named relationship, empty when absent."""
        relationship = self.relationships.get(name)
        if relationship is None:
            return []
        return relationship.identifiers


class Links(BaseModel):
    """Top-level pagination links."""

    model_config = ConfigDict(extra="allow")

    self_: str | None = Field(default=None, alias="self")
    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None


class JsonApiDocument(BaseModel):
    """
    One page of a JSON:API collection.

    `data` is required: a page without it is malformed, never an empty page.

    Example:
        {
            "data": [{"type": "candidates", "id": "1", "attributes": {...}}],
            "included": [{"type": "job-applications", "id": "7", ...}],
            "links": {"next": "https://api.teamtailor.com/v1/candidates?page[number]=2"},
            "meta": {"record-count": 120, "page-count": 2}
        }
    """

    model_config = ConfigDict(extra="ignore")

    data: list[Resource]
    included: list[Resource] = Field(default_factory=list)
    links: Links | None = None
    meta: dict[str, Any] | None = None

    @field_validator("included", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def next_url(self) -> str | None:
        """URL of the next page, None on the last page."""
        if self.links is None:
            return None
        return self.links.next or None
