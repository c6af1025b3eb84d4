# =============================================================================
# core/models/__init__.py - Model Exports
# =============================================================================

from .jsonapi import JsonApiDocument, Links, Relationship, Resource, ResourceIdentifier
from .export import CSV_HEADERS, CsvRow

__all__ = [
    # JSON:API
    "JsonApiDocument",
    "Links",
    "Relationship",
    "Resource",
    "ResourceIdentifier",
    # Export
    "CSV_HEADERS",
    "CsvRow",
]
