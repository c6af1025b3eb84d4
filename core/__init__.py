# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the export pipeline:
# - models/: JSON:API document schemas and the CSV row type
# - services/: Teamtailor client, row flattening and CSV streaming
#
# Code in this package should NOT import from FastAPI.
# Errors are raised as app.exceptions types so the HTTP layer can map them.
# =============================================================================
