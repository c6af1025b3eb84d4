# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Candidate Export API:
# - test_models.py: JSON:API document parsing and the CsvRow type
# - test_teamtailor_client.py: Paginated fetching and error mapping
# - test_candidate_rows.py: Flattening candidates into CSV rows
# - test_csv_export.py: CSV encoding and the streaming export
# - test_api.py: HTTP endpoints through FastAPI's TestClient
#
# Teamtailor is simulated with httpx.MockTransport; no network access.
#
# Run tests with: pytest
# =============================================================================
