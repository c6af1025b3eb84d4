# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - export.py: Candidate CSV export endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import export

__all__ = [
    "health",
    "export",
]
