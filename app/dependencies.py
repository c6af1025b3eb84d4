# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.teamtailor_client import TeamtailorClient


def get_teamtailor_client() -> TeamtailorClient:
    """
    Create a Teamtailor client for one request.

    The export stream owns the client and closes it when streaming ends,
    so this is a plain (non-yield) dependency.
    """
    return TeamtailorClient.from_settings(settings)


# Type alias for dependency injection
TeamtailorClientDep = Annotated[TeamtailorClient, Depends(get_teamtailor_client)]
