"""
FastAPI dependencies for the candidate workflow.

Tests override get_legacy_client to point the service at a fake legacy API.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.services.candidate_service import CandidateService
from app.services.legacy_sync import LegacySyncClient


def get_legacy_client() -> LegacySyncClient:
    """Build a legacy client from the current settings."""
    return LegacySyncClient(settings.legacy_config)


def get_candidate_service(
    db: Session = Depends(get_db),
    legacy_client: LegacySyncClient = Depends(get_legacy_client),
) -> CandidateService:
    """Bind a CandidateService to the request's database session."""
    return CandidateService(db, legacy_client)
