"""
CRUD operations for Candidate model.

Writes here only flush: the caller owns the transaction and decides when to
commit or roll back.
"""

from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
from app.models.candidate import Candidate, RecruitmentStatus
from app.models.candidate_job_offer import CandidateJobOffer
from app.schemas.candidate import CandidateCreateRequest


def get_by_email(db: Session, email: str) -> Optional[Candidate]:
    """
    Retrieve a candidate by exact email match.

    Args:
        db: Database session
        email: Candidate email

    Returns:
        Candidate instance if found, None otherwise
    """
    return db.query(Candidate).filter(Candidate.email == email).first()


def create(
    db: Session,
    candidate_data: CandidateCreateRequest,
    status: RecruitmentStatus,
    consent_date=None
) -> Candidate:
    """
    Insert a candidate row inside the current transaction.

    Args:
        db: Database session
        candidate_data: Validated candidate payload
        status: Resolved recruitment status
        consent_date: Consent timestamp, already normalized to a datetime

    Returns:
        The pending Candidate instance (flushed, not committed)
    """
    db_candidate = Candidate(
        first_name=candidate_data.first_name,
        last_name=candidate_data.last_name,
        email=candidate_data.email,
        phone=candidate_data.phone or None,
        years_of_experience=candidate_data.years_of_experience,
        additional_recruiter_notes=candidate_data.additional_recruiter_notes or None,
        recruitment_status=status,
        date_of_consent_for_recruitment=consent_date
    )

    db.add(db_candidate)
    db.flush()

    return db_candidate


def link_job_offers(db: Session, email: str, job_offer_ids: Sequence[int]) -> List[CandidateJobOffer]:
    """
    Insert one association row per job offer inside the current transaction.

    Args:
        db: Database session
        email: Email of the candidate being created
        job_offer_ids: Distinct job offer IDs

    Returns:
        The pending association rows
    """
    links = [
        CandidateJobOffer(candidate_email=email, job_offer_id=offer_id)
        for offer_id in job_offer_ids
    ]

    db.add_all(links)
    db.flush()

    return links


def count(db: Session) -> int:
    """Count all candidates."""
    return db.query(Candidate).count()


def get_page(db: Session, offset: int = 0, limit: int = 10) -> List[Candidate]:
    """
    Retrieve one page of candidates, oldest first.

    Args:
        db: Database session
        offset: Number of records to skip
        limit: Maximum number of records to return

    Returns:
        List of Candidate instances
    """
    return (
        db.query(Candidate)
        .order_by(Candidate.created_at, Candidate.email)
        .offset(offset)
        .limit(limit)
        .all()
    )
