"""
CRUD operations for JobOffer model.
"""

from typing import Iterable, List
from sqlalchemy.orm import Session
from app.models.job_offer import JobOffer
from app.models.candidate_job_offer import CandidateJobOffer


def get_all_ids(db: Session) -> List[int]:
    """
    Retrieve the IDs of every job offer, in ID order.

    Args:
        db: Database session

    Returns:
        List of job offer IDs (empty if none are seeded)
    """
    return [row.id for row in db.query(JobOffer.id).order_by(JobOffer.id).all()]


def get_for_candidate(db: Session, email: str) -> List[JobOffer]:
    """
    Retrieve the job offers associated with a candidate.

    Args:
        db: Database session
        email: Candidate email

    Returns:
        List of JobOffer instances ordered by ID
    """
    return (
        db.query(JobOffer)
        .join(CandidateJobOffer, CandidateJobOffer.job_offer_id == JobOffer.id)
        .filter(CandidateJobOffer.candidate_email == email)
        .order_by(JobOffer.id)
        .all()
    )


def count(db: Session) -> int:
    """Count all job offers."""
    return db.query(JobOffer).count()


def create_many(db: Session, offers: Iterable[dict]) -> List[JobOffer]:
    """
    Insert job offers and commit.

    Args:
        db: Database session
        offers: Dicts with title, description, salary_range and location

    Returns:
        Created JobOffer instances with IDs
    """
    db_offers = [JobOffer(**offer) for offer in offers]

    db.add_all(db_offers)
    db.commit()
    for offer in db_offers:
        db.refresh(offer)

    return db_offers
