"""
Seed the JobOffer table with sample offers for local development.

Creates missing tables first. Does nothing if offers already exist.
Run this from the project root:
    python seed_job_offers.py
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.logging_config import setup_logging
from app.crud import job_offer as job_offer_crud

logger = logging.getLogger(__name__)

SAMPLE_JOB_OFFERS = [
    {
        "title": "Senior Backend Engineer",
        "description": "Design and run the services behind our recruitment platform.",
        "salary_range": "$120k-$150k",
        "location": "Remote",
    },
    {
        "title": "Frontend Developer",
        "description": "Build the recruiter dashboard in TypeScript and React.",
        "salary_range": "$90k-$115k",
        "location": "Warsaw, PL",
    },
    {
        "title": "Data Analyst",
        "description": "Own hiring funnel reporting and candidate pipeline metrics.",
        "salary_range": "$70k-$90k",
        "location": "Berlin, DE",
    },
    {
        "title": "DevOps Engineer",
        "description": "Keep CI/CD, infrastructure and observability healthy.",
        "salary_range": "$110k-$140k",
        "location": "Remote",
    },
    {
        "title": "Technical Recruiter",
        "description": "Source and screen engineering candidates end to end.",
        "salary_range": "$60k-$80k",
        "location": "London, UK",
    },
]


def seed_job_offers(db: Optional[Session] = None) -> int:
    """
    Insert the sample offers if the table is empty.

    Args:
        db: Session to seed through; a new application session when omitted

    Returns:
        Number of offers inserted
    """
    if db is not None:
        return _seed(db)

    init_db()
    db = SessionLocal()
    try:
        return _seed(db)
    finally:
        db.close()


def _seed(db: Session) -> int:
    existing = job_offer_crud.count(db)
    if existing:
        logger.info(f"JobOffer table already has {existing} rows, skipping seed")
        return 0

    created = job_offer_crud.create_many(db, SAMPLE_JOB_OFFERS)
    logger.info(f"Seeded {len(created)} job offers")
    return len(created)


if __name__ == "__main__":
    setup_logging(log_level=settings.LOG_LEVEL, json_logs=False)
    seed_job_offers()
