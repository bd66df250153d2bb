"""
Candidate creation and listing.

Creation flow:
1. Validate required fields and email shape
2. Reject emails that already exist
3. Resolve the recruitment status (defaults to "new")
4. Pick 1-3 random job offers
5. In one transaction: insert candidate, insert offer links, push to the
   legacy system, commit. Any failure rolls the whole unit back.
6. Re-read the stored candidate with its offers
"""

import logging
import math
import random
import re
from datetime import date, datetime, time
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, ServerError, ValidationError
from app.crud import candidate as candidate_crud
from app.crud import job_offer as job_offer_crud
from app.models.candidate import Candidate, RecruitmentStatus
from app.models.job_offer import JobOffer
from app.schemas.candidate import (
    CandidateCreateRequest,
    CandidateCreateResponse,
    CandidateListResponse,
    CandidateResponse,
    PaginationMeta,
)
from app.schemas.job_offer import JobOfferResponse
from app.services.legacy_sync import LegacySyncClient

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MAX_OFFERS_PER_CANDIDATE = 3


def validate_candidate(candidate_data: CandidateCreateRequest) -> None:
    """
    Check required fields and email shape.

    Checks run in a fixed order and stop at the first failure: first name,
    last name, email presence, email format, years of experience.

    Raises:
        ValidationError: With the message of the first failed check
    """
    if not candidate_data.first_name:
        raise ValidationError("First name is required")

    if not candidate_data.last_name:
        raise ValidationError("Last name is required")

    if not candidate_data.email:
        raise ValidationError("Email is required")

    if not EMAIL_PATTERN.search(candidate_data.email):
        raise ValidationError("Invalid email format")

    if candidate_data.years_of_experience is not None and candidate_data.years_of_experience < 0:
        raise ValidationError("Years of experience must be a non-negative integer")


def resolve_recruitment_status(value: Optional[str]) -> RecruitmentStatus:
    """Return the status for a raw value; an empty value means NEW."""
    if not value:
        return RecruitmentStatus.NEW
    try:
        return RecruitmentStatus(value)
    except ValueError:
        raise ValidationError("Invalid recruitment status") from None


def pick_job_offers(offer_ids: Sequence[int], rng=random) -> List[int]:
    """
    Choose between 1 and 3 distinct offers uniformly at random.

    The count never exceeds the number of offers available.

    Raises:
        ServerError: If there are no offers to choose from
    """
    if not offer_ids:
        raise ServerError("No job offers available in the system")

    count = rng.randint(1, min(MAX_OFFERS_PER_CANDIDATE, len(offer_ids)))
    return rng.sample(list(offer_ids), count)


def _as_datetime(value):
    # SQLite DateTime columns only accept datetime objects
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time())
    return value


def _offer_to_response(offer: JobOffer) -> JobOfferResponse:
    return JobOfferResponse(
        id=offer.id,
        title=offer.title,
        description=offer.description,
        salary_range=offer.salary_range,
        location=offer.location,
    )


def _candidate_to_response(candidate: Candidate, offers: Sequence[JobOffer]) -> CandidateResponse:
    return CandidateResponse(
        first_name=candidate.first_name,
        last_name=candidate.last_name,
        email=candidate.email,
        phone=candidate.phone,
        years_of_experience=candidate.years_of_experience,
        additional_recruiter_notes=candidate.additional_recruiter_notes,
        recruitment_status=candidate.recruitment_status,
        date_of_consent_for_recruitment=candidate.date_of_consent_for_recruitment,
        created_at=candidate.created_at,
        job_offers=[_offer_to_response(offer) for offer in offers],
    )


class CandidateService:
    """
    Candidate workflows bound to one database session.

    The session is used for a single request; `create` commits or rolls it
    back before returning.
    """

    def __init__(self, db: Session, legacy_client: LegacySyncClient, rng=None):
        self.db = db
        self.legacy_client = legacy_client
        self.rng = rng or random

    def check_for_existing_candidate(self, email: str) -> None:
        """
        Raises:
            ConflictError: If a candidate with this email is already stored
        """
        if candidate_crud.get_by_email(self.db, email):
            logger.info(f"Rejected duplicate candidate {email}")
            raise ConflictError("Candidate with this email already exists")

    def select_job_offers(self) -> List[int]:
        """Read the available offer IDs and pick this candidate's subset."""
        offer_ids = job_offer_crud.get_all_ids(self.db)
        selected = pick_job_offers(offer_ids, self.rng)
        logger.info(f"Selected {len(selected)} of {len(offer_ids)} job offers: {selected}")
        return selected

    def create(self, candidate_data: CandidateCreateRequest) -> CandidateCreateResponse:
        """
        Create a candidate, link it to random job offers, and sync it.

        Args:
            candidate_data: Payload from POST /candidates

        Returns:
            Success message and the stored candidate with its offers

        Raises:
            ValidationError, ConflictError, ServerError, UpstreamTimeoutError:
                Workflow failures; nothing is persisted
        """
        validate_candidate(candidate_data)
        self.check_for_existing_candidate(candidate_data.email)
        status = resolve_recruitment_status(candidate_data.recruitment_status)
        offer_ids = self.select_job_offers()

        try:
            candidate_crud.create(
                self.db,
                candidate_data,
                status,
                consent_date=_as_datetime(candidate_data.date_of_consent_for_recruitment)
            )
            candidate_crud.link_job_offers(self.db, candidate_data.email, offer_ids)

            # Legacy failure undoes the local insert too
            self.legacy_client.push_candidate(
                candidate_data.first_name,
                candidate_data.last_name,
                candidate_data.email,
            )

            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.warning(f"Rolled back creation of candidate {candidate_data.email}: {e}")
            raise

        logger.info(f"Created candidate {candidate_data.email} with {len(offer_ids)} job offers")

        return CandidateCreateResponse(
            message="Candidate created successfully",
            candidate=self.get_candidate_with_offers(candidate_data.email),
        )

    def get_candidate_with_offers(self, email: str) -> CandidateResponse:
        """
        Re-read a stored candidate and its job offers.

        Raises:
            ServerError: If the candidate cannot be read back
        """
        candidate = candidate_crud.get_by_email(self.db, email)
        if candidate is None:
            raise ServerError(f"Candidate {email} not found after creation")

        offers = job_offer_crud.get_for_candidate(self.db, email)
        return _candidate_to_response(candidate, offers)

    def get_all(self, page: int = 1, limit: int = 10) -> CandidateListResponse:
        """
        List candidates page by page, each with its job offers.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            The page's candidates and pagination metadata
        """
        offset = (page - 1) * limit
        total = candidate_crud.count(self.db)
        total_pages = max(math.ceil(total / limit), 0)

        if total == 0 or offset >= total:
            return CandidateListResponse(
                data=[],
                meta=PaginationMeta(page=page, limit=limit, total=total, total_pages=total_pages),
            )

        candidates = candidate_crud.get_page(self.db, offset=offset, limit=limit)
        data = [
            _candidate_to_response(candidate, job_offer_crud.get_for_candidate(self.db, candidate.email))
            for candidate in candidates
        ]

        return CandidateListResponse(
            data=data,
            meta=PaginationMeta(page=page, limit=limit, total=total, total_pages=total_pages),
        )
