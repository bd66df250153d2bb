"""
API endpoints for candidate management.

Handles candidate creation and paginated listing. Service errors are
returned as {"error": message} with the error's status; anything else is
logged and reported as a generic database error.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.deps import get_candidate_service
from app.core.errors import CandidateServiceError
from app.schemas.candidate import (
    CandidateCreateRequest,
    CandidateCreateResponse,
    CandidateListResponse,
    ErrorResponse,
)
from app.services.candidate_service import CandidateService

router = APIRouter(prefix="/candidates", tags=["Candidates"])
logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
GENERIC_ERROR = "Database error"


def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    Parse a query parameter, falling back to the default when it is missing,
    not a number, or less than 1.
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


@router.get(
    "",
    response_model=CandidateListResponse,
    responses={500: {"model": ErrorResponse}}
)
def list_candidates(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    service: CandidateService = Depends(get_candidate_service)
):
    """
    List candidates with their assigned job offers.

    Args:
        page: 1-based page number (default: 1)
        limit: Page size (default: 10)
    """
    page_number = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(limit, DEFAULT_LIMIT)

    try:
        return service.get_all(page_number, page_size)
    except Exception:
        logger.exception(f"Error listing candidates (page={page_number}, limit={page_size})")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})


@router.post(
    "",
    status_code=201,
    response_model=CandidateCreateResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    }
)
def create_candidate(
    request: CandidateCreateRequest,
    service: CandidateService = Depends(get_candidate_service)
):
    """
    Create a candidate and assign it 1-3 random job offers.

    Flow:
    1. Validate first name, last name and email (in that order)
    2. Reject duplicate emails (409)
    3. Pick job offers (500 if none exist)
    4. Insert candidate and offer links, push to the legacy system, commit
    5. Return the stored candidate with its offers

    If the legacy push fails the candidate is not saved.

    Declared with plain def so FastAPI runs it in the threadpool: the
    transaction stays open across the legacy call and must not hold the
    event loop.
    """
    try:
        return service.create(request)
    except CandidateServiceError as e:
        return JSONResponse(status_code=e.status, content={"error": e.message})
    except Exception:
        logger.exception(f"Unexpected error creating candidate {request.email}")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})
