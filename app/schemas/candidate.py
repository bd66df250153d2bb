"""
Pydantic schemas for Candidate API requests/responses.

The API speaks camelCase; the database speaks snake_case. Every field carries
its camelCase alias and can also be populated by its Python name.
"""

from datetime import date, datetime
from typing import List, Optional, Union
from pydantic import BaseModel, Field
from app.models.candidate import RecruitmentStatus
from app.schemas.job_offer import JobOfferResponse


class CandidateCreateRequest(BaseModel):
    """
    Body of POST /candidates.

    Required fields are declared optional here on purpose: presence and
    format checks run in the service so that errors come back in a fixed
    order with fixed messages.
    """
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = Field(None, alias="email")
    phone: Optional[str] = Field(None, alias="phone")
    years_of_experience: Optional[int] = Field(None, alias="yearsOfExperience")
    additional_recruiter_notes: Optional[str] = Field(None, alias="additionalRecruiterNotes")
    recruitment_status: Optional[str] = Field(
        None,
        alias="recruitmentStatus",
        description="One of: new, in interviews, accepted, rejected (default: new)"
    )
    date_of_consent_for_recruitment: Optional[Union[datetime, date]] = Field(
        None, alias="dateOfConsentForRecruitment"
    )

    class Config:
        populate_by_name = True


class CandidateResponse(BaseModel):
    """A stored candidate together with the job offers assigned to it."""
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone: Optional[str] = None
    years_of_experience: Optional[int] = Field(None, alias="yearsOfExperience")
    additional_recruiter_notes: Optional[str] = Field(None, alias="additionalRecruiterNotes")
    recruitment_status: RecruitmentStatus = Field(..., alias="recruitmentStatus")
    date_of_consent_for_recruitment: Optional[datetime] = Field(None, alias="dateOfConsentForRecruitment")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    job_offers: List[JobOfferResponse] = Field(default_factory=list, alias="jobOffers")

    class Config:
        populate_by_name = True


class CandidateCreateResponse(BaseModel):
    """Response after creating a candidate."""
    message: str
    candidate: CandidateResponse


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")

    class Config:
        populate_by_name = True


class CandidateListResponse(BaseModel):
    """One page of candidates."""
    data: List[CandidateResponse]
    meta: PaginationMeta


class ErrorResponse(BaseModel):
    """Error body returned for every failed candidate request."""
    error: str
