from pydantic import BaseModel, Field
from typing import Optional


class JobOfferResponse(BaseModel):
    """Schema for a job offer attached to a candidate"""
    id: int
    title: str
    description: str
    salary_range: Optional[str] = Field(None, alias="salaryRange")
    location: Optional[str] = None

    class Config:
        populate_by_name = True
