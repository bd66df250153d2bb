"""
Candidate database model.

A person under consideration for a role, identified by email. Every candidate
is linked to one or more job offers at creation time.
"""

from sqlalchemy import Column, Integer, String, Enum, Text, DateTime, func
import enum
from app.core.database import Base


class RecruitmentStatus(str, enum.Enum):
    """
    Recruitment pipeline status:

    NEW -> IN_INTERVIEWS -> ACCEPTED
                 ↓
              REJECTED
    """
    NEW = "new"
    IN_INTERVIEWS = "in interviews"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Candidate(Base):
    """
    A job candidate.

    The email is the natural key: association rows reference it directly.
    """
    __tablename__ = "candidate"

    email = Column(String, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    years_of_experience = Column(Integer, nullable=True)
    additional_recruiter_notes = Column(Text, nullable=True)

    # Stored by value ("in interviews"), not by member name
    recruitment_status = Column(
        Enum(
            RecruitmentStatus,
            name="recruitment_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=RecruitmentStatus.NEW,
        nullable=False,
    )
    date_of_consent_for_recruitment = Column(DateTime, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Candidate(email='{self.email}', status={self.recruitment_status.value})>"
