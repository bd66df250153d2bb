from sqlalchemy import Column, Integer, String, ForeignKey
from app.core.database import Base


class CandidateJobOffer(Base):
    """
    Association between a candidate and a job offer.

    The (candidate_email, job_offer_id) pair is not unique at the storage
    level; the offer selector never picks the same offer twice per candidate.
    """
    __tablename__ = "CandidateJobOffers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    candidate_email = Column(String, ForeignKey("candidate.email"), nullable=False, index=True)
    job_offer_id = Column(Integer, ForeignKey("JobOffer.id"), nullable=False)
