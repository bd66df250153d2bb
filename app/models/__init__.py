"""
Database models package.
"""

from app.models.candidate import Candidate, RecruitmentStatus
from app.models.job_offer import JobOffer
from app.models.candidate_job_offer import CandidateJobOffer

__all__ = ["Candidate", "RecruitmentStatus", "JobOffer", "CandidateJobOffer"]
