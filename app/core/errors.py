"""
Error kinds raised by the candidate workflow.

Each error carries the HTTP status the API layer responds with; the message
is returned to the caller verbatim as {"error": message}.
"""

from typing import Optional


class CandidateServiceError(Exception):
    """Base class for errors that are safe to show to API callers."""

    status = 500

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ValidationError(CandidateServiceError):
    """Client input is malformed."""
    status = 422


class ConflictError(CandidateServiceError):
    """The resource already exists, locally or in the legacy system."""
    status = 409


class UpstreamTimeoutError(CandidateServiceError):
    """The legacy system kept timing out until the retry budget ran out."""
    status = 504


class ServerError(CandidateServiceError):
    """No offers to assign, unexpected upstream failure, or internal fault."""
    status = 500
