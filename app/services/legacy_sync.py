"""
Client for the legacy candidate system.

Every new candidate is pushed to the legacy API as
POST {LEGACY_API_URL}/candidates with a static X-API-KEY header. Only
firstName, lastName and email are sent.
"""

import logging
import time
import httpx
from typing import Callable, Dict, Optional
from app.core.config import LegacyApiConfig
from app.core.errors import (
    CandidateServiceError,
    ConflictError,
    ServerError,
    UpstreamTimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Gateway timeout is the only status worth retrying
TRANSIENT_STATUS = 504
CONFLICT_STATUS = 409
BAD_REQUEST_STATUS = 400


def error_for_status(status_code: int) -> CandidateServiceError:
    """
    Translate the last legacy response status into a service error.

    Args:
        status_code: HTTP status of the final attempt (never 2xx)

    Returns:
        The error to raise to the caller
    """
    if status_code == CONFLICT_STATUS:
        return ConflictError("Candidate with this email already exists in the legacy system")
    if status_code == TRANSIENT_STATUS:
        return UpstreamTimeoutError("Legacy system timed out")
    if status_code == BAD_REQUEST_STATUS:
        return ValidationError("Legacy system rejected the candidate data", status=400)
    return ServerError("Failed to push candidate to the legacy system")


class LegacySyncClient:
    """
    Pushes candidate summaries to the legacy system.

    Handles:
    - Linear backoff on 504 (wait backoff_ms * attempt before the next try)
    - Stopping on 409 or any other non-retryable status
    - Mapping the final status to a CandidateServiceError
    """

    def __init__(
        self,
        config: LegacyApiConfig,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.transport = transport
        self._sleep = sleep

    @property
    def enabled(self) -> bool:
        return bool(self.config.base_url)

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/candidates"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-KEY": self.config.api_key,
        }

    def push_candidate(self, first_name: str, last_name: str, email: str) -> None:
        """
        Send a candidate to the legacy system, retrying gateway timeouts.

        Args:
            first_name: Candidate first name
            last_name: Candidate last name
            email: Candidate email

        Raises:
            ConflictError: Legacy system already knows this email (409)
            UpstreamTimeoutError: Every allowed attempt timed out (504)
            ValidationError: Legacy system rejected the payload (400)
            ServerError: Any other failure (500)
        """
        if not self.enabled:
            logger.info(f"Legacy sync disabled (LEGACY_API_URL not set), skipping {email}")
            return

        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        max_attempts = self.config.retries
        status_code = None

        with httpx.Client(transport=self.transport, timeout=self.config.timeout) as client:
            for attempt in range(1, max_attempts + 1):
                status_code = self._send(client, payload, attempt)

                if 200 <= status_code < 300:
                    logger.info(f"Pushed candidate {email} to legacy system on attempt {attempt}")
                    return

                if status_code != TRANSIENT_STATUS or attempt == max_attempts:
                    break

                wait_ms = self.config.backoff_ms * attempt
                logger.warning(
                    f"Attempt {attempt}/{max_attempts}: legacy system returned {status_code}, "
                    f"retrying in {wait_ms} ms"
                )
                self._sleep(wait_ms / 1000)

        logger.error(f"Legacy sync failed for {email} with status {status_code}")
        raise error_for_status(status_code)

    def _send(self, client: httpx.Client, payload: Dict[str, str], attempt: int) -> int:
        """POST once and return the status code. A client-side timeout counts as a 504."""
        try:
            response = client.post(self.endpoint, json=payload, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.warning(f"Attempt {attempt}: legacy request timed out: {e}")
            return TRANSIENT_STATUS
        except httpx.RequestError as e:
            logger.error(f"Attempt {attempt}: legacy request failed: {e}")
            raise ServerError("Failed to push candidate to the legacy system") from e

        return response.status_code
