"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- A scripted fake of the legacy candidate API
"""

import json
import os

# Point the application engine at an in-memory database before app imports
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JSON_LOGS"] = "false"
os.environ.pop("LEGACY_API_URL", None)

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import LegacyApiConfig
from app.core.database import Base, get_db
from app.core.deps import get_legacy_client
from app.crud import job_offer as job_offer_crud
from app.models import Candidate, CandidateJobOffer, JobOffer  # noqa: F401
from app.services.legacy_sync import LegacySyncClient
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

LEGACY_BASE_URL = "http://legacy.test"
LEGACY_API_KEY = "test-api-key"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeLegacyApi:
    """
    Stand-in for the legacy candidate API.

    Replies with queued status codes in order (201 once the queue is empty),
    records every request, and records backoff waits instead of sleeping.
    A queued exception instance is raised instead of returning a response.
    """

    def __init__(self):
        self.replies = []
        self.requests = []
        self.sleeps = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if self.replies else 201
        if isinstance(reply, Exception):
            raise reply
        return httpx.Response(reply, json={"message": "legacy reply"})

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)

    @property
    def bodies(self):
        return [json.loads(request.content) for request in self.requests]

    def client(self, retries: int = 3, backoff_ms: int = 1000) -> LegacySyncClient:
        config = LegacyApiConfig(
            base_url=LEGACY_BASE_URL,
            api_key=LEGACY_API_KEY,
            retries=retries,
            backoff_ms=backoff_ms,
        )
        return LegacySyncClient(config, transport=httpx.MockTransport(self.handler), sleep=self.sleep)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Drops all tables after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def legacy_api():
    """Scripted legacy API; succeeds with 201 unless replies are queued."""
    return FakeLegacyApi()


@pytest.fixture
def client(db_session, legacy_api):
    """
    FastAPI test client with overridden database and legacy client dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_legacy_client] = lambda: legacy_api.client()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def job_offers(db_session):
    """Five seeded job offers."""
    return job_offer_crud.create_many(db_session, [
        {
            "title": f"Job {i}",
            "description": f"Description {i}",
            "salary_range": "$50k-$70k",
            "location": "Remote",
        }
        for i in range(1, 6)
    ])


@pytest.fixture
def single_job_offer(db_session):
    """Exactly one seeded job offer."""
    return job_offer_crud.create_many(db_session, [{
        "title": "Test Job",
        "description": "Description",
        "salary_range": "$50k-$70k",
        "location": "Remote",
    }])[0]


@pytest.fixture
def sample_candidate_data():
    """Valid candidate payload in the API's camelCase shape"""
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "123-456-789",
        "yearsOfExperience": 5,
        "additionalRecruiterNotes": "Great candidate",
        "recruitmentStatus": "new",
        "dateOfConsentForRecruitment": "2024-03-24",
    }
