"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Auth headers for admin and regular users
- Seeded companies and jobs
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.models.company import Company
from app.models.job import Job
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    """Bearer headers for an admin user"""
    token = create_access_token({"sub": "admin", "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    """Bearer headers for a regular (non-admin) user"""
    token = create_access_token({"sub": "u1", "is_admin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def seeded_jobs(db_session):
    """
    Three companies and four jobs:

    Job1 salary 100 equity 0.1, Job2 200/0.2, Job3 300/0, Job4 no salary or equity.
    All jobs belong to c1.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ])
    db_session.commit()

    jobs = [
        Job(title="Job1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="Job2", salary=200, equity=0.2, company_handle="c1"),
        Job(title="Job3", salary=300, equity=0, company_handle="c1"),
        Job(title="Job4", salary=None, equity=None, company_handle="c1"),
    ]
    db_session.add_all(jobs)
    db_session.commit()

    return {job.title: job.id for job in jobs}


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Senior Python Developer",
        "salary": 150000,
        "equity": 0.05,
        "company_handle": "c1",
    }
