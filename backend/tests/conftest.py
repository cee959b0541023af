"""Shared test fixtures."""

import pytest


@pytest.fixture
def login_payload():
    return {"email": "jane.doe@example.com", "password": "s3cret!"}


@pytest.fixture
def user_payload():
    """A complete, valid job seeker registration body."""
    return {
        "email": "jane.doe@example.com",
        "password": "s3cret!",
        "name": "Jane Doe",
        "phone": "+39 333 1234567",
        "location": "Milano",
        "skills": ["Python", "FastAPI", "SQL"],
        "experience": 4,
        "education": "BSc Computer Science",
        "resumeLink": "https://cdn.example.com/jane.pdf",
        "portfolio": "https://jane.dev",
        "jobTitle": "Backend Developer",
        "jobType": "FULL_TIME",
        "availability": True,
    }


@pytest.fixture
def employer_payload():
    """A valid employer registration body, without the optional fields."""
    return {
        "email": "hr@acme.io",
        "password": "hunter22",
        "name": "Mario Rossi",
        "companyName": "Acme",
        "companySize": "MEDIUM",
        "industry": "TECH",
        "location": "Torino",
    }
