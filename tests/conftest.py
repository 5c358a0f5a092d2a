import os

# Keep test runs from writing resume_backend.log into the working tree
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient

from vitae.services import draft_service


@pytest.fixture
def complete_resume():
    return {
        "personalInfo": {
            "name": "Ada Lovelace",
            "title": "Analytical Engineer",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "location": "London, UK",
            "linkedin": "linkedin.com/in/ada",
        },
        "summary": "First programmer, fond of engines.",
        "experience": [
            {
                "company": "Analytical Engine Co",
                "position": "Programmer",
                "startDate": "1842",
                "endDate": "1843",
                "description": ["Wrote the first algorithm", "Annotated Menabrea's paper"],
            },
            {
                "company": "Royal Society",
                "position": "Correspondent",
                "startDate": "1844",
                "endDate": "",
                "description": "Letters on poetical science",
            },
        ],
        "education": [
            {
                "school": "Private Tutoring",
                "degree": "Mathematics",
                "field": "Calculus",
                "graduationYear": "1835",
            },
        ],
        "skills": ["Mathematics", "Algorithms", "Poetical Science"],
        "languages": ["English", "French"],
    }


@pytest.fixture
def empty_resume():
    return {
        "personalInfo": {"name": "", "title": "", "email": "", "phone": ""},
        "summary": "",
        "experience": [],
        "education": [],
        "skills": [],
    }


@pytest.fixture
def client():
    from vitae.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_drafts():
    draft_service.DRAFTS.clear()
    yield
    draft_service.DRAFTS.clear()
