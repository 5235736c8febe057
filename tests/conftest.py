"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from prequal_gateway.api.main import create_app
from prequal_gateway.domain.models import ApplicantProfile, EmploymentStatus


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def prime_profile() -> ApplicantProfile:
    """Healthy applicant: $60k income, 10% DTI, excellent credit"""
    return ApplicantProfile(
        annual_income=60000,
        employment_status=EmploymentStatus.FULL_TIME,
        monthly_debts=500,
        requested_amount=10000,
        credit_score_band=750,
    )


@pytest.fixture
def sample_form() -> dict:
    """Raw values as the web form submits them"""
    return {
        "annualIncome": "60000",
        "employmentStatus": "full_time",
        "monthlyDebts": "500",
        "loanAmount": "10000",
        "creditScore": "750",
    }
