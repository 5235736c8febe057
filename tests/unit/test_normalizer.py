"""Unit tests for form input normalization"""

import pytest
from prequal_gateway.domain.exceptions import ValidationError
from prequal_gateway.domain.models import EmploymentStatus
from prequal_gateway.domain.normalizer import normalize_applicant, parse_amount


def test_normalize_applicant_form_field_names(sample_form):
    """Test camelCase form keys parse into a typed profile"""
    profile = normalize_applicant(sample_form)

    assert profile.annual_income == 60000.0
    assert profile.employment_status is EmploymentStatus.FULL_TIME
    assert profile.monthly_debts == 500.0
    assert profile.requested_amount == 10000.0
    assert profile.credit_score_band == 750


def test_normalize_applicant_snake_case_and_numbers():
    """Test snake_case keys with numeric values"""
    profile = normalize_applicant(
        {
            "annual_income": 45000,
            "employment_status": "Self-Employed",
            "monthly_debts": 0,
            "requested_amount": 500,
            "credit_score_band": 0,
        }
    )

    assert profile.employment_status is EmploymentStatus.SELF_EMPLOYED
    assert profile.requested_amount == 500.0
    assert profile.credit_score_band == 0


def test_parse_amount_currency_formatting():
    """Test dollar sign, separators and whitespace are tolerated"""
    assert parse_amount(" $12,500.50 ", "annual_income") == 12500.5
    assert parse_amount("0", "monthly_debts") == 0.0


@pytest.mark.parametrize("value", ["abc", "", "nan", "inf", True, None, [100], 10**400])
def test_parse_amount_rejects_non_numeric(value):
    """Test non-numeric and non-finite values fail with the field name"""
    form = {
        "annual_income": value,
        "employment_status": "full_time",
        "monthly_debts": "0",
        "requested_amount": "5000",
        "credit_score_band": "750",
    }
    with pytest.raises(ValidationError) as exc_info:
        normalize_applicant(form)

    assert exc_info.value.field == "annual_income"


@pytest.mark.parametrize(
    "field, value",
    [
        ("annual_income", "-1"),
        ("monthly_debts", "-0.01"),
        ("requested_amount", "499.99"),
        ("requested_amount", "100000.01"),
        ("employment_status", "contractor"),
        ("credit_score_band", "700"),
        ("credit_score_band", "750.5"),
    ],
)
def test_normalize_applicant_out_of_range(field, value):
    """Test each constraint names its own field"""
    form = {
        "annual_income": "60000",
        "employment_status": "full_time",
        "monthly_debts": "500",
        "requested_amount": "10000",
        "credit_score_band": "750",
    }
    form[field] = value

    with pytest.raises(ValidationError) as exc_info:
        normalize_applicant(form)

    assert exc_info.value.field == field


def test_normalize_applicant_requested_amount_bounds_inclusive():
    """Test $500 and $100,000 are both accepted"""
    base = {
        "annual_income": "60000",
        "employment_status": "retired",
        "monthly_debts": "0",
        "credit_score_band": "680",
    }
    assert normalize_applicant({**base, "requested_amount": "500"}).requested_amount == 500
    assert normalize_applicant({**base, "requested_amount": "100000"}).requested_amount == 100000


def test_normalize_applicant_missing_field(sample_form):
    """Test a missing field is reported by canonical name"""
    del sample_form["monthlyDebts"]

    with pytest.raises(ValidationError) as exc_info:
        normalize_applicant(sample_form)

    assert exc_info.value.field == "monthly_debts"
