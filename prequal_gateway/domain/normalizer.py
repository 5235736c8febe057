"""Input normalization - the only place raw form values are parsed"""

import math
from typing import Any, Dict, Mapping, Tuple

from prequal_gateway.domain.exceptions import ValidationError
from prequal_gateway.domain.models import ApplicantProfile, EmploymentStatus

MIN_REQUESTED_AMOUNT = 500
MAX_REQUESTED_AMOUNT = 100_000

# Representative scores from the form's credit band dropdown
RECOGNIZED_CREDIT_BANDS = (750, 680, 620, 550, 0)

# Canonical field -> accepted keys, in lookup order
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "annual_income": ("annual_income", "annualIncome"),
    "employment_status": ("employment_status", "employmentStatus"),
    "monthly_debts": ("monthly_debts", "monthlyDebts"),
    "requested_amount": ("requested_amount", "requestedAmount", "loanAmount"),
    "credit_score_band": ("credit_score_band", "creditScoreBand", "creditScore"),
}


def _lookup(form: Mapping[str, Any], field: str) -> Any:
    for key in FIELD_ALIASES[field]:
        value = form.get(key)
        if value is not None and value != "":
            return value
    raise ValidationError(field, "This field is required")


def parse_amount(value: Any, field: str) -> float:
    """
    Parse a currency amount entered as text or number.

    Accepts surrounding whitespace, a leading "$" and thousands separators,
    e.g. " $12,500.50 " -> 12500.5
    """
    if isinstance(value, bool):
        raise ValidationError(field, "Must be a number")

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise ValidationError(field, "Must be a finite number") from None
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if text.startswith("$"):
            text = text[1:].strip()
        try:
            number = float(text)
        except ValueError:
            raise ValidationError(field, "Must be a number") from None
    else:
        raise ValidationError(field, "Must be a number")

    if math.isnan(number) or math.isinf(number):
        raise ValidationError(field, "Must be a finite number")

    return number


def parse_employment_status(value: Any) -> EmploymentStatus:
    if isinstance(value, EmploymentStatus):
        return value
    if not isinstance(value, str):
        raise ValidationError("employment_status", "Unrecognized employment status")

    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return EmploymentStatus(key)
    except ValueError:
        raise ValidationError("employment_status", f"Unrecognized employment status '{value}'") from None


def parse_credit_score_band(value: Any) -> int:
    number = parse_amount(value, "credit_score_band")
    if not number.is_integer() or int(number) not in RECOGNIZED_CREDIT_BANDS:
        raise ValidationError(
            "credit_score_band",
            f"Must be one of {', '.join(str(b) for b in RECOGNIZED_CREDIT_BANDS)}",
        )
    return int(number)


def normalize_applicant(form: Mapping[str, Any]) -> ApplicantProfile:
    """
    Validate raw form fields and build an ApplicantProfile.

    Raises:
        ValidationError: naming the first invalid field
    """
    annual_income = parse_amount(_lookup(form, "annual_income"), "annual_income")
    if annual_income < 0:
        raise ValidationError("annual_income", "Cannot be negative")

    employment_status = parse_employment_status(_lookup(form, "employment_status"))

    monthly_debts = parse_amount(_lookup(form, "monthly_debts"), "monthly_debts")
    if monthly_debts < 0:
        raise ValidationError("monthly_debts", "Cannot be negative")

    requested_amount = parse_amount(_lookup(form, "requested_amount"), "requested_amount")
    if not MIN_REQUESTED_AMOUNT <= requested_amount <= MAX_REQUESTED_AMOUNT:
        raise ValidationError(
            "requested_amount",
            f"Must be between ${MIN_REQUESTED_AMOUNT:,} and ${MAX_REQUESTED_AMOUNT:,}",
        )

    credit_score_band = parse_credit_score_band(_lookup(form, "credit_score_band"))

    return ApplicantProfile(
        annual_income=annual_income,
        employment_status=employment_status,
        monthly_debts=monthly_debts,
        requested_amount=requested_amount,
        credit_score_band=credit_score_band,
    )
