"""Eligibility rules for pre-qualification"""

from prequal_gateway.domain.models import ApplicantProfile, EmploymentStatus, QualificationVerdict

MIN_ANNUAL_INCOME = 12_000
MAX_DEBT_TO_INCOME = 50.0  # percent, exclusive

MINIMUM_INCOME_RULE = "minimum_income"
EMPLOYMENT_RULE = "employment"
DEBT_TO_INCOME_RULE = "debt_to_income"


def calculate_debt_to_income(monthly_debts: float, annual_income: float) -> float:
    """Monthly debts as a percentage of monthly income"""
    return (monthly_debts / (annual_income / 12)) * 100


def evaluate_qualification(profile: ApplicantProfile) -> QualificationVerdict:
    """
    Apply eligibility rules in fixed order; the first failure decides.

    Rules:
    1. Annual income of at least $12,000
    2. Not unemployed
    3. Debt-to-income strictly below 50%
    """
    if profile.annual_income < MIN_ANNUAL_INCOME:
        return QualificationVerdict(
            qualified=False,
            reason="Minimum annual income of $12,000 required.",
            rule=MINIMUM_INCOME_RULE,
        )

    if profile.employment_status == EmploymentStatus.UNEMPLOYED:
        return QualificationVerdict(
            qualified=False,
            reason="Employment required for loan qualification.",
            rule=EMPLOYMENT_RULE,
        )

    # Income is at least the minimum here, so the division is safe
    dti = calculate_debt_to_income(profile.monthly_debts, profile.annual_income)
    if dti >= MAX_DEBT_TO_INCOME:
        return QualificationVerdict(
            qualified=False,
            reason="Debt-to-income ratio too high.",
            rule=DEBT_TO_INCOME_RULE,
            debt_to_income=dti,
        )

    return QualificationVerdict(qualified=True, debt_to_income=dti)
