"""Pydantic schemas for API request/response validation"""

from pydantic import AliasChoices, BaseModel, Field
from datetime import date
from typing import Any, List, Optional

# Form values pass through untouched; the domain normalizer parses them
RawValue = Any


class PreQualificationRequest(BaseModel):
    """Request body for POST /v1/prequalification (web form field names accepted)"""

    annual_income: RawValue = Field(None, validation_alias=AliasChoices("annual_income", "annualIncome"))
    employment_status: RawValue = Field(
        None, validation_alias=AliasChoices("employment_status", "employmentStatus")
    )
    monthly_debts: RawValue = Field(None, validation_alias=AliasChoices("monthly_debts", "monthlyDebts"))
    requested_amount: RawValue = Field(
        None, validation_alias=AliasChoices("requested_amount", "requestedAmount", "loanAmount")
    )
    credit_score_band: RawValue = Field(
        None, validation_alias=AliasChoices("credit_score_band", "creditScoreBand", "creditScore")
    )


class LoanOfferSchema(BaseModel):
    """Single priced offer, monetary values rounded to cents"""

    tier: str
    loan_amount: float
    processing_fee: float
    repayment_term_months: int
    interest_rate_apr: float
    monthly_payment: float
    total_repayment: float
    total_interest: float


class PreQualificationResponse(BaseModel):
    """Response for POST /v1/prequalification"""

    qualified: bool
    offers: List[LoanOfferSchema]
    message: str
    outcome: str
    eligible: bool
    declined_rule: Optional[str] = None
    debt_to_income: Optional[float] = None


class PolicyRow(BaseModel):
    tier: str
    credit_tier: str
    amount_ratio: float
    repayment_term_months: int
    interest_rate_apr: float


class PolicyResponse(BaseModel):
    """Response for GET /v1/prequalification/policy"""

    processing_fee_rate: float
    min_tier_amount: float
    rows: List[PolicyRow]


class ScheduleRequest(BaseModel):
    """Request body for POST /v1/offers/schedule"""

    loan_amount: float = Field(..., gt=0, description="Principal being repaid")
    interest_rate_apr: float = Field(..., ge=0, le=100, description="Annual rate in percent")
    repayment_term_months: int = Field(..., gt=0, le=360)
    start_date: Optional[date] = None
    months: Optional[int] = Field(None, gt=0, description="Limit rows returned")
    preview: bool = Field(False, description="Return only the configured preview rows")


class ScheduledPaymentSchema(BaseModel):
    number: int
    due_date: date
    payment: float
    principal: float
    interest: float
    balance: float


class ScheduleResponse(BaseModel):
    """Response for POST /v1/offers/schedule"""

    loan_amount: float
    interest_rate_apr: float
    repayment_term_months: int
    monthly_payment: float
    total_interest: float
    payments: List[ScheduledPaymentSchema]
