"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from prequal_gateway.domain.amortization import (
    calculate_monthly_payment,
    calculate_processing_fee,
    calculate_total_repayment,
)


class EmploymentStatus(str, Enum):
    """Employment options offered on the pre-qualification form"""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    SELF_EMPLOYED = "self_employed"
    RETIRED = "retired"
    UNEMPLOYED = "unemployed"
    STUDENT = "student"


class CreditTier(str, Enum):
    """Pricing row selected from the applicant's credit score band"""

    PRIME = "prime"  # >= 700
    NEAR_PRIME = "near_prime"  # 650-699
    SUBPRIME = "subprime"  # < 650, includes "not sure"


class OfferTier(str, Enum):
    """Candidate loan sizes, largest first"""

    FULL = "full"
    MODERATE = "moderate"
    CONSERVATIVE = "conservative"


class DecisionOutcome(str, Enum):
    QUALIFIED = "qualified"
    DECLINED = "declined"
    NO_VIABLE_OFFER = "no_viable_offer"


@dataclass(frozen=True)
class ApplicantProfile:
    """Normalized applicant input"""

    annual_income: float
    employment_status: EmploymentStatus
    monthly_debts: float
    requested_amount: float
    credit_score_band: int  # 750, 680, 620, 550 or 0 for unknown


@dataclass(frozen=True)
class QualificationVerdict:
    """Outcome of the eligibility rules"""

    qualified: bool
    reason: Optional[str] = None
    rule: Optional[str] = None  # first failing rule
    debt_to_income: Optional[float] = None


@dataclass(frozen=True)
class TierCandidate:
    """Loan size and terms before amortization"""

    tier: OfferTier
    loan_amount: float
    repayment_term_months: int
    interest_rate_apr: float


@dataclass(frozen=True)
class LoanOffer:
    """
    Priced loan offer.

    Fee, payment and totals are derived from amount, rate and term when the
    offer is constructed and cannot be supplied by the caller.
    """

    tier: OfferTier
    loan_amount: float
    repayment_term_months: int
    interest_rate_apr: float
    processing_fee: float = field(init=False)
    monthly_payment: float = field(init=False)
    total_repayment: float = field(init=False)
    total_interest: float = field(init=False)

    def __post_init__(self) -> None:
        monthly = calculate_monthly_payment(
            self.loan_amount, self.interest_rate_apr, self.repayment_term_months
        )
        fee = calculate_processing_fee(self.loan_amount)

        object.__setattr__(self, "processing_fee", fee)
        object.__setattr__(self, "monthly_payment", monthly)
        object.__setattr__(
            self,
            "total_repayment",
            calculate_total_repayment(monthly, self.repayment_term_months, fee),
        )
        object.__setattr__(
            self,
            "total_interest",
            monthly * self.repayment_term_months - self.loan_amount,
        )


@dataclass(frozen=True)
class PreQualificationResult:
    """Single evaluation output handed to the presentation layer"""

    qualified: bool
    offers: Tuple[LoanOffer, ...]
    message: str
    outcome: DecisionOutcome
    eligible: bool
    declined_rule: Optional[str] = None
    debt_to_income: Optional[float] = None


@dataclass(frozen=True)
class ScheduledPayment:
    """Single row of an amortization schedule"""

    number: int
    due_date: date
    payment: float
    principal: float
    interest: float
    balance: float
