"""Offer tier generation driven by a declarative pricing policy"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Tuple

from prequal_gateway.domain.models import (
    ApplicantProfile,
    CreditTier,
    LoanOffer,
    OfferTier,
    TierCandidate,
)

MIN_TIER_AMOUNT = 1000  # floor for reduced tiers only
MAX_FULL_AMOUNT_INCOME_RATIO = 0.5


@dataclass(frozen=True)
class TierTerms:
    repayment_term_months: int
    interest_rate_apr: float


@dataclass(frozen=True)
class TierRule:
    """How a tier's amount is derived from the request and when it is offered"""

    tier: OfferTier
    amount_ratio: float
    is_eligible: Callable[[ApplicantProfile, float], bool]


def _within_income_cap(profile: ApplicantProfile, amount: float) -> bool:
    return profile.requested_amount <= profile.annual_income * MAX_FULL_AMOUNT_INCOME_RATIO


def _above_floor(profile: ApplicantProfile, amount: float) -> bool:
    return amount >= MIN_TIER_AMOUNT


# Emission order is the order of this tuple, which keeps amounts descending.
# The full tier has no amount floor; only the income cap applies to it.
TIER_RULES: Tuple[TierRule, ...] = (
    TierRule(OfferTier.FULL, 1.0, _within_income_cap),
    TierRule(OfferTier.MODERATE, 0.75, _above_floor),
    TierRule(OfferTier.CONSERVATIVE, 0.5, _above_floor),
)

OFFER_POLICY: Mapping[OfferTier, Mapping[CreditTier, TierTerms]] = MappingProxyType({
    OfferTier.FULL: MappingProxyType({
        CreditTier.PRIME: TierTerms(24, 12.0),
        CreditTier.NEAR_PRIME: TierTerms(18, 18.0),
        CreditTier.SUBPRIME: TierTerms(12, 24.0),
    }),
    OfferTier.MODERATE: MappingProxyType({
        CreditTier.PRIME: TierTerms(18, 10.0),
        CreditTier.NEAR_PRIME: TierTerms(15, 15.0),
        CreditTier.SUBPRIME: TierTerms(12, 20.0),
    }),
    OfferTier.CONSERVATIVE: MappingProxyType({
        CreditTier.PRIME: TierTerms(12, 8.0),
        CreditTier.NEAR_PRIME: TierTerms(12, 12.0),
        CreditTier.SUBPRIME: TierTerms(9, 16.0),
    }),
})


def resolve_credit_tier(credit_score_band: int) -> CreditTier:
    """
    Map a representative credit score to a pricing row.

    Score bands:
    - 700+:    prime
    - 650-699: near_prime
    - <650:    subprime (0 / "not sure" lands here)
    """
    if credit_score_band >= 700:
        return CreditTier.PRIME
    elif credit_score_band >= 650:
        return CreditTier.NEAR_PRIME
    else:
        return CreditTier.SUBPRIME


def lookup_terms(tier: OfferTier, credit_tier: CreditTier) -> TierTerms:
    return OFFER_POLICY[tier][credit_tier]


def generate_tiers(profile: ApplicantProfile) -> List[TierCandidate]:
    """
    Derive up to three candidate loan sizes for a qualified applicant.

    Tiers that fail their inclusion rule are dropped; the rest keep their
    relative order, so the list is descending by amount.
    """
    credit_tier = resolve_credit_tier(profile.credit_score_band)
    candidates = []

    for rule in TIER_RULES:
        amount = profile.requested_amount * rule.amount_ratio
        if not rule.is_eligible(profile, amount):
            continue

        terms = lookup_terms(rule.tier, credit_tier)
        candidates.append(
            TierCandidate(
                tier=rule.tier,
                loan_amount=amount,
                repayment_term_months=terms.repayment_term_months,
                interest_rate_apr=terms.interest_rate_apr,
            )
        )

    return candidates


def price_offer(candidate: TierCandidate) -> LoanOffer:
    """Attach amortized payment, fee and totals to a tier candidate"""
    return LoanOffer(
        tier=candidate.tier,
        loan_amount=candidate.loan_amount,
        repayment_term_months=candidate.repayment_term_months,
        interest_rate_apr=candidate.interest_rate_apr,
    )


def build_offers(candidates: List[TierCandidate]) -> List[LoanOffer]:
    return [price_offer(c) for c in candidates]


def describe_policy() -> List[dict]:
    """Flatten the policy table into rows for display and audit"""
    rows = []
    for rule in TIER_RULES:
        for credit_tier, terms in OFFER_POLICY[rule.tier].items():
            rows.append(
                {
                    "tier": rule.tier.value,
                    "credit_tier": credit_tier.value,
                    "amount_ratio": rule.amount_ratio,
                    "repayment_term_months": terms.repayment_term_months,
                    "interest_rate_apr": terms.interest_rate_apr,
                }
            )
    return rows
