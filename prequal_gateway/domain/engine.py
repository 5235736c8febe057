"""Pre-qualification engine - core business logic for loan offers"""

from typing import Any, Mapping, Sequence

from prequal_gateway.domain.models import (
    ApplicantProfile,
    DecisionOutcome,
    LoanOffer,
    PreQualificationResult,
    QualificationVerdict,
)
from prequal_gateway.domain.normalizer import normalize_applicant
from prequal_gateway.domain.offers import build_offers, generate_tiers
from prequal_gateway.domain.qualification import evaluate_qualification

NO_VIABLE_OFFER_MESSAGE = "Unable to generate loan offers at this time. Please try a different amount."


def offers_message(count: int) -> str:
    return f"Great news! We have {count} personalized loan offer(s) for you!"


def assemble_result(verdict: QualificationVerdict, offers: Sequence[LoanOffer]) -> PreQualificationResult:
    """
    Package the eligibility verdict and priced offers into one result.

    A qualified applicant with no offer that cleared the amount floor is
    reported as not qualified, but keeps `eligible=True` and the
    `no_viable_offer` outcome so callers can tell the two cases apart.
    """
    if not verdict.qualified:
        return PreQualificationResult(
            qualified=False,
            offers=(),
            message=verdict.reason or "",
            outcome=DecisionOutcome.DECLINED,
            eligible=False,
            declined_rule=verdict.rule,
            debt_to_income=verdict.debt_to_income,
        )

    if not offers:
        return PreQualificationResult(
            qualified=False,
            offers=(),
            message=NO_VIABLE_OFFER_MESSAGE,
            outcome=DecisionOutcome.NO_VIABLE_OFFER,
            eligible=True,
            debt_to_income=verdict.debt_to_income,
        )

    return PreQualificationResult(
        qualified=True,
        offers=tuple(offers),
        message=offers_message(len(offers)),
        outcome=DecisionOutcome.QUALIFIED,
        eligible=True,
        debt_to_income=verdict.debt_to_income,
    )


def prequalify(profile: ApplicantProfile) -> PreQualificationResult:
    """
    Main entry point: evaluate eligibility and price offers.

    Flow:
    1. Apply eligibility rules
    2. Stop with the rejection reason if any rule fails
    3. Derive tiers from the policy table and amortize each
    4. Assemble the result
    """
    verdict = evaluate_qualification(profile)
    if not verdict.qualified:
        return assemble_result(verdict, [])

    offers = build_offers(generate_tiers(profile))
    return assemble_result(verdict, offers)


def prequalify_form(form: Mapping[str, Any]) -> PreQualificationResult:
    """
    Normalize raw form fields, then evaluate.

    Raises:
        ValidationError: when a field is missing or invalid
    """
    return prequalify(normalize_applicant(form))
