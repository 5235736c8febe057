"""POST /v1/prequalification - loan pre-qualification and offer endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from prequal_gateway.api.v1.schemas import (
    LoanOfferSchema,
    PolicyResponse,
    PolicyRow,
    PreQualificationRequest,
    PreQualificationResponse,
)
from prequal_gateway.api.dependencies import get_request_id
from prequal_gateway.domain.amortization import PROCESSING_FEE_RATE
from prequal_gateway.domain.engine import prequalify_form
from prequal_gateway.domain.exceptions import ValidationError
from prequal_gateway.domain.models import LoanOffer, PreQualificationResult
from prequal_gateway.domain.offers import MIN_TIER_AMOUNT, describe_policy
from prequal_gateway.infrastructure.observability.metrics import record_decision, record_validation_failure
from prequal_gateway.infrastructure.observability.logging import log_prequalification
from prequal_gateway.utils.money_utils import round_currency

router = APIRouter()


def to_offer_schema(offer: LoanOffer) -> LoanOfferSchema:
    return LoanOfferSchema(
        tier=offer.tier.value,
        loan_amount=round_currency(offer.loan_amount),
        processing_fee=round_currency(offer.processing_fee),
        repayment_term_months=offer.repayment_term_months,
        interest_rate_apr=offer.interest_rate_apr,
        monthly_payment=round_currency(offer.monthly_payment),
        total_repayment=round_currency(offer.total_repayment),
        total_interest=round_currency(offer.total_interest),
    )


def to_response(result: PreQualificationResult) -> PreQualificationResponse:
    return PreQualificationResponse(
        qualified=result.qualified,
        offers=[to_offer_schema(o) for o in result.offers],
        message=result.message,
        outcome=result.outcome.value,
        eligible=result.eligible,
        declined_rule=result.declined_rule,
        debt_to_income=None if result.debt_to_income is None else round(result.debt_to_income, 2),
    )


@router.post("/prequalification", response_model=PreQualificationResponse)
def create_prequalification(request_body: PreQualificationRequest, request: Request):
    """
    Evaluate a pre-qualification form and return priced offers.

    Flow:
    1. Normalize raw form values (422 naming the field on failure)
    2. Apply eligibility rules
    3. Generate and amortize up to three offers
    4. Return the result; a decline is a normal 200 response
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = prequalify_form(request_body.model_dump())

    except ValidationError as e:
        record_validation_failure(e.field)
        logging.warning(f"Invalid pre-qualification input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail={"field": e.field, "message": e.message})

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_decision(result.outcome.value, result.offers)
    log_prequalification(
        request_id,
        result.outcome.value,
        len(result.offers),
        duration_ms,
        declined_rule=result.declined_rule,
    )

    return to_response(result)


@router.get("/prequalification/policy", response_model=PolicyResponse)
def get_offer_policy():
    """Expose the tier/rate policy table for audit and display"""
    return PolicyResponse(
        processing_fee_rate=PROCESSING_FEE_RATE,
        min_tier_amount=MIN_TIER_AMOUNT,
        rows=[PolicyRow(**row) for row in describe_policy()],
    )
