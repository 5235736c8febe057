"""POST /v1/offers/schedule - Repayment schedule for a selected offer"""

from fastapi import APIRouter

from prequal_gateway.api.v1.schemas import ScheduleRequest, ScheduleResponse, ScheduledPaymentSchema
from prequal_gateway.config import settings
from prequal_gateway.domain.amortization import calculate_monthly_payment
from prequal_gateway.domain.schedule import generate_repayment_schedule
from prequal_gateway.utils.money_utils import round_currency

router = APIRouter()


@router.post("/offers/schedule", response_model=ScheduleResponse)
def create_schedule(request_body: ScheduleRequest):
    """
    Build the amortization schedule for an offer's amount, rate and term.

    Returns:
        Level monthly payment, total interest and the payment rows
        (first `schedule_preview_months` rows when `preview` is set)
    """
    months = request_body.months
    if months is None and request_body.preview:
        months = settings.schedule_preview_months

    monthly_payment = calculate_monthly_payment(
        request_body.loan_amount,
        request_body.interest_rate_apr,
        request_body.repayment_term_months,
    )
    payments = generate_repayment_schedule(
        request_body.loan_amount,
        request_body.interest_rate_apr,
        request_body.repayment_term_months,
        start_date=request_body.start_date,
        months=months,
    )

    return ScheduleResponse(
        loan_amount=round_currency(request_body.loan_amount),
        interest_rate_apr=request_body.interest_rate_apr,
        repayment_term_months=request_body.repayment_term_months,
        monthly_payment=round_currency(monthly_payment),
        total_interest=round_currency(
            monthly_payment * request_body.repayment_term_months - request_body.loan_amount
        ),
        payments=[
            ScheduledPaymentSchema(
                number=p.number,
                due_date=p.due_date,
                payment=round_currency(p.payment),
                principal=round_currency(p.principal),
                interest=round_currency(p.interest),
                balance=round_currency(p.balance),
            )
            for p in payments
        ],
    )
