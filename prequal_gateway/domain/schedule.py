"""Repayment schedule generation for priced loan offers"""

from datetime import date
from typing import List, Optional

from prequal_gateway.domain.amortization import calculate_monthly_payment
from prequal_gateway.domain.models import ScheduledPayment
from prequal_gateway.utils.date_utils import add_months


def generate_repayment_schedule(
    loan_amount: float,
    interest_rate_apr: float,
    repayment_term_months: int,
    start_date: Optional[date] = None,
    months: Optional[int] = None,
) -> List[ScheduledPayment]:
    """
    Build a month-by-month amortization schedule.

    Requirements:
    - Level payment from the amortization formula
    - Interest accrues on the outstanding balance at APR / 12
    - Due dates one calendar month apart, clamped to month end
    - Final payment retires the balance exactly (float drift goes to principal)

    Args:
        loan_amount: Principal being repaid (processing fee is not financed)
        interest_rate_apr: Annual rate in percent
        repayment_term_months: Number of monthly payments
        start_date: First due date (default: one month from today)
        months: Return only the first N rows, e.g. 6 for a preview

    Example:
        $1,200 at 0% over 12 months -> 12 rows of $100 principal, $0 interest
    """
    payment = calculate_monthly_payment(loan_amount, interest_rate_apr, repayment_term_months)
    monthly_rate = interest_rate_apr / 100 / 12

    if start_date is None:
        start_date = add_months(date.today(), 1)

    rows = repayment_term_months if months is None else max(0, min(months, repayment_term_months))

    schedule = []
    balance = loan_amount
    for i in range(rows):
        interest = balance * monthly_rate
        principal = payment - interest

        if i == repayment_term_months - 1:
            principal = balance

        balance = max(balance - principal, 0.0)

        schedule.append(
            ScheduledPayment(
                number=i + 1,
                due_date=add_months(start_date, i),
                payment=principal + interest,
                principal=principal,
                interest=interest,
                balance=balance,
            )
        )

    return schedule
