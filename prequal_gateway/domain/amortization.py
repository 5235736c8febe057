"""Fixed-rate amortization math for loan offers"""

PROCESSING_FEE_RATE = 0.045  # 4.5% upfront, never financed


def calculate_monthly_payment(loan_amount: float, interest_rate_apr: float, repayment_term_months: int) -> float:
    """
    Level monthly payment that retires `loan_amount` over the term.

    Uses standard amortization: PMT = P * [r(1+r)^n] / [(1+r)^n - 1]
    with r = APR / 100 / 12. A zero rate falls back to P / n.

    No rounding is applied here; callers round only for display.
    """
    if repayment_term_months <= 0:
        raise ValueError("Repayment term must be at least one month")
    if loan_amount < 0:
        raise ValueError("Loan amount cannot be negative")
    if interest_rate_apr < 0:
        raise ValueError("Interest rate cannot be negative")

    r = interest_rate_apr / 100 / 12
    n = repayment_term_months

    if r == 0:
        return loan_amount / n

    growth = (1 + r) ** n
    return loan_amount * (r * growth) / (growth - 1)


def calculate_processing_fee(loan_amount: float) -> float:
    """Flat upfront fee charged on the offered amount"""
    return loan_amount * PROCESSING_FEE_RATE


def calculate_total_repayment(monthly_payment: float, repayment_term_months: int, processing_fee: float) -> float:
    """All payments over the term plus the upfront fee"""
    return monthly_payment * repayment_term_months + processing_fee
