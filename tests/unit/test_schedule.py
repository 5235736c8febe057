"""Unit tests for repayment schedule generation"""

from datetime import date

import pytest
from prequal_gateway.domain.amortization import calculate_monthly_payment
from prequal_gateway.domain.schedule import generate_repayment_schedule
from prequal_gateway.utils.date_utils import add_months


def test_schedule_zero_rate_even_split():
    """Test $1200 at 0% over 12 months"""
    schedule = generate_repayment_schedule(1200, 0, 12, start_date=date(2025, 1, 15))

    assert len(schedule) == 12
    assert all(p.principal == pytest.approx(100) for p in schedule)
    assert all(p.interest == 0 for p in schedule)
    assert schedule[-1].balance == 0


def test_schedule_retires_balance():
    """Test principal sums to the loan amount and the last balance is zero"""
    schedule = generate_repayment_schedule(10000, 12, 24, start_date=date(2025, 1, 1))
    payment = calculate_monthly_payment(10000, 12, 24)

    assert len(schedule) == 24
    assert sum(p.principal for p in schedule) == pytest.approx(10000, abs=1e-6)
    assert schedule[-1].balance == 0
    assert schedule[-1].payment == pytest.approx(payment, abs=1e-6)

    # First month interest is 1% of the full balance
    assert schedule[0].interest == pytest.approx(100.0)
    assert schedule[0].principal == pytest.approx(payment - 100.0)


def test_schedule_interest_declines():
    schedule = generate_repayment_schedule(5000, 8, 12, start_date=date(2025, 1, 1))
    interest = [p.interest for p in schedule]
    assert interest == sorted(interest, reverse=True)


def test_schedule_preview_truncates():
    """Test preview returns the first N rows with balance still outstanding"""
    schedule = generate_repayment_schedule(10000, 12, 24, start_date=date(2025, 1, 1), months=6)

    assert [p.number for p in schedule] == [1, 2, 3, 4, 5, 6]
    assert schedule[-1].balance > 0


def test_schedule_due_dates_month_end_clamp():
    """Test due dates step by calendar month, clamped to month end"""
    schedule = generate_repayment_schedule(1000, 12, 3, start_date=date(2025, 1, 31))

    assert [p.due_date for p in schedule] == [
        date(2025, 1, 31),
        date(2025, 2, 28),
        date(2025, 3, 31),
    ]


def test_add_months_year_rollover():
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
