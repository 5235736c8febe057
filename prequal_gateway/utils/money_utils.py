"""Currency presentation helpers"""

from decimal import Decimal, ROUND_HALF_UP


def round_currency(amount: float) -> float:
    """Round to cents, half-up, for display only: 1166.505 -> 1166.51"""
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
