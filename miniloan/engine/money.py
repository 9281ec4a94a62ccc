"""Currency rounding shared by the amortization engine."""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def round2(value: Decimal | int) -> Decimal:
    """Round to cents, halves away from zero."""
    return Decimal(value).quantize(TWO_PLACES, ROUND_HALF_UP)
