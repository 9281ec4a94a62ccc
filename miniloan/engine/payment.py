"""Fixed payment due each payment period.

Pure functions: Loan in, Decimal out. No I/O.
"""

from decimal import Decimal

from miniloan.engine.money import round2
from miniloan.exceptions import InvalidFrequencyError
from miniloan.models.loan import Loan


def months_per_payment(loan: Loan) -> int:
    """Payment stride in months, rejecting anything below one."""
    stride = loan.months_per_payment
    if stride < 1:
        raise InvalidFrequencyError(
            f"Payment frequency must be >= 1 month, got {stride}"
        )
    return stride


def number_of_payments(loan: Loan) -> int:
    stride = months_per_payment(loan)
    # ceil without leaving integer arithmetic
    return -(-loan.total_months // stride)


def effective_period_rate(loan: Loan) -> Decimal:
    """Monthly rate compounded over one full payment period."""
    return (1 + loan.monthly_rate) ** months_per_payment(loan) - 1


def periodic_payment(loan: Loan) -> Decimal:
    """Calculate the fixed payment owed at each payment period."""
    principal = round2(loan.amount)
    n = number_of_payments(loan)
    i_eff = effective_period_rate(loan)

    if i_eff == 0:
        # Zero-interest: even principal payments
        return round2(principal / n)

    # A = P * i / (1 - (1+i)^-n)
    payment = principal * i_eff / (1 - (1 + i_eff) ** -n)
    return round2(payment)
