"""Cumulative principal/interest and balance as of a given month."""

from miniloan.engine.money import ZERO, round2
from miniloan.engine.schedule import simulate
from miniloan.exceptions import InvalidMonthError
from miniloan.models.loan import Loan
from miniloan.models.schedule import LoanSummary


def compute_summary(loan: Loan, month: int) -> LoanSummary:
    """Replay the schedule through ``month`` and total what has been paid.

    Raises:
        InvalidMonthError: month is outside [1, loan.total_months]
    """
    if month < 1 or month > loan.total_months:
        raise InvalidMonthError(month, max_month=loan.total_months)

    total_interest = ZERO
    total_principal = ZERO
    balance = round2(loan.amount)

    for event in simulate(loan, through_month=month):
        if event.is_payment_month:
            total_interest = round2(total_interest + event.interest_paid)
            total_principal = round2(total_principal + event.principal_paid)
        balance = event.remaining_balance

    return LoanSummary(
        month=month,
        current_principal_balance=balance,
        total_principal_paid=total_principal,
        total_interest_paid=total_interest,
    )
