"""Month-by-month amortization simulation.

The loan is walked as a fold: an immutable AccrualState is threaded through
months 1..N and each step emits a PaymentEvent. Every call builds its own
state, so concurrent callers on the same Loan never share anything.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from miniloan.engine.money import ZERO, round2
from miniloan.engine.payment import months_per_payment, periodic_payment
from miniloan.models.loan import Loan
from miniloan.models.schedule import PaymentEvent, ScheduleRow


@dataclass(frozen=True)
class AccrualState:
    balance: Decimal  # principal still owed
    accrued: Decimal  # interest since the last payment


@dataclass(frozen=True)
class _Terms:
    monthly_rate: Decimal
    stride: int
    total_months: int
    planned_payment: Decimal


def _terms(loan: Loan) -> _Terms:
    return _Terms(
        monthly_rate=loan.monthly_rate,
        stride=months_per_payment(loan),
        total_months=loan.total_months,
        planned_payment=round2(periodic_payment(loan)),
    )


def _is_payment_month(month: int, terms: _Terms) -> bool:
    # The final month always settles, even mid-period
    return month % terms.stride == 0 or month == terms.total_months


def advance(
    state: AccrualState, month: int, terms: _Terms
) -> tuple[AccrualState, PaymentEvent]:
    """Accrue one month of interest and apply a payment if one is due."""
    interest = round2(state.balance * terms.monthly_rate)
    balance = state.balance
    accrued = state.accrued + interest

    if not _is_payment_month(month, terms):
        next_state = AccrualState(balance=balance, accrued=accrued)
        return next_state, PaymentEvent(
            month=month,
            interest=interest,
            is_payment_month=False,
            interest_paid=ZERO,
            principal_paid=ZERO,
            payment=ZERO,
            remaining_balance=round2(balance + accrued),
        )

    due = round2(accrued)
    # Payoff clamp: never collect more than is owed
    actual = min(terms.planned_payment, round2(balance + accrued))
    principal = max(ZERO, round2(actual - due))
    balance = round2(balance - principal)

    next_state = AccrualState(balance=balance, accrued=ZERO)
    return next_state, PaymentEvent(
        month=month,
        interest=interest,
        is_payment_month=True,
        interest_paid=due,
        principal_paid=principal,
        payment=round2(actual),
        remaining_balance=round2(balance),
    )


def simulate(loan: Loan, through_month: int | None = None) -> Iterator[PaymentEvent]:
    """Yield one PaymentEvent per month, from month 1 to ``through_month``.

    Args:
        loan: Loan to amortize
        through_month: Last month to simulate (defaults to the full term)
    """
    terms = _terms(loan)
    last = terms.total_months if through_month is None else through_month
    state = AccrualState(balance=round2(loan.amount), accrued=ZERO)
    for month in range(1, last + 1):
        state, event = advance(state, month, terms)
        yield event


def compute_schedule(loan: Loan) -> list[ScheduleRow]:
    """Full schedule: exactly ``loan.total_months`` rows."""
    return [event.to_row() for event in simulate(loan)]
