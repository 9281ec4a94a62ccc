"""Engine outputs: per-month schedule rows and point-in-time summaries."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ScheduleRow:
    month: int
    payment: Decimal  # 0.00 outside payment months
    remaining_balance: Decimal  # includes interest accrued but not yet billed


@dataclass(frozen=True)
class PaymentEvent:
    """One simulated month, with the payment split into its components."""

    month: int
    interest: Decimal  # accrued during this month
    is_payment_month: bool
    interest_paid: Decimal
    principal_paid: Decimal
    payment: Decimal
    remaining_balance: Decimal

    def to_row(self) -> ScheduleRow:
        return ScheduleRow(
            month=self.month,
            payment=self.payment,
            remaining_balance=self.remaining_balance,
        )


@dataclass(frozen=True)
class LoanSummary:
    month: int
    current_principal_balance: Decimal
    total_principal_paid: Decimal
    total_interest_paid: Decimal
