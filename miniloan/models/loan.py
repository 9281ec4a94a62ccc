"""Loan terms and the closed set of payment frequencies."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

MIN_AMOUNT = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")  # cents stay within the default 28-digit context


class PaymentFrequency(Enum):
    """Months between consecutive payments."""

    MONTHLY = 1
    BI_MONTHLY = 2
    SEMI_ANNUALLY = 6
    ANNUALLY = 12

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def parse(cls, value: "PaymentFrequency | int | str") -> "PaymentFrequency":
        """Accept a member, its stride (2) or its name (BiMonthly, bi_monthly, bi-monthly)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().replace("_", "").replace("-", "").lower()
            for member in cls:
                if member.name.replace("_", "").lower() == key:
                    return member
        raise ValueError(f"Unknown payment frequency: {value!r}")


@dataclass(frozen=True)
class Loan:
    user_id: UUID
    amount: Decimal  # 2dp currency
    annual_interest_rate: Decimal  # percent, e.g. Decimal("7.5")
    loan_term_years: int
    payment_frequency: PaymentFrequency
    id: UUID = field(default_factory=uuid4)
    start_date: date = field(default_factory=date.today)

    @property
    def total_months(self) -> int:
        return self.loan_term_years * 12

    @property
    def monthly_rate(self) -> Decimal:
        return Decimal(self.annual_interest_rate) / 100 / 12

    @property
    def months_per_payment(self) -> int:
        return int(self.payment_frequency.value)
