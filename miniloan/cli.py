"""CLI for printing a loan's amortization schedule or summary.

Usage:
    python -m miniloan.cli 12000 --rate 0 --years 1
    python -m miniloan.cli 250000 --rate 6.5 --years 30 --frequency BiMonthly
    python -m miniloan.cli 250000 --rate 6.5 --years 30 --month 120
"""

import argparse
import logging
from decimal import Decimal, InvalidOperation
from uuid import uuid4

from miniloan.config import settings
from miniloan.engine.money import round2
from miniloan.engine.payment import periodic_payment
from miniloan.engine.schedule import compute_schedule
from miniloan.engine.summary import compute_summary
from miniloan.exceptions import MiniLoanError
from miniloan.logging import setup_logging
from miniloan.models.loan import MAX_AMOUNT, MIN_AMOUNT, Loan, PaymentFrequency

logger = logging.getLogger(__name__)


def _decimal(value: str) -> Decimal:
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not parsed.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return parsed


def _frequency(value: str) -> PaymentFrequency:
    try:
        return PaymentFrequency.parse(int(value) if value.isdigit() else value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def print_schedule(loan: Loan, rows) -> None:
    print(f"\n{'=' * 44}")
    print(f"  ${loan.amount:,.2f} at {loan.annual_interest_rate}% for {loan.loan_term_years}y")
    print(f"  {loan.payment_frequency.label} payment: ${periodic_payment(loan):,.2f}")
    print(f"{'=' * 44}")
    print(f"  {'Month':>5}  {'Payment':>14}  {'Balance':>16}")
    for row in rows:
        print(f"  {row.month:>5}  {row.payment:>14,.2f}  {row.remaining_balance:>16,.2f}")
    print()


def print_summary(summary) -> None:
    print(f"\n{'=' * 44}")
    print(f"  Summary as of month {summary.month}")
    print(f"{'=' * 44}")
    print(f"  Current balance:      ${summary.current_principal_balance:,.2f}")
    print(f"  Principal paid:       ${summary.total_principal_paid:,.2f}")
    print(f"  Interest paid:        ${summary.total_interest_paid:,.2f}")
    print()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Loan amortization schedule CLI")
    parser.add_argument("amount", type=_decimal, help="Principal amount")
    parser.add_argument("--rate", type=_decimal, required=True, help="Annual interest rate in percent")
    parser.add_argument("--years", type=int, required=True, help="Loan term in years")
    parser.add_argument(
        "--frequency",
        type=_frequency,
        default=PaymentFrequency.MONTHLY,
        help="Monthly, BiMonthly, SemiAnnually or Annually (default: Monthly)",
    )
    parser.add_argument("--month", type=int, help="Print the summary as of this month instead")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")

    args = parser.parse_args(argv)
    setup_logging(args.log_level, settings.log_format)

    if not MIN_AMOUNT <= args.amount <= MAX_AMOUNT:
        parser.error(f"amount must be between {MIN_AMOUNT} and {MAX_AMOUNT}")
    if not 0 <= args.rate <= 100:
        parser.error("rate must be between 0 and 100")
    if not 1 <= args.years <= 100:
        parser.error("years must be between 1 and 100")

    loan = Loan(
        user_id=uuid4(),
        amount=round2(args.amount),
        annual_interest_rate=args.rate,
        loan_term_years=args.years,
        payment_frequency=args.frequency,
    )
    logger.debug("Computing loan %s", loan)

    try:
        if args.month is not None:
            print_summary(compute_summary(loan, args.month))
        else:
            print_schedule(loan, compute_schedule(loan))
    except MiniLoanError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
