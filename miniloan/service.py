"""Loan service: user/loan creation and schedule queries over the stores."""

import logging
from datetime import date
from decimal import Decimal
from uuid import UUID

from miniloan.data.base import LoanRepository, UserRepository
from miniloan.engine.money import round2
from miniloan.engine.schedule import compute_schedule
from miniloan.engine.summary import compute_summary
from miniloan.exceptions import LoanNotFoundError, StorageError, UserNotFoundError
from miniloan.models.loan import Loan, PaymentFrequency
from miniloan.models.schedule import LoanSummary, ScheduleRow
from miniloan.models.user import User

logger = logging.getLogger(__name__)


class LoanService:
    def __init__(self, users: UserRepository, loans: LoanRepository):
        self.users = users
        self.loans = loans

    def create_user(self, name: str) -> User:
        user = User(name=name)
        if not self.users.try_add(user):
            raise StorageError("Failed to create user.")
        logger.info("Created user %s - %s", user.id, name)
        return user

    def create_loan(
        self,
        user_id: UUID,
        amount: Decimal,
        annual_interest_rate: Decimal,
        loan_term_years: int,
        payment_frequency: PaymentFrequency,
    ) -> Loan:
        """Create an immutable loan for an existing user."""
        if not self.users.exists(user_id):
            raise UserNotFoundError("User not found.")

        loan = Loan(
            user_id=user_id,
            amount=round2(amount),
            annual_interest_rate=Decimal(annual_interest_rate),
            loan_term_years=loan_term_years,
            payment_frequency=PaymentFrequency.parse(payment_frequency),
            start_date=date.today(),
        )
        if not self.loans.try_add(loan):
            raise StorageError("Failed to create loan.")

        logger.info("Created loan %s for user %s", loan.id, user_id)
        return loan

    def get_loans_for_user(self, user_id: UUID) -> list[Loan]:
        return self.loans.get_by_user(user_id)

    def get_loan(self, loan_id: UUID) -> Loan:
        loan = self.loans.get(loan_id)
        if loan is None:
            raise LoanNotFoundError("Loan not found.")
        return loan

    def get_schedule(self, loan_id: UUID) -> list[ScheduleRow]:
        return compute_schedule(self.get_loan(loan_id))

    def get_summary(self, loan_id: UUID, month: int) -> LoanSummary:
        loan = self.get_loan(loan_id)
        logger.debug("Summary for loan %s as of month %d", loan_id, month)
        return compute_summary(loan, month)
