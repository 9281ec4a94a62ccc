"""Shared fixtures.

Canonical loans:
  - $12,000 at 0% over 1 year, monthly (even principal payments)
  - $10,000 at 6% over 1 year, monthly
  - $10,000 at 10% over 1 year, annually (single payoff at month 12)
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from miniloan.api.app import create_app
from miniloan.data.memory import InMemoryLoanRepository, InMemoryStore, InMemoryUserRepository
from miniloan.models.loan import Loan, PaymentFrequency
from miniloan.service import LoanService


def _make_loan(
    amount: str = "10000",
    rate: str = "6",
    years: int = 1,
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
) -> Loan:
    return Loan(
        user_id=uuid4(),
        amount=Decimal(amount).quantize(Decimal("0.01")),
        annual_interest_rate=Decimal(rate),
        loan_term_years=years,
        payment_frequency=frequency,
    )


@pytest.fixture
def zero_rate_loan() -> Loan:
    return _make_loan(amount="12000", rate="0")


@pytest.fixture
def monthly_loan() -> Loan:
    return _make_loan()


@pytest.fixture
def annual_loan() -> Loan:
    return _make_loan(rate="10", frequency=PaymentFrequency.ANNUALLY)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def service(store) -> LoanService:
    return LoanService(InMemoryUserRepository(store), InMemoryLoanRepository(store))


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def make_loan():
    """Factory for loans with the given terms."""
    return _make_loan
