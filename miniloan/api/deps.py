"""FastAPI dependency injection."""

from fastapi import Request

from miniloan.data.memory import InMemoryLoanRepository, InMemoryStore, InMemoryUserRepository
from miniloan.service import LoanService


def build_service(store: InMemoryStore) -> LoanService:
    return LoanService(InMemoryUserRepository(store), InMemoryLoanRepository(store))


def get_loan_service(request: Request) -> LoanService:
    return request.app.state.loan_service
