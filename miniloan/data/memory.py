"""In-process storage for users and loans.

Entries are write-once: once a Loan is readable it never changes.
"""

import logging
import threading
from uuid import UUID

from miniloan.models.loan import Loan
from miniloan.models.user import User

logger = logging.getLogger(__name__)


class InMemoryStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.users: dict[UUID, User] = {}
        self.loans: dict[UUID, Loan] = {}

    def add_user(self, user: User) -> bool:
        with self._lock:
            if user.id in self.users:
                return False
            self.users[user.id] = user
        return True

    def add_loan(self, loan: Loan) -> bool:
        with self._lock:
            if loan.id in self.loans:
                return False
            self.loans[loan.id] = loan
        return True

    def loans_by_user(self, user_id: UUID) -> list[Loan]:
        with self._lock:
            return [loan for loan in self.loans.values() if loan.user_id == user_id]


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def exists(self, user_id: UUID) -> bool:
        return user_id in self.store.users

    def try_add(self, user: User) -> bool:
        added = self.store.add_user(user)
        if not added:
            logger.warning("User id collision: %s", user.id)
        return added


class InMemoryLoanRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def try_add(self, loan: Loan) -> bool:
        added = self.store.add_loan(loan)
        if not added:
            logger.warning("Loan id collision: %s", loan.id)
        return added

    def get(self, loan_id: UUID) -> Loan | None:
        return self.store.loans.get(loan_id)

    def get_by_user(self, user_id: UUID) -> list[Loan]:
        return self.store.loans_by_user(user_id)
