"""Protocol definitions for the loan and user stores.

Each protocol defines the interface that concrete storage implementations must satisfy.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from miniloan.models.loan import Loan
from miniloan.models.user import User


@runtime_checkable
class UserRepository(Protocol):
    def exists(self, user_id: UUID) -> bool:
        """Whether a user with this id has been created."""
        ...

    def try_add(self, user: User) -> bool:
        """Store a new user. Returns False if the id is already taken."""
        ...


@runtime_checkable
class LoanRepository(Protocol):
    def try_add(self, loan: Loan) -> bool:
        """Store a new loan. Returns False if the id is already taken."""
        ...

    def get(self, loan_id: UUID) -> Loan | None:
        """Fetch a loan, or None if unknown."""
        ...

    def get_by_user(self, user_id: UUID) -> list[Loan]:
        """All loans belonging to a user, oldest first."""
        ...
