"""Exception hierarchy for miniloan."""


class MiniLoanError(Exception):
    """Base exception for all miniloan errors."""


class InvalidMonthError(MiniLoanError, ValueError):
    """Raised when a summary month falls outside the loan term."""

    def __init__(self, month: int, max_month: int, min_month: int = 1):
        self.month = month
        self.min_month = min_month
        self.max_month = max_month
        super().__init__(
            f"Month {month} out of range for loan term; expected [{min_month}, {max_month}]"
        )


class InvalidFrequencyError(MiniLoanError, ValueError):
    """Raised when a payment stride is not a positive number of months."""


class EntityNotFoundError(MiniLoanError, LookupError):
    """Raised when a referenced entity does not exist."""


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user id is unknown."""


class LoanNotFoundError(EntityNotFoundError):
    """Raised when a loan id is unknown."""


class StorageError(MiniLoanError):
    """Raised when the store refuses to persist an entity."""
