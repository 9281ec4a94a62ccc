"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from miniloan.models.loan import MAX_AMOUNT, MIN_AMOUNT, Loan, PaymentFrequency
from miniloan.models.schedule import LoanSummary, ScheduleRow
from miniloan.models.user import User


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class UserCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)


class LoanCreate(ApiModel):
    amount: Decimal = Field(..., ge=MIN_AMOUNT, le=MAX_AMOUNT)
    annual_interest_rate: Decimal = Field(..., ge=0, le=100, description="Percent, e.g. 7.5")
    loan_term_years: int = Field(..., ge=1, le=100)
    payment_frequency: PaymentFrequency

    @field_validator("payment_frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, value):
        return PaymentFrequency.parse(value)


# ---- Response schemas ----

class UserResponse(ApiModel):
    id: UUID
    name: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name)


class LoanResponse(ApiModel):
    id: UUID
    user_id: UUID
    amount: Decimal
    annual_interest_rate: Decimal
    loan_term_years: int
    payment_frequency: str
    months_per_payment: int
    start_date: date

    @classmethod
    def from_loan(cls, loan: Loan) -> "LoanResponse":
        return cls(
            id=loan.id,
            user_id=loan.user_id,
            amount=loan.amount,
            annual_interest_rate=loan.annual_interest_rate,
            loan_term_years=loan.loan_term_years,
            payment_frequency=loan.payment_frequency.label,
            months_per_payment=loan.months_per_payment,
            start_date=loan.start_date,
        )


class ScheduleRowResponse(ApiModel):
    month: int
    monthly_payment: Decimal
    remaining_balance: Decimal

    @classmethod
    def from_row(cls, row: ScheduleRow) -> "ScheduleRowResponse":
        return cls(
            month=row.month,
            monthly_payment=row.payment,
            remaining_balance=row.remaining_balance,
        )


class LoanSummaryResponse(ApiModel):
    month: int
    current_principal_balance: Decimal
    total_principal_paid: Decimal
    total_interest_paid: Decimal

    @classmethod
    def from_summary(cls, summary: LoanSummary) -> "LoanSummaryResponse":
        return cls(
            month=summary.month,
            current_principal_balance=summary.current_principal_balance,
            total_principal_paid=summary.total_principal_paid,
            total_interest_paid=summary.total_interest_paid,
        )
