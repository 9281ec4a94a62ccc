"""User routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from miniloan.api.deps import get_loan_service
from miniloan.api.schemas import LoanCreate, LoanResponse, UserCreate, UserResponse
from miniloan.exceptions import UserNotFoundError
from miniloan.service import LoanService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    req: UserCreate,
    response: Response,
    service: LoanService = Depends(get_loan_service),
):
    user = service.create_user(req.name)
    response.headers["Location"] = f"/api/users/{user.id}/loans"
    return UserResponse.from_user(user)


@router.get("/{user_id}/loans", response_model=list[LoanResponse])
async def get_loans_for_user(user_id: UUID, service: LoanService = Depends(get_loan_service)):
    return [LoanResponse.from_loan(loan) for loan in service.get_loans_for_user(user_id)]


@router.post("/{user_id}/loans", response_model=LoanResponse, status_code=201)
async def create_loan(
    user_id: UUID,
    req: LoanCreate,
    response: Response,
    service: LoanService = Depends(get_loan_service),
):
    """Create a loan for a user. The loan's terms are fixed from here on."""
    try:
        loan = service.create_loan(
            user_id,
            amount=req.amount,
            annual_interest_rate=req.annual_interest_rate,
            loan_term_years=req.loan_term_years,
            payment_frequency=req.payment_frequency,
        )
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")

    response.headers["Location"] = f"/api/loans/{loan.id}/schedule"
    return LoanResponse.from_loan(loan)
