"""Schedule and summary routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from miniloan.api.deps import get_loan_service
from miniloan.api.schemas import LoanSummaryResponse, ScheduleRowResponse
from miniloan.exceptions import InvalidMonthError, LoanNotFoundError
from miniloan.service import LoanService

router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.get("/{loan_id}/schedule", response_model=list[ScheduleRowResponse])
async def get_schedule(loan_id: UUID, service: LoanService = Depends(get_loan_service)):
    """Full month-by-month amortization schedule."""
    try:
        schedule = service.get_schedule(loan_id)
    except LoanNotFoundError:
        raise HTTPException(status_code=404, detail="Loan not found")
    return [ScheduleRowResponse.from_row(row) for row in schedule]


@router.get("/{loan_id}/summary", response_model=LoanSummaryResponse)
async def get_summary(
    loan_id: UUID,
    month: int = Query(..., description="1-based month of the loan term"),
    service: LoanService = Depends(get_loan_service),
):
    """Balance and cumulative principal/interest paid as of ``month``."""
    if month <= 0:
        raise HTTPException(status_code=400, detail="Month must be >= 1")
    try:
        summary = service.get_summary(loan_id, month)
    except LoanNotFoundError:
        raise HTTPException(status_code=404, detail="Loan not found")
    except InvalidMonthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return LoanSummaryResponse.from_summary(summary)
