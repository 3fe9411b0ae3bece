# This project was developed with assistance from AI tools.
"""Loan eligibility route."""

from fastapi import APIRouter, HTTPException, status

from ..schemas.eligibility import EligibilityRequest, EligibilityResponse
from ..services.eligibility import InvalidInputError, calculate_eligibility
from ..services.latency import simulate_response_latency

router = APIRouter()


@router.post("/eligibility/calculate", response_model=EligibilityResponse)
async def calculate(req: EligibilityRequest) -> EligibilityResponse:
    """Calculate EMI, FOIR and eligible loan amount.

    With ``loan_amount``: EMI = L * r(1+r)^n / ((1+r)^n - 1), r = roi / 1200.
    Without it: EMI = monthly_income * 0.40 - monthly_obligations.
    Eligible amount inverts the amortization formula against
    monthly_income * 0.43 - monthly_obligations.
    """
    try:
        result = calculate_eligibility(req)
    except InvalidInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    await simulate_response_latency()
    return result
