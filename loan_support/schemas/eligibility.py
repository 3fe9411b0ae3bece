# This project was developed with assistance from AI tools.
"""Loan eligibility calculator schemas."""

from pydantic import BaseModel, ConfigDict, Field


class EligibilityRequest(BaseModel):
    """Input for the eligibility calculator.

    When ``loan_amount`` is omitted the EMI is derived from a 40% income
    ceiling instead of amortizing a concrete principal.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    monthly_income: float = Field(gt=0, description="Gross monthly income.")
    monthly_obligations: float = Field(ge=0, description="Existing recurring debt payments.")
    roi: float = Field(ge=0, le=100, description="Nominal annual interest rate, percent.")
    tenure_months: int = Field(gt=0, le=1200, description="Loan term in months.")
    loan_amount: float | None = Field(default=None, gt=0, description="Desired principal.")


class EligibilityResponse(BaseModel):
    """Eligibility calculation results."""

    emi: int
    foir: float
    eligible_loan_amount: int
