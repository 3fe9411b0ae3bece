# This project was developed with assistance from AI tools.
"""Loan eligibility calculation logic.

Pure math, no I/O. Shared by the eligibility route and the CLI.

Two EMI modes, selected by whether a principal is supplied:

- principal given: level-payment amortization of ``loan_amount``
- principal absent: the EMI that fills a 40% FOIR ceiling

The eligible loan amount always inverts the amortization formula against a
43% FOIR ceiling. The two ceilings are separate policy constants.
"""

import math

from ..schemas.eligibility import EligibilityRequest, EligibilityResponse

EMI_FOIR_CEILING = 0.40
ELIGIBILITY_FOIR_CEILING = 0.43


class InvalidInputError(ValueError):
    """Raised when inputs fall outside the calculator's domain."""


def round_half_up(value: float, places: int = 0) -> float:
    """Round ties toward positive infinity, e.g. 2.5 -> 3 and -2.5 -> -2.

    ``x - floor(x)`` is exact for finite floats, so 0.49999999999999994
    rounds to 0 (``floor(x + 0.5)`` would give 1).
    """
    factor = 10**places
    scaled = value * factor
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return whole / factor


def _growth(monthly_rate: float, n_payments: int) -> float:
    """(1+r)^n - 1, accurate even when r is far below machine epsilon."""
    return math.expm1(n_payments * math.log1p(monthly_rate))


def amortized_emi(principal: float, monthly_rate: float, n_payments: int) -> float:
    """Level monthly payment for ``principal``: P * r(1+r)^n / ((1+r)^n - 1)."""
    growth = _growth(monthly_rate, n_payments) if monthly_rate else 0.0
    if growth == 0:
        return principal / n_payments
    return principal * monthly_rate * (growth + 1) / growth


def principal_for_emi(emi: float, monthly_rate: float, n_payments: int) -> float:
    """Principal serviceable by ``emi``: E * ((1+r)^n - 1) / (r(1+r)^n)."""
    growth = _growth(monthly_rate, n_payments) if monthly_rate else 0.0
    if growth == 0:
        return emi * n_payments
    return emi * growth / (monthly_rate * (growth + 1))


def calculate_eligibility(req: EligibilityRequest) -> EligibilityResponse:
    """Compute EMI, FOIR and the maximum eligible principal.

    Raises InvalidInputError for out-of-domain inputs and for inputs whose
    results do not fit in a float.
    """
    if req.monthly_income <= 0:
        raise InvalidInputError("monthly_income must be greater than 0")
    if req.tenure_months <= 0:
        raise InvalidInputError("tenure_months must be greater than 0")

    monthly_rate = req.roi / 100 / 12
    n_payments = req.tenure_months

    try:
        if req.loan_amount is not None:
            emi = amortized_emi(req.loan_amount, monthly_rate, n_payments)
        else:
            # Not clamped: negative means obligations already exceed the ceiling
            emi = req.monthly_income * EMI_FOIR_CEILING - req.monthly_obligations

        total_obligations = req.monthly_obligations + emi
        foir = total_obligations / req.monthly_income * 100

        max_affordable_emi = (
            req.monthly_income * ELIGIBILITY_FOIR_CEILING - req.monthly_obligations
        )
        eligible_loan_amount = principal_for_emi(max_affordable_emi, monthly_rate, n_payments)
    except OverflowError as exc:
        raise InvalidInputError("inputs produce a result out of numeric range") from exc

    if not all(math.isfinite(v) for v in (emi, foir, eligible_loan_amount)):
        raise InvalidInputError("inputs produce a result out of numeric range")

    return EligibilityResponse(
        emi=int(round_half_up(emi)),
        foir=round_half_up(foir, 1),
        eligible_loan_amount=int(round_half_up(eligible_loan_amount)),
    )
