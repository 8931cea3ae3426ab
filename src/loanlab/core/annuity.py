"""
Closed-form annuity payment calculation.
"""

from __future__ import annotations

import math


def annuity_payment(principal: float, rate_monthly: float, n_periods: int) -> float:
    """
    Calculate the fixed periodic payment that fully amortizes a loan.

    Uses the standard annuity formula

        A = P * r * (1 + r)^N / ((1 + r)^N - 1)

    evaluated in the algebraically equal form ``P * r / (1 - (1 + r)^-N)``, with
    ``(1 + r)^-N`` computed through ``log1p``/``expm1``. That keeps full
    precision for tiny rates and cannot overflow for very long terms, where the
    payment converges to the interest-only amount ``P * r``.

    Precision is plain double-precision float. No currency rounding happens
    here; rounding is a presentation concern.

    Args:
        principal: Amount borrowed (P)
        rate_monthly: Monthly interest rate as a fraction (r), e.g. 0.01 for 1%
        n_periods: Number of monthly payments (N)

    Returns:
        The periodic payment. 0.0 for degenerate loans (``P <= 0`` or ``N <= 0``).
        For ``r == 0`` the straight-line amount ``P / N``.
    """
    if principal <= 0 or n_periods <= 0:
        return 0.0
    if rate_monthly <= 0:
        # Straight-line, no interest
        return principal / n_periods
    discount = -math.expm1(-n_periods * math.log1p(rate_monthly))
    return principal * rate_monthly / discount


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate (e.g. 7.5) into a monthly fraction."""
    return max(0.0, annual_rate_percent) / 1200.0
