"""
KPI calculation utilities for loan schedules.

These helpers operate on the per-month schedule frame produced by
``SimulationResult.to_frame()`` and on aggregate figures. The effective-rate
figure here is a rough heuristic, kept apart from the exact engine outputs.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd


def approximate_effective_rate(
    total_interest: float, principal: float, months: int
) -> float:
    """
    Rough effective annual rate across the whole tenure, in percent.

    effective = total_interest / (average_outstanding * years) * 100

    with ``average_outstanding = principal / 2`` (straight-line paydown) and
    ``years = months / 12``. This is an approximation only: it ignores the
    actual shape of the balance curve and the timing of cash flows. An exact
    figure would need an IRR solve on the monthly cash flows.

    Args:
        total_interest: Total interest over the schedule
        principal: Original principal
        months: Number of months simulated

    Returns:
        Approximate rate in percent, or 0.0 when it is undefined (no months,
        no principal)
    """
    years = months / 12
    avg_outstanding = principal / 2
    denominator = avg_outstanding * years
    if denominator == 0:
        return 0.0
    eff = total_interest / denominator * 100
    return eff if math.isfinite(eff) else 0.0


def interest_paid_cum(
    df: pd.DataFrame,
    interest_col: str = "interest",
) -> pd.Series:
    """
    Calculate cumulative interest paid.

    Args:
        df: Schedule frame from ``SimulationResult.to_frame()``
        interest_col: Column name for interest

    Returns:
        Series with cumulative interest paid
    """
    if interest_col not in df.columns:
        return pd.Series(0.0, index=df.index, name="interest_paid_cum")

    return df[interest_col].cumsum().rename("interest_paid_cum")


def principal_repaid_cum(df: pd.DataFrame) -> pd.Series:
    """
    Cumulative principal retired, scheduled and prepaid together.

    Args:
        df: Schedule frame from ``SimulationResult.to_frame()``

    Returns:
        Series with cumulative principal repaid
    """
    repaid = df["principal_paid"] + df["prepayment_applied"]
    return repaid.cumsum().rename("principal_repaid_cum")


def offset_interest_saved(df: pd.DataFrame) -> float:
    """
    Interest avoided because the savings offset reduced the charged principal.

    Computed per month as ``(opening_principal - effective_principal) * monthly_rate``.
    Only the direct effect of the offset is counted; the knock-on effect of
    faster amortization is not.

    Args:
        df: Schedule frame from ``SimulationResult.to_frame()``

    Returns:
        Total interest saved (0.0 for an empty frame)
    """
    if df.empty:
        return 0.0
    shielded = np.clip(df["opening_principal"] - df["effective_principal"], 0, None)
    return float((shielded * df["monthly_rate"]).sum())
