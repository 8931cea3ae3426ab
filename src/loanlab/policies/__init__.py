"""
Per-month loan policies.

Policies decide, for a single month, how much is scheduled (step-up), how much
extra principal is paid (prepayment) and how a linked savings balance reduces
the interest-bearing principal (savings offset). They hold no mutable state;
the engine threads the running values through them.
"""

from .prepayment import PrepaymentPlan
from .savings_offset import NoOffset, Offset, SavingsOffset
from .step_up import MonthlyAdd, NoStepUp, StepUp, YearlyPercent, step_up_from_mode

__all__ = [
    # Step-up
    "StepUp",
    "NoStepUp",
    "MonthlyAdd",
    "YearlyPercent",
    "step_up_from_mode",
    # Prepayment
    "PrepaymentPlan",
    # Savings offset
    "Offset",
    "NoOffset",
    "SavingsOffset",
]
