"""
Step-up policies: how the scheduled payment escalates over time.

Each mode is its own frozen dataclass so that a flat monthly add-on can never be
confused with percentage compounding. Policies are pure: they receive the
persisted scheduled payment and return both the amount due this month and the
value to carry into the next month.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loanlab.core.kinds import K


@dataclass(frozen=True)
class NoStepUp:
    """Payment stays at its current scheduled value."""

    mode = K.STEP_UP_NONE

    def resolve(self, month: int, current: float) -> tuple[float, float]:
        return current, current


@dataclass(frozen=True)
class MonthlyAdd:
    """
    Flat add-on paid on top of the scheduled payment every month.

    The add-on is re-applied each month and never folded into the persisted
    payment, so month 0 and month 100 both pay ``current + amount``.
    """

    amount: float
    mode = K.STEP_UP_MONTHLY_ADD

    def resolve(self, month: int, current: float) -> tuple[float, float]:
        if self.amount <= 0:
            return current, current
        return current + self.amount, current


@dataclass(frozen=True)
class YearlyPercent:
    """
    Percentage escalation at every 12-month boundary (compounding).

    At months 12, 24, 36, ... the persisted payment grows by ``pct`` percent and
    stays there; all other months pay the persisted value unchanged.
    """

    pct: float
    mode = K.STEP_UP_YEARLY_PERCENT

    def resolve(self, month: int, current: float) -> tuple[float, float]:
        if self.pct > 0 and month > 0 and month % 12 == 0:
            current = current * (1 + self.pct / 100)
        return current, current


StepUp = Union[NoStepUp, MonthlyAdd, YearlyPercent]


def step_up_from_mode(mode: str, value: float) -> StepUp:
    """
    Build a step-up variant from a mode string and its numeric value.

    Non-positive values collapse to ``NoStepUp``.

    Raises:
        ValueError: If the mode is unknown
    """
    if mode not in K.step_up_modes():
        raise ValueError(
            f"Unknown step-up mode {mode!r}; expected one of {K.step_up_modes()}"
        )
    if mode == K.STEP_UP_NONE or value <= 0:
        return NoStepUp()
    if mode == K.STEP_UP_MONTHLY_ADD:
        return MonthlyAdd(amount=value)
    return YearlyPercent(pct=value)
