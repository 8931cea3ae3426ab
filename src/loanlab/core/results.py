"""
Results and output structures for LoanLab.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd

from .events import Event

# Column order of the per-month table
SCHEDULE_COLUMNS = [
    "month_index",
    "year_number",
    "opening_principal",
    "savings_balance",
    "effective_principal",
    "monthly_rate",
    "interest",
    "due_payment",
    "principal_paid",
    "prepayment_applied",
    "closing_principal",
    "closing_savings",
]


class Outcome(str, Enum):
    """How a simulated schedule ended."""

    PAID_OFF = "paid_off"  # closing principal reached 0 (or nothing was owed)
    CAPPED = "capped"  # hit the month cap with principal still outstanding


@dataclass(frozen=True)
class MonthRecord:
    """
    One simulated month of the amortization schedule.

    All currency fields are non-negative. ``closing_principal`` of one record is
    the ``opening_principal`` of the next.

    Attributes:
        month_index: 0-based month number
        year_number: ``month_index // 12 + 1``
        opening_principal: Outstanding balance at the start of the month
        savings_balance: Offset savings after the monthly increment (before any transfer)
        effective_principal: Interest-bearing principal, ``max(0, opening - savings)``
        monthly_rate: Monthly interest rate applied
        interest: Interest charged on ``effective_principal``
        due_payment: Scheduled payment actually due (capped at balance + interest)
        principal_paid: Principal part of ``due_payment``
        prepayment_applied: Extra principal paid (prepayments plus savings transfers)
        closing_principal: Outstanding balance at the end of the month
        closing_savings: Offset savings at the end of the month
    """

    month_index: int
    year_number: int
    opening_principal: float
    savings_balance: float
    effective_principal: float
    monthly_rate: float
    interest: float
    due_payment: float
    principal_paid: float
    prepayment_applied: float
    closing_principal: float
    closing_savings: float

    @property
    def total_payment(self) -> float:
        return self.due_payment + self.prepayment_applied


def payoff_note(months: int) -> str:
    """Format a month count as ``"{years}y {months}m"``."""
    years, rem = divmod(max(0, months), 12)
    return f"{years}y {rem}m"


@dataclass(frozen=True)
class SimulationResult:
    """
    Full schedule plus aggregates for one simulated loan.

    The record sequence is index-ascending and never reordered. Aggregates are
    exact engine outputs; any approximate figure (e.g. the effective-rate
    heuristic in ``loanlab.kpi``) is computed outside this class.

    Attributes:
        records: Ordered month records
        total_interest: Sum of monthly interest
        total_paid: Sum of due payments and applied prepayments
        months_to_payoff: Number of simulated months
        outcome: ``Outcome.PAID_OFF`` or ``Outcome.CAPPED``
        events: Notable occurrences, ordered by month
    """

    records: tuple[MonthRecord, ...]
    total_interest: float
    total_paid: float
    months_to_payoff: int
    outcome: Outcome
    events: tuple[Event, ...] = field(default=())

    @property
    def payoff_note(self) -> str:
        """Human-readable payoff duration, e.g. ``"23y 4m"``."""
        return payoff_note(self.months_to_payoff)

    @property
    def paid_off(self) -> bool:
        return self.outcome is Outcome.PAID_OFF

    @property
    def capped(self) -> bool:
        return self.outcome is Outcome.CAPPED

    @property
    def starting_payment(self) -> float:
        """First month's due payment (0.0 for an empty schedule)."""
        return self.records[0].due_payment if self.records else 0.0

    @property
    def final_principal(self) -> float:
        """Closing principal of the last record (0.0 for an empty schedule)."""
        return self.records[-1].closing_principal if self.records else 0.0

    def __len__(self) -> int:
        return len(self.records)

    def column(self, name: str) -> np.ndarray:
        """Return one schedule field as a numpy array."""
        if name not in SCHEDULE_COLUMNS:
            raise KeyError(f"Unknown schedule column: {name}")
        return np.array([getattr(r, name) for r in self.records], dtype=float)

    def to_frame(self) -> pd.DataFrame:
        """
        Per-month schedule as a DataFrame indexed by ``month_index``.

        Returns:
            DataFrame with one row per record and the ``SCHEDULE_COLUMNS`` columns
            (``month_index`` as index). Empty schedules give an empty frame with
            the same columns.
        """
        df = pd.DataFrame(
            [asdict(r) for r in self.records], columns=SCHEDULE_COLUMNS
        )
        return df.set_index("month_index")

    def summary(self) -> dict[str, Any]:
        """Lightweight summary for API/CLI usage."""
        return {
            "starting_payment": self.starting_payment,
            "total_interest": self.total_interest,
            "total_paid": self.total_paid,
            "months_to_payoff": self.months_to_payoff,
            "payoff_note": self.payoff_note,
            "outcome": self.outcome.value,
            "final_principal": self.final_principal,
        }
