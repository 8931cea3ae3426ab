"""
Savings-offset policies for overdraft-linked loans.

With an offset account, interest is charged on ``balance - savings`` instead of
on the raw outstanding balance. The savings are not a repayment: only the
periodic transfers move money into principal and permanently deplete the
savings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoOffset:
    """No linked savings; interest is charged on the full balance."""

    enabled = False

    def opening_savings(self) -> float:
        return 0.0

    def accrue(self, savings: float) -> float:
        return 0.0

    def effective_principal(self, balance: float, savings: float) -> float:
        return max(0.0, balance)

    def transfer(self, month: int, savings: float) -> tuple[float, float]:
        return 0.0, savings


@dataclass(frozen=True)
class SavingsOffset:
    """
    Linked savings balance that reduces the interest-bearing principal.

    **Monthly order of operations:**
        1. ``accrue``: add ``monthly_increment`` (any sign), floored at 0
        2. ``effective_principal``: ``max(0, balance - savings)`` bears interest
        3. ``transfer``: every ``transfer_every_years * 12`` months (never month 0)
           move ``min(transfer_amount, savings)`` from savings into principal

    Attributes:
        start_balance: Savings at the start of month 0, before the first increment
        monthly_increment: Deposit (or withdrawal, if negative) each month
        transfer_every_years: Transfer interval in years (0 disables transfers)
        transfer_amount: Amount moved to principal at each transfer
    """

    start_balance: float = 0.0
    monthly_increment: float = 0.0
    transfer_every_years: int = 0
    transfer_amount: float = 0.0
    enabled = True

    @property
    def transfer_interval_months(self) -> int:
        return max(0, self.transfer_every_years * 12)

    def opening_savings(self) -> float:
        return max(0.0, self.start_balance)

    def accrue(self, savings: float) -> float:
        """Apply the monthly increment; a withdrawal cannot push savings below zero."""
        return max(0.0, savings + self.monthly_increment)

    def effective_principal(self, balance: float, savings: float) -> float:
        return max(0.0, balance - savings)

    def transfer(self, month: int, savings: float) -> tuple[float, float]:
        """
        Periodic transfer from savings into principal.

        Returns:
            ``(transferred, remaining_savings)``
        """
        interval = self.transfer_interval_months
        if interval <= 0 or month <= 0 or month % interval != 0:
            return 0.0, savings
        transferable = min(max(0.0, self.transfer_amount), savings)
        if transferable <= 0:
            return 0.0, savings
        return transferable, savings - transferable


Offset = Union[NoOffset, SavingsOffset]
