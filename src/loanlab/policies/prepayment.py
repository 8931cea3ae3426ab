"""
Prepayment policy: extra principal paid on top of the scheduled payment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PrepaymentPlan:
    """
    One-time and recurring-annual prepayment rules.

    Both rules are independent and additive:

    - the one-time amount fires exactly once, in ``one_time_month``;
    - the recurring amount fires at the end of every 12-month block
      (months 12, 24, ...), never in month 0.

    Attributes:
        one_time_amount: Lump sum paid once (0 disables the rule)
        one_time_month: 0-based month index of the lump sum
        recurring_annual_amount: Amount paid every 12 months (0 disables the rule)
    """

    one_time_amount: float = 0.0
    one_time_month: int = 0
    recurring_annual_amount: float = 0.0

    def extra_for(self, month: int) -> float:
        """Return the extra principal payment due in ``month``."""
        extra = 0.0
        if self.one_time_amount > 0 and month == self.one_time_month:
            extra += self.one_time_amount
        if self.recurring_annual_amount > 0 and month > 0 and month % 12 == 0:
            extra += self.recurring_annual_amount
        return extra

    @property
    def is_empty(self) -> bool:
        return self.one_time_amount <= 0 and self.recurring_annual_amount <= 0
