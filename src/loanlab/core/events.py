"""
Event classes for tracking simulation occurrences.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional


class Event(NamedTuple):
    """
    Month-stamped event record for a loan simulation.

    Events describe the notable things that happened in a month (a payment
    step-up, a prepayment, a transfer out of the offset savings, payoff) so a
    caller can build a readable ledger next to the numeric schedule.

    Attributes:
        month: 0-based month index the event belongs to
        kind: Event type identifier (see ``K.event_kinds()``)
        message: Human-readable description of the event
        meta: Optional dictionary with additional event metadata
    """

    month: int  # 0-based month index
    kind: str  # Event type identifier
    message: str  # Human-readable description
    meta: Optional[dict[str, Any]] = None  # Additional metadata
