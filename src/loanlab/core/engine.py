"""
Month-stepping amortization engine.

The engine is a fold over months: ``step_month`` takes an immutable
``LoanState`` and returns the month's record plus the next state. ``simulate``
repeats that until the balance reaches zero or ``MAX_MONTHS`` is hit.

**Per-month order (order-sensitive):**
    1. Resolve the scheduled payment through the step-up policy
    2. Accrue offset savings, compute the effective principal and interest
    3. Collect prepayments and any periodic transfer out of savings
    4. Cap the due payment at ``balance + interest``
    5. Split the due payment into interest and principal
    6. Cap the prepayment at what is left after the scheduled principal
    7. Close the month and emit the record

The engine never raises. Inputs are clamped, degenerate loans give an empty
schedule, and non-converging loans stop at the month cap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .annuity import annuity_payment, monthly_rate
from .events import Event
from .kinds import K
from .results import MonthRecord, Outcome, SimulationResult
from .specs import LoanConfig

logger = logging.getLogger(__name__)

# Hard bound on simulated months (100 years). Loans whose payment never exceeds
# the accruing interest would otherwise never reach zero.
MAX_MONTHS = 1200

# Final-month residue below this fraction of the payment (at least 1e-6 in
# absolute terms) is settled in full instead of spilling into another month.
SETTLEMENT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class LoanState:
    """
    Transient state threaded from one month to the next.

    Attributes:
        month: Index of the month about to be simulated
        balance: Outstanding principal at the start of ``month``
        savings: Offset savings at the start of ``month`` (0 when disabled)
        scheduled_payment: Persisted scheduled payment before this month's step-up
    """

    month: int
    balance: float
    savings: float
    scheduled_payment: float


def initial_state(config: LoanConfig) -> LoanState:
    """Derive the month-0 state from a configuration."""
    principal = max(0.0, config.principal)
    tenure = max(0, int(config.tenure_months))
    return LoanState(
        month=0,
        balance=principal,
        savings=config.savings_offset.opening_savings(),
        scheduled_payment=annuity_payment(
            principal, monthly_rate(config.annual_rate_percent), tenure
        ),
    )


def step_month(
    config: LoanConfig, state: LoanState
) -> tuple[MonthRecord, LoanState, list[Event]]:
    """
    Simulate a single month.

    Args:
        config: Loan configuration
        state: State at the start of the month

    Returns:
        ``(record, next_state, events)`` for the month
    """
    m = state.month
    balance = state.balance
    rate = monthly_rate(config.annual_rate_percent)
    offset = config.savings_offset
    events: list[Event] = []

    # 1. Scheduled payment
    scheduled, persisted = config.step_up.resolve(m, state.scheduled_payment)
    if persisted != state.scheduled_payment:
        events.append(
            Event(
                m,
                K.E_STEP_UP,
                f"Scheduled payment stepped up to {persisted:,.2f}",
                {"previous": state.scheduled_payment, "current": persisted},
            )
        )

    # 2. Offset savings and interest
    savings = offset.accrue(state.savings)
    savings_for_offset = savings
    effective = offset.effective_principal(balance, savings)
    interest = effective * rate

    # 3. Prepayments, plus periodic transfer out of savings
    extra = max(0.0, config.prepay.extra_for(m))
    transferred, savings = offset.transfer(m, savings)
    extra += transferred

    # 4. Never pay beyond what is owed
    owed = balance + interest
    due = min(scheduled, owed)
    settled = owed - due < SETTLEMENT_TOLERANCE * max(1.0, due)
    if settled:
        due = owed

    # 5. Principal portion of the due payment
    principal_paid = max(0.0, due - interest)

    # 6. Prepayment limited to what is left
    applied = 0.0 if settled else min(extra, max(0.0, balance - principal_paid))

    # 7. Close the month
    closing = 0.0 if settled else max(0.0, balance - principal_paid - applied)

    if transferred > 0:
        events.append(
            Event(
                m,
                K.E_SAVINGS_TRANSFER,
                f"Moved {transferred:,.2f} from offset savings to principal",
                {"amount": transferred, "remaining_savings": savings},
            )
        )
    if applied > 0:
        events.append(
            Event(
                m,
                K.E_PREPAY,
                f"Prepayment applied: {applied:,.2f}",
                {"requested": extra, "applied": applied},
            )
        )

    record = MonthRecord(
        month_index=m,
        year_number=m // 12 + 1,
        opening_principal=balance,
        savings_balance=savings_for_offset,
        effective_principal=effective,
        monthly_rate=rate,
        interest=interest,
        due_payment=due,
        principal_paid=principal_paid,
        prepayment_applied=applied,
        closing_principal=closing,
        closing_savings=savings,
    )
    next_state = LoanState(
        month=m + 1,
        balance=closing,
        savings=savings,
        scheduled_payment=persisted,
    )
    return record, next_state, events


def simulate(config: LoanConfig) -> SimulationResult:
    """
    Simulate a loan month by month until payoff or the month cap.

    Pure: identical configurations always produce identical results, and no
    state is shared between calls, so scenarios can be simulated in any order
    or concurrently.

    Args:
        config: Loan configuration

    Returns:
        SimulationResult with the ordered schedule, aggregates and events.
        A loan with nothing owed (principal or tenure of 0) yields an empty
        schedule with zero aggregates.
    """
    state = initial_state(config)
    if config.tenure_months <= 0:
        # Zero-length payment plan
        state = LoanState(
            month=0, balance=0.0, savings=state.savings, scheduled_payment=0.0
        )

    records: list[MonthRecord] = []
    events: list[Event] = []
    total_interest = 0.0

    logger.debug(
        "Simulating principal=%.2f tenure=%d rate=%.4f%% payment=%.2f",
        state.balance,
        config.tenure_months,
        config.annual_rate_percent,
        state.scheduled_payment,
    )

    while state.balance > 0 and state.month < MAX_MONTHS:
        record, state, month_events = step_month(config, state)
        records.append(record)
        events.extend(month_events)
        total_interest += record.interest

    months = len(records)
    if records and records[-1].closing_principal > 0:
        outcome = Outcome.CAPPED
        events.append(
            Event(
                months - 1,
                K.E_CAPPED,
                f"Stopped after {MAX_MONTHS} months with "
                f"{records[-1].closing_principal:,.2f} outstanding",
                {"outstanding": records[-1].closing_principal},
            )
        )
        logger.warning(
            "Schedule did not converge within %d months (%.2f outstanding)",
            MAX_MONTHS,
            records[-1].closing_principal,
        )
    else:
        outcome = Outcome.PAID_OFF
        if records:
            events.append(
                Event(months - 1, K.E_PAYOFF, f"Loan paid off after {months} months")
            )

    total_paid = sum(r.due_payment + r.prepayment_applied for r in records)
    logger.debug(
        "Simulation finished: months=%d interest=%.2f outcome=%s",
        months,
        total_interest,
        outcome.value,
    )

    return SimulationResult(
        records=tuple(records),
        total_interest=total_interest,
        total_paid=total_paid,
        months_to_payoff=months,
        outcome=outcome,
        events=tuple(events),
    )
