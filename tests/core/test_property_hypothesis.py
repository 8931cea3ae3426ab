"""
Property-based tests using Hypothesis for schedule invariants.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from loanlab.core.engine import MAX_MONTHS, simulate
from loanlab.core.results import Outcome
from loanlab.core.specs import LoanConfig
from loanlab.policies import (
    MonthlyAdd,
    NoOffset,
    NoStepUp,
    PrepaymentPlan,
    SavingsOffset,
    YearlyPercent,
)

amount_strategy = st.floats(
    min_value=0.0, max_value=5_000_000.0, allow_infinity=False, allow_nan=False
).map(lambda x: round(x, 2))

step_up_strategy = st.one_of(
    st.just(NoStepUp()),
    st.builds(MonthlyAdd, amount=st.floats(min_value=1.0, max_value=50_000.0)),
    st.builds(YearlyPercent, pct=st.floats(min_value=0.1, max_value=20.0)),
)

prepay_strategy = st.builds(
    PrepaymentPlan,
    one_time_amount=amount_strategy,
    one_time_month=st.integers(min_value=0, max_value=400),
    recurring_annual_amount=amount_strategy,
)

offset_strategy = st.one_of(
    st.just(NoOffset()),
    st.builds(
        SavingsOffset,
        start_balance=amount_strategy,
        monthly_increment=st.floats(min_value=-50_000.0, max_value=50_000.0),
        transfer_every_years=st.integers(min_value=0, max_value=5),
        transfer_amount=amount_strategy,
    ),
)

config_strategy = st.builds(
    LoanConfig,
    principal=amount_strategy,
    tenure_months=st.integers(min_value=0, max_value=480),
    annual_rate_percent=st.floats(min_value=0.0, max_value=30.0),
    step_up=step_up_strategy,
    prepay=prepay_strategy,
    savings_offset=offset_strategy,
)


class TestScheduleProperties:
    """Invariants that hold for any configuration."""

    @settings(max_examples=60, deadline=None)
    @given(config=config_strategy)
    def test_schedule_invariants(self, config):
        result = simulate(config)
        records = result.records

        assert len(records) <= MAX_MONTHS
        assert result.months_to_payoff == len(records)

        for i, r in enumerate(records):
            assert r.month_index == i
            for value in (
                r.opening_principal,
                r.savings_balance,
                r.effective_principal,
                r.interest,
                r.due_payment,
                r.principal_paid,
                r.prepayment_applied,
                r.closing_principal,
                r.closing_savings,
            ):
                assert value >= 0
            assert r.effective_principal <= r.opening_principal
            assert r.interest == pytest.approx(r.effective_principal * r.monthly_rate)

        for prev, nxt in zip(records, records[1:]):
            assert nxt.opening_principal == prev.closing_principal
            assert prev.closing_principal > 0

        if records:
            last = records[-1]
            if result.outcome is Outcome.CAPPED:
                assert len(records) == MAX_MONTHS
                assert last.closing_principal > 0
            else:
                assert last.closing_principal == 0.0

        assert result.total_interest == pytest.approx(sum(r.interest for r in records))
        assert result.total_paid == pytest.approx(
            sum(r.due_payment + r.prepayment_applied for r in records)
        )

    @settings(max_examples=30, deadline=None)
    @given(config=config_strategy)
    def test_simulation_is_pure(self, config):
        assert simulate(config) == simulate(config)

    @settings(max_examples=40, deadline=None)
    @given(
        principal=st.floats(min_value=1_000.0, max_value=5_000_000.0),
        tenure=st.integers(min_value=1, max_value=480),
        rate=st.floats(min_value=0.0, max_value=30.0),
    )
    def test_plain_loan_pays_off_on_schedule(self, principal, tenure, rate):
        result = simulate(
            LoanConfig(principal=principal, tenure_months=tenure, annual_rate_percent=rate)
        )

        closings = [r.closing_principal for r in result.records]
        assert all(b < a for a, b in zip(closings, closings[1:]))
        assert closings[-1] == 0.0
        assert result.months_to_payoff == tenure
