"""
Tests for result structures and their tabular export.
"""

import numpy as np
import pytest
from loanlab.core.engine import simulate
from loanlab.core.results import SCHEDULE_COLUMNS, Outcome, payoff_note
from loanlab.core.specs import LoanConfig


class TestSimulationResult:
    @pytest.fixture
    def result(self):
        return simulate(
            LoanConfig(principal=240_000, tenure_months=30, annual_rate_percent=6)
        )

    def test_to_frame(self, result):
        df = result.to_frame()

        assert df.index.name == "month_index"
        assert list(df.columns) == SCHEDULE_COLUMNS[1:]
        assert len(df) == 30
        assert df["closing_principal"].iloc[-1] == 0.0
        assert (df.drop(columns=["monthly_rate"]) >= 0).all().all()

    def test_empty_frame_keeps_columns(self):
        df = simulate(LoanConfig(0, 12, 5)).to_frame()
        assert df.empty
        assert list(df.columns) == SCHEDULE_COLUMNS[1:]

    def test_column(self, result):
        interest = result.column("interest")
        assert isinstance(interest, np.ndarray)
        assert interest.sum() == pytest.approx(result.total_interest)
        with pytest.raises(KeyError):
            result.column("nope")

    def test_summary(self, result):
        summary = result.summary()
        assert summary["months_to_payoff"] == 30
        assert summary["payoff_note"] == "2y 6m"
        assert summary["outcome"] == Outcome.PAID_OFF.value
        assert summary["final_principal"] == 0.0
        assert summary["starting_payment"] == pytest.approx(result.records[0].due_payment)

    def test_record_total_payment(self, result):
        record = result.records[0]
        assert record.total_payment == record.due_payment + record.prepayment_applied


@pytest.mark.parametrize(
    "months,note", [(0, "0y 0m"), (11, "0y 11m"), (12, "1y 0m"), (1200, "100y 0m")]
)
def test_payoff_note(months, note):
    assert payoff_note(months) == note
