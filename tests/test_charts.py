"""
Tests for chart functions.
"""

import plotly.graph_objects as go
import pytest
from loanlab import LoanComparison
from loanlab.charts import (
    interest_over_time,
    principal_over_time,
    save_chart,
    savings_over_time,
)
from loanlab.cli import EXAMPLE_COMPARISON


@pytest.fixture(scope="module")
def compared():
    result = LoanComparison.from_dict(EXAMPLE_COMPARISON).run()
    return result, [result.first.label, result.second.label]


class TestComparisonCharts:
    @pytest.mark.parametrize(
        "chart_fn,value_col",
        [
            (principal_over_time, "principal"),
            (savings_over_time, "savings"),
            (interest_over_time, "interest"),
        ],
    )
    def test_chart_returns_figure_and_data(self, compared, chart_fn, value_col):
        result, labels = compared
        fig, data = chart_fn(result.tidy(), labels)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
        assert set(data["scenario"]) == set(labels)
        assert len(data) == len(result.first_result) + len(result.second_result)
        assert not data[value_col].isna().any()

    def test_unknown_label_raises(self, compared):
        result, _ = compared
        with pytest.raises(KeyError, match="Missing columns"):
            principal_over_time(result.tidy(), ["Loan A", "Loan Z"])

    def test_save_chart_html(self, compared, tmp_path):
        result, labels = compared
        fig, _ = principal_over_time(result.tidy(), labels)
        out = tmp_path / "principal.html"

        save_chart(fig, str(out))

        assert out.exists()
        assert out.stat().st_size > 0

    def test_save_chart_unsupported_format(self, compared, tmp_path):
        result, labels = compared
        fig, _ = principal_over_time(result.tidy(), labels)
        with pytest.raises(ValueError, match="Unsupported format"):
            save_chart(fig, str(tmp_path / "x.gif"), format="gif")
