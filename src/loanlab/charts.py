"""
Chart functions for visualizing compared loan schedules.

Every function takes the merged frame from ``ComparisonResult.tidy()`` plus the
two scenario labels, and returns ``(figure, tidy_dataframe_used)``.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go


def _long_form(tidy: pd.DataFrame, labels: list[str], suffix: str) -> pd.DataFrame:
    """Melt ``<label> <suffix>`` columns into (m, scenario, value) rows."""
    columns = [f"{label} {suffix}" for label in labels]
    missing = [c for c in columns if c not in tidy.columns]
    if missing:
        raise KeyError(f"Missing columns in tidy frame: {missing}")

    long_df = tidy.melt(
        id_vars=["m"],
        value_vars=columns,
        var_name="scenario",
        value_name=suffix.lower(),
    )
    long_df["scenario"] = long_df["scenario"].str.removesuffix(f" {suffix}")
    return long_df.dropna(subset=[suffix.lower()])


def principal_over_time(
    tidy: pd.DataFrame, labels: list[str]
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot outstanding (closing) principal per month for each scenario.

    **Args:**
        tidy: Frame from ``ComparisonResult.tidy()``
        labels: Scenario labels to plot

    **Returns:**
        Tuple of (plotly_figure, long_dataframe_used)

    **Example:**
        ```python
        from loanlab import LoanComparison
        from loanlab.charts import principal_over_time

        result = LoanComparison.from_dict(cfg).run()
        fig, data = principal_over_time(
            result.tidy(), [result.first.label, result.second.label]
        )
        fig.show()
        ```
    """
    data = _long_form(tidy, labels, "Principal")

    fig = px.line(
        data,
        x="m",
        y="principal",
        color="scenario",
        title="Outstanding Principal Over Time",
        labels={"m": "Month", "principal": "Principal", "scenario": "Scenario"},
    )
    fig.update_layout(hovermode="x unified", legend_title="Scenario")

    return fig, data


def savings_over_time(
    tidy: pd.DataFrame, labels: list[str]
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot the offset savings balance per month as overlapping areas.

    Args:
        tidy: Frame from ``ComparisonResult.tidy()``
        labels: Scenario labels to plot

    Returns:
        Tuple of (plotly_figure, long_dataframe_used)
    """
    data = _long_form(tidy, labels, "Savings")

    fig = go.Figure()
    for label in labels:
        subset = data[data["scenario"] == label]
        fig.add_trace(
            go.Scatter(
                x=subset["m"],
                y=subset["savings"],
                name=label,
                mode="lines",
                fill="tozeroy",
                opacity=0.15,
            )
        )

    fig.update_layout(
        title="Offset Savings Balance Over Time",
        xaxis_title="Month",
        yaxis_title="Savings",
        hovermode="x unified",
        legend_title="Scenario",
    )

    return fig, data


def interest_over_time(
    tidy: pd.DataFrame, labels: list[str]
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot monthly interest charged for each scenario.

    Args:
        tidy: Frame from ``ComparisonResult.tidy()``
        labels: Scenario labels to plot

    Returns:
        Tuple of (plotly_figure, long_dataframe_used)
    """
    data = _long_form(tidy, labels, "Interest")

    fig = px.line(
        data,
        x="m",
        y="interest",
        color="scenario",
        title="Monthly Interest",
        labels={"m": "Month", "interest": "Interest", "scenario": "Scenario"},
    )
    fig.update_layout(hovermode="x unified", legend_title="Scenario")

    return fig, data


def save_chart(fig: go.Figure, filename: str, format: str = "html") -> None:
    """
    Save chart to file.

    Args:
        fig: Plotly figure
        filename: Output filename
        format: Output format ('html', 'png', 'pdf', 'svg')
    """
    if format == "html":
        fig.write_html(filename)
    elif format in ("png", "pdf", "svg"):
        fig.write_image(filename, format=format)
    else:
        raise ValueError(f"Unsupported format: {format}")
