"""
Side-by-side comparison of two loan scenarios.

This module provides the LoanComparison class which simulates two labelled
configurations and derives the cross-scenario figures shown next to each
other: interest difference, payoff-time difference, approximate effective
rates and a merged per-month frame for charting.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from loanlab.kpi import approximate_effective_rate

from .engine import simulate
from .errors import ConfigError
from .results import SimulationResult, payoff_note
from .specs import LoanConfig

BOTH_EQUAL = "Both equal"


@dataclass(frozen=True)
class LoanScenario:
    """
    A labelled loan configuration.

    Attributes:
        label: Display name, also used as a column prefix in merged frames
        config: The loan configuration to simulate
    """

    label: str
    config: LoanConfig

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], default_label: str = "Loan"
    ) -> LoanScenario:
        """Build a scenario from a loan record that may carry a ``label`` key."""
        if not isinstance(data, Mapping):
            raise ConfigError("loan scenario must be a mapping")
        label = str(data.get("label") or default_label)
        return cls(label=label, config=LoanConfig.from_dict(data, label=label))


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing two simulated scenarios.

    Attributes:
        first: The first scenario
        second: The second scenario
        first_result: Simulation of the first scenario
        second_result: Simulation of the second scenario
    """

    first: LoanScenario
    second: LoanScenario
    first_result: SimulationResult
    second_result: SimulationResult

    @property
    def interest_difference(self) -> float:
        """First minus second total interest; positive when the second is cheaper."""
        return self.first_result.total_interest - self.second_result.total_interest

    @property
    def cheaper_label(self) -> str:
        diff = self.interest_difference
        if diff == 0:
            return BOTH_EQUAL
        return self.second.label if diff > 0 else self.first.label

    @property
    def faster_label(self) -> str:
        a = self.first_result.months_to_payoff
        b = self.second_result.months_to_payoff
        if a < b:
            return self.first.label
        if a > b:
            return self.second.label
        return BOTH_EQUAL

    @property
    def faster_by_months(self) -> int:
        return abs(
            self.first_result.months_to_payoff - self.second_result.months_to_payoff
        )

    def effective_rate(self, which: str) -> float:
        """Approximate effective rate (percent) for ``"first"`` or ``"second"``."""
        if which not in ("first", "second"):
            raise ValueError(f"which must be 'first' or 'second', got {which!r}")
        scenario: LoanScenario = getattr(self, which)
        result: SimulationResult = getattr(self, f"{which}_result")
        return approximate_effective_rate(
            result.total_interest, scenario.config.principal, result.months_to_payoff
        )

    def summary_frame(self) -> pd.DataFrame:
        """
        One row per scenario with the headline figures.

        Returns:
            DataFrame indexed by label with starting payment, total interest,
            total paid, months, payoff note, outcome and approximate effective rate.
        """
        rows = []
        for which in ("first", "second"):
            scenario: LoanScenario = getattr(self, which)
            result: SimulationResult = getattr(self, f"{which}_result")
            row = {"label": scenario.label, **result.summary()}
            row["effective_rate_approx"] = self.effective_rate(which)
            rows.append(row)
        return pd.DataFrame(rows).set_index("label")

    def tidy(self) -> pd.DataFrame:
        """
        Merge both schedules month by month for charting.

        Month ``m`` is 1-based. Each scenario contributes ``<label> Principal``,
        ``<label> Savings`` and ``<label> Interest`` columns (closing principal,
        closing savings, interest). The shorter schedule is padded with NaN.
        """
        max_len = max(len(self.first_result), len(self.second_result))
        data: dict[str, Any] = {"m": np.arange(1, max_len + 1)}
        for scenario, result in (
            (self.first, self.first_result),
            (self.second, self.second_result),
        ):
            for suffix, field_name in (
                ("Principal", "closing_principal"),
                ("Savings", "closing_savings"),
                ("Interest", "interest"),
            ):
                values = np.full(max_len, np.nan)
                values[: len(result)] = result.column(field_name)
                data[f"{scenario.label} {suffix}"] = values
        return pd.DataFrame(data)

    def insights(self) -> list[str]:
        """Human-readable comparison bullets."""
        diff = self.interest_difference
        if diff == 0:
            interest_line = "Interest advantage: no difference"
        elif diff > 0:
            interest_line = (
                f"Interest advantage: {self.second.label} saves "
                f"{diff:,.0f} vs {self.first.label}"
            )
        else:
            interest_line = (
                f"Interest advantage: {self.first.label} saves "
                f"{-diff:,.0f} vs {self.second.label}"
            )

        lines = [
            interest_line,
            f"Faster closure: {self.faster_label} closes earlier by "
            f"{payoff_note(self.faster_by_months)}",
        ]
        for scenario, result in (
            (self.first, self.first_result),
            (self.second, self.second_result),
        ):
            if result.capped:
                lines.append(
                    f"{scenario.label} does not pay off within "
                    f"{result.months_to_payoff} months "
                    f"({result.final_principal:,.0f} still outstanding)"
                )
        return lines

    def to_dict(self) -> dict[str, Any]:
        """Serializable view for CLI/JSON export."""
        return {
            "summary": self.summary_frame().reset_index().to_dict("records"),
            "interest_difference": self.interest_difference,
            "cheaper": self.cheaper_label,
            "faster": self.faster_label,
            "faster_by": payoff_note(self.faster_by_months),
            "insights": self.insights(),
        }


@dataclass(frozen=True)
class LoanComparison:
    """
    Compare two loan scenarios.

    Each scenario is simulated independently; results do not depend on the
    order of the two simulations.

    **Example:**
        ```python
        from loanlab import LoanComparison, LoanScenario, LoanConfig

        comparison = LoanComparison(
            first=LoanScenario("Loan A", LoanConfig(7_500_000, 300, 7.7)),
            second=LoanScenario("Loan B", LoanConfig(7_500_000, 300, 7.5)),
        )
        result = comparison.run()
        print(result.insights())
        ```
    """

    first: LoanScenario
    second: LoanScenario

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoanComparison:
        """
        Build a comparison from ``{"loans": [loan_a, loan_b]}``.

        Raises:
            ConfigError: If there are not exactly two loan records
        """
        loans = data.get("loans") if isinstance(data, Mapping) else None
        if not isinstance(loans, list) or len(loans) != 2:
            raise ConfigError("comparison requires 'loans' with exactly two entries")
        return cls(
            first=LoanScenario.from_dict(loans[0], default_label="Loan A"),
            second=LoanScenario.from_dict(loans[1], default_label="Loan B"),
        )

    def run(self) -> ComparisonResult:
        if self.first.label == self.second.label:
            raise ConfigError(
                f"Scenario labels must differ, both are '{self.first.label}'"
            )
        return ComparisonResult(
            first=self.first,
            second=self.second,
            first_result=simulate(self.first.config),
            second_result=simulate(self.second.config),
        )
