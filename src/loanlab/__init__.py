"""
LoanLab - Month-by-Month Loan Amortization and Comparison

LoanLab simulates amortizing loans under configurable repayment policies and
compares two scenarios side by side. The engine is pure: a ``LoanConfig`` goes
in, a ``SimulationResult`` with the full monthly schedule comes out.

Key Features:
- **Step-ups**: flat monthly add-on or yearly percentage compounding
- **Prepayments**: one-time lump sum and recurring annual prepayments
- **Savings offset**: an overdraft-linked balance that reduces the
  interest-bearing principal, with optional periodic transfers into principal
- **Safety cap**: schedules that never converge stop at 1200 months and are
  reported as capped instead of looping
- **Comparison**: interest and payoff-time deltas, approximate effective rates,
  merged frames and Plotly charts

Quick Start:
    ```python
    from loanlab import LoanConfig, SavingsOffset, simulate

    config = LoanConfig(
        principal=7_500_000,
        tenure_months=300,
        annual_rate_percent=7.7,
        savings_offset=SavingsOffset(
            start_balance=500_000,
            monthly_increment=10_000,
            transfer_every_years=2,
            transfer_amount=200_000,
        ),
    )
    result = simulate(config)
    print(result.payoff_note, f"{result.total_interest:,.0f}")
    df = result.to_frame()
    ```

License:
    This is a proof-of-concept for educational and research purposes.
"""

# Version information
__version__ = "0.1.0"
__author__ = "LoanLab Team"
__description__ = "Month-by-month loan amortization and comparison"

from .core import (
    MAX_MONTHS,
    ComparisonResult,
    ConfigError,
    Event,
    LoanComparison,
    LoanConfig,
    LoanLabWarning,
    LoanScenario,
    LoanState,
    MonthRecord,
    Outcome,
    SimulationResult,
    annuity_payment,
    kinds,
    simulate,
    step_month,
)
from .kpi import (
    approximate_effective_rate,
    interest_paid_cum,
    offset_interest_saved,
    principal_repaid_cum,
)
from .policies import (
    MonthlyAdd,
    NoOffset,
    NoStepUp,
    PrepaymentPlan,
    SavingsOffset,
    YearlyPercent,
)

__all__ = [
    # Configuration
    "LoanConfig",
    "NoStepUp",
    "MonthlyAdd",
    "YearlyPercent",
    "PrepaymentPlan",
    "NoOffset",
    "SavingsOffset",
    # Engine
    "simulate",
    "step_month",
    "annuity_payment",
    "LoanState",
    "MAX_MONTHS",
    # Results
    "MonthRecord",
    "SimulationResult",
    "Outcome",
    "Event",
    # Comparison
    "LoanScenario",
    "LoanComparison",
    "ComparisonResult",
    # KPI utilities
    "approximate_effective_rate",
    "interest_paid_cum",
    "principal_repaid_cum",
    "offset_interest_saved",
    # Errors
    "ConfigError",
    "LoanLabWarning",
    # Kind constants
    "kinds",
    # Version info
    "__version__",
    "__author__",
    "__description__",
]
