"""
Core components of LoanLab: configuration, engine, results and comparison.
"""

from . import kinds
from .annuity import annuity_payment, monthly_rate
from .errors import ConfigError, LoanLabWarning
from .events import Event
from .results import MonthRecord, Outcome, SimulationResult, payoff_note
from .specs import LoanConfig
from .engine import (
    MAX_MONTHS,
    SETTLEMENT_TOLERANCE,
    LoanState,
    initial_state,
    simulate,
    step_month,
)
from .comparison import ComparisonResult, LoanComparison, LoanScenario

__all__ = [
    "kinds",
    "annuity_payment",
    "monthly_rate",
    "ConfigError",
    "LoanLabWarning",
    "Event",
    "MonthRecord",
    "Outcome",
    "SimulationResult",
    "payoff_note",
    "LoanConfig",
    "MAX_MONTHS",
    "SETTLEMENT_TOLERANCE",
    "LoanState",
    "initial_state",
    "simulate",
    "step_month",
    "ComparisonResult",
    "LoanComparison",
    "LoanScenario",
]
