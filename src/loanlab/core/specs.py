"""
Loan configuration records and the dict/JSON loader.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loanlab.policies import (
    NoOffset,
    NoStepUp,
    Offset,
    PrepaymentPlan,
    SavingsOffset,
    StepUp,
    step_up_from_mode,
)

from .errors import ConfigError, LoanLabWarning
from .kinds import K

# Global set to track warnings per scenario to avoid spam
_warned: set[tuple[str, str]] = set()


def warn_once(code: str, label: str, msg: str, *, category=LoanLabWarning):
    """Warn once per (label, code) to avoid spam."""
    key = (label, code)
    if key not in _warned:
        _warned.add(key)
        warnings.warn(msg, category, stacklevel=3)


# Original UI field names -> canonical names, per section
_TOP_ALIASES = {
    "annualRate": "annual_rate",
    "annual_rate_percent": "annual_rate",
    "monthsExtra": "months_extra",
    "tenureMonths": "tenure_months",
    "stepUp": "step_up",
    "od": "savings_offset",
    "savingsOffset": "savings_offset",
}
_PREPAY_ALIASES = {
    "oneTimeAmount": "one_time_amount",
    "oneTimeMonth": "one_time_month",
    "one_time_month_index": "one_time_month",
    "recurringAnnualAmount": "recurring_annual_amount",
}
_OFFSET_ALIASES = {
    "startSavings": "start_savings",
    "start_balance": "start_savings",
    "monthlyIncrement": "monthly_increment",
    "partFromSavingsEveryYYears": "transfer_every_years",
    "partAmountEachTime": "transfer_amount",
    "transfer_amount_each_time": "transfer_amount",
}
_TOP_KEYS = {
    "label",
    "principal",
    "years",
    "months_extra",
    "tenure_months",
    "annual_rate",
    "step_up",
    "prepay",
    "savings_offset",
}


def _apply_aliases(
    section: Mapping[str, Any], aliases: dict[str, str], label: str
) -> dict[str, Any]:
    """Return a shallow copy with alias keys folded into their canonical names."""
    spec = dict(section)
    for alias, canonical in aliases.items():
        if alias not in spec:
            continue
        value = spec.pop(alias)
        if canonical in spec and spec[canonical] != value:
            warn_once(
                "ALIAS_CLASH_" + canonical.upper(),
                label,
                f"[{label}] '{alias}' ignored because '{canonical}' is set "
                f"(precedence: {canonical}).",
            )
        else:
            spec.setdefault(canonical, value)
    return spec


def _section(data: Mapping[str, Any], key: str, label: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"[{label}] '{key}' must be a mapping, got {value!r}")
    return value


def _number(section: Mapping[str, Any], key: str, label: str) -> float:
    value = section.get(key, 0)
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ConfigError(f"[{label}] '{key}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"[{label}] '{key}' must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ConfigError(f"[{label}] '{key}' must be finite, got {value!r}")
    return number


def _amount(section: Mapping[str, Any], key: str, label: str) -> float:
    """Non-negative amount, clamped like the input editors do."""
    return max(0.0, _number(section, key, label))


def _count(section: Mapping[str, Any], key: str, label: str) -> int:
    """Non-negative whole count (months, years), floored."""
    return max(0, math.floor(_number(section, key, label)))


@dataclass(frozen=True)
class LoanConfig:
    """
    Immutable input for one simulation run.

    **Fields:**
        - principal: Amount borrowed
        - tenure_months: Repayment duration in months (years * 12 + extra months)
        - annual_rate_percent: Nominal annual rate in percent (7.5 means 7.5%)
        - step_up: ``NoStepUp`` | ``MonthlyAdd`` | ``YearlyPercent``
        - prepay: ``PrepaymentPlan`` with one-time and recurring-annual rules
        - savings_offset: ``NoOffset`` | ``SavingsOffset``

    The engine clamps every field again, so a config built by hand with
    negative numbers still simulates (as an empty or shortened schedule) rather
    than raising.

    **Example:**
        ```python
        from loanlab import LoanConfig, YearlyPercent, simulate

        config = LoanConfig(
            principal=7_500_000,
            tenure_months=25 * 12,
            annual_rate_percent=7.5,
            step_up=YearlyPercent(pct=5),
        )
        result = simulate(config)
        print(result.payoff_note)
        ```
    """

    principal: float
    tenure_months: int
    annual_rate_percent: float
    step_up: StepUp = field(default_factory=NoStepUp)
    prepay: PrepaymentPlan = field(default_factory=PrepaymentPlan)
    savings_offset: Offset = field(default_factory=NoOffset)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], label: str = "loan") -> LoanConfig:
        """
        Build a config from a plain dict (e.g. parsed JSON).

        Accepts both the snake_case keys and the camelCase names used by the
        comparator UI (``annualRate``, ``monthsExtra``, ``od`` ...). Tenure is
        ``tenure_months`` when given, otherwise ``years * 12 + months_extra``.

        Args:
            data: Loan record
            label: Name used in warnings and error messages

        Returns:
            A validated ``LoanConfig``

        Raises:
            ConfigError: If the record is structurally invalid
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"[{label}] loan configuration must be a mapping")

        spec = _apply_aliases(data, _TOP_ALIASES, label)
        for key in sorted(set(spec) - _TOP_KEYS):
            warn_once(
                "UNKNOWN_KEY_" + key.upper(),
                label,
                f"[{label}] unknown key '{key}' ignored.",
            )

        if spec.get("tenure_months") is not None:
            tenure = _count(spec, "tenure_months", label)
            if spec.get("years") or spec.get("months_extra"):
                warn_once(
                    "TENURE_OVERRIDE",
                    label,
                    f"[{label}] 'tenure_months' overrides 'years'/'months_extra'.",
                )
        else:
            tenure = _count(spec, "years", label) * 12 + _count(
                spec, "months_extra", label
            )

        return cls(
            principal=_amount(spec, "principal", label),
            tenure_months=tenure,
            annual_rate_percent=_amount(spec, "annual_rate", label),
            step_up=_step_up_from_dict(_section(spec, "step_up", label), label),
            prepay=_prepay_from_dict(_section(spec, "prepay", label), label),
            savings_offset=_offset_from_dict(
                _section(spec, "savings_offset", label), label
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back into the canonical dict form accepted by ``from_dict``."""
        step_value = getattr(self.step_up, "amount", getattr(self.step_up, "pct", 0.0))
        offset = self.savings_offset
        return {
            "principal": self.principal,
            "tenure_months": self.tenure_months,
            "annual_rate": self.annual_rate_percent,
            "step_up": {"mode": self.step_up.mode, "value": step_value},
            "prepay": {
                "one_time_amount": self.prepay.one_time_amount,
                "one_time_month": self.prepay.one_time_month,
                "recurring_annual_amount": self.prepay.recurring_annual_amount,
            },
            "savings_offset": {
                "enabled": offset.enabled,
                "start_savings": getattr(offset, "start_balance", 0.0),
                "monthly_increment": getattr(offset, "monthly_increment", 0.0),
                "transfer_every_years": getattr(offset, "transfer_every_years", 0),
                "transfer_amount": getattr(offset, "transfer_amount", 0.0),
            },
        }


def _step_up_from_dict(section: Mapping[str, Any], label: str) -> StepUp:
    mode = section.get("mode", K.STEP_UP_NONE)
    if not isinstance(mode, str):
        raise ConfigError(f"[{label}] step_up.mode must be a string, got {mode!r}")
    try:
        return step_up_from_mode(mode, _amount(section, "value", label))
    except ValueError as e:
        raise ConfigError(f"[{label}] {e}") from e


def _prepay_from_dict(section: Mapping[str, Any], label: str) -> PrepaymentPlan:
    spec = _apply_aliases(section, _PREPAY_ALIASES, label)
    return PrepaymentPlan(
        one_time_amount=_amount(spec, "one_time_amount", label),
        one_time_month=_count(spec, "one_time_month", label),
        recurring_annual_amount=_amount(spec, "recurring_annual_amount", label),
    )


def _offset_from_dict(section: Mapping[str, Any], label: str) -> Offset:
    spec = _apply_aliases(section, _OFFSET_ALIASES, label)
    if not spec.get("enabled", False):
        return NoOffset()
    return SavingsOffset(
        start_balance=_amount(spec, "start_savings", label),
        monthly_increment=_number(spec, "monthly_increment", label),
        transfer_every_years=_count(spec, "transfer_every_years", label),
        transfer_amount=_amount(spec, "transfer_amount", label),
    )
