"""
Tests for step-up policies.
"""

import pytest
from loanlab.core.kinds import K
from loanlab.policies import MonthlyAdd, NoStepUp, YearlyPercent, step_up_from_mode


class TestStepUpPolicies:
    """Each mode's per-month contract."""

    def test_none_keeps_payment(self):
        policy = NoStepUp()
        for month in (0, 1, 12, 240):
            assert policy.resolve(month, 1000.0) == (1000.0, 1000.0)

    def test_monthly_add_is_flat_not_compounded(self):
        """The add-on is paid every month but never persisted."""
        policy = MonthlyAdd(amount=250.0)

        current = 1000.0
        for month in range(30):
            due, current = policy.resolve(month, current)
            assert due == 1250.0
            assert current == 1000.0

    def test_yearly_percent_compounds_at_year_boundaries(self):
        policy = YearlyPercent(pct=10.0)

        current = 1000.0
        dues = []
        for month in range(37):
            due, current = policy.resolve(month, current)
            dues.append(due)

        assert dues[0] == 1000.0
        assert dues[11] == 1000.0
        assert dues[12] == pytest.approx(1100.0)
        assert dues[23] == pytest.approx(1100.0)
        assert dues[24] == pytest.approx(1210.0)
        assert dues[36] == pytest.approx(1331.0)

    def test_yearly_percent_never_fires_in_month_zero(self):
        due, persisted = YearlyPercent(pct=50.0).resolve(0, 1000.0)
        assert due == persisted == 1000.0


class TestStepUpFromMode:
    def test_modes_map_to_variants(self):
        assert step_up_from_mode(K.STEP_UP_NONE, 5) == NoStepUp()
        assert step_up_from_mode(K.STEP_UP_MONTHLY_ADD, 500) == MonthlyAdd(500)
        assert step_up_from_mode(K.STEP_UP_YEARLY_PERCENT, 5) == YearlyPercent(5)

    @pytest.mark.parametrize("mode", [K.STEP_UP_MONTHLY_ADD, K.STEP_UP_YEARLY_PERCENT])
    def test_non_positive_value_disables_step_up(self, mode):
        assert step_up_from_mode(mode, 0) == NoStepUp()
        assert step_up_from_mode(mode, -10) == NoStepUp()

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown step-up mode"):
            step_up_from_mode("weekly", 1)
