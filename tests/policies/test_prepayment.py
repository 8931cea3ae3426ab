"""
Tests for the prepayment plan.
"""

from loanlab.policies import PrepaymentPlan


class TestPrepaymentPlan:
    def test_empty_plan_pays_nothing(self):
        plan = PrepaymentPlan()
        assert plan.is_empty
        assert all(plan.extra_for(m) == 0.0 for m in range(60))

    def test_one_time_fires_exactly_once(self):
        plan = PrepaymentPlan(one_time_amount=50_000, one_time_month=7)
        hits = [m for m in range(120) if plan.extra_for(m) > 0]
        assert hits == [7]
        assert plan.extra_for(7) == 50_000

    def test_one_time_in_month_zero(self):
        plan = PrepaymentPlan(one_time_amount=1_000, one_time_month=0)
        assert plan.extra_for(0) == 1_000

    def test_recurring_fires_every_twelve_months_but_not_month_zero(self):
        plan = PrepaymentPlan(recurring_annual_amount=10_000)
        hits = [m for m in range(61) if plan.extra_for(m) > 0]
        assert hits == [12, 24, 36, 48, 60]

    def test_rules_are_additive(self):
        plan = PrepaymentPlan(
            one_time_amount=5_000, one_time_month=24, recurring_annual_amount=10_000
        )
        assert plan.extra_for(24) == 15_000
        assert plan.extra_for(12) == 10_000
