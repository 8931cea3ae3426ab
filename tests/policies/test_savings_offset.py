"""
Tests for savings-offset policies.
"""

from loanlab.policies import NoOffset, SavingsOffset


class TestNoOffset:
    def test_disabled_offset_is_inert(self):
        offset = NoOffset()
        assert offset.opening_savings() == 0.0
        assert offset.accrue(123.0) == 0.0
        assert offset.effective_principal(1000.0, 500.0) == 1000.0
        assert offset.transfer(24, 500.0) == (0.0, 500.0)


class TestSavingsOffset:
    def test_effective_principal_is_balance_minus_savings(self):
        offset = SavingsOffset(start_balance=200_000)
        assert offset.effective_principal(1_000_000, 200_000) == 800_000
        # Savings larger than the balance never make it negative
        assert offset.effective_principal(100_000, 200_000) == 0.0

    def test_negative_increment_is_floored_at_zero(self):
        offset = SavingsOffset(start_balance=5_000, monthly_increment=-2_000)

        savings = offset.opening_savings()
        trail = []
        for _ in range(4):
            savings = offset.accrue(savings)
            trail.append(savings)

        assert trail == [3_000, 1_000, 0.0, 0.0]

    def test_transfer_only_on_interval_months(self):
        offset = SavingsOffset(
            start_balance=100_000, transfer_every_years=2, transfer_amount=30_000
        )
        assert offset.transfer(0, 100_000) == (0.0, 100_000)
        assert offset.transfer(12, 100_000) == (0.0, 100_000)
        assert offset.transfer(24, 100_000) == (30_000, 70_000)
        assert offset.transfer(48, 100_000) == (30_000, 70_000)

    def test_transfer_limited_by_savings(self):
        offset = SavingsOffset(transfer_every_years=1, transfer_amount=30_000)
        assert offset.transfer(12, 10_000) == (10_000, 0.0)
        assert offset.transfer(24, 0.0) == (0.0, 0.0)

    def test_zero_interval_disables_transfers(self):
        offset = SavingsOffset(start_balance=1_000, transfer_amount=500)
        assert all(offset.transfer(m, 1_000) == (0.0, 1_000) for m in range(0, 121, 12))
