"""
LoanLab kind constants for step-up modes and engine events.
"""


class K:
    # === Step-up modes (configuration discriminators) ===
    STEP_UP_NONE = "none"
    STEP_UP_MONTHLY_ADD = "monthly_add"  # flat add-on every month
    STEP_UP_YEARLY_PERCENT = "yearly_percent"  # compounding at year boundaries

    # === Engine events ===
    E_STEP_UP = "step_up"
    E_PREPAY = "prepay"
    E_SAVINGS_TRANSFER = "savings_transfer"
    E_PAYOFF = "payoff"
    E_CAPPED = "capped"

    @classmethod
    def step_up_modes(cls) -> list[str]:
        """Enumerate the accepted step-up modes (for validation and docs)."""
        return [
            cls.STEP_UP_NONE,
            cls.STEP_UP_MONTHLY_ADD,
            cls.STEP_UP_YEARLY_PERCENT,
        ]

    @classmethod
    def event_kinds(cls) -> list[str]:
        """Enumerate the event kinds the engine can emit."""
        return [
            cls.E_STEP_UP,
            cls.E_PREPAY,
            cls.E_SAVINGS_TRANSFER,
            cls.E_PAYOFF,
            cls.E_CAPPED,
        ]
