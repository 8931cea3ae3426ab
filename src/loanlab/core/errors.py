"""
Error and warning classes for LoanLab.

The simulation engine itself never raises: it clamps and caps instead. Errors
only surface while turning user-supplied data (dicts, JSON files) into a
validated ``LoanConfig``.
"""


class ConfigError(Exception):
    """
    Configuration error while loading a loan scenario.

    Raised when a configuration record cannot be interpreted at all, as opposed
    to values that are merely out of range (those are clamped).

    **Common Causes:**
    - Non-numeric values for amounts, rates or month counts
    - Unknown step-up mode
    - Nested sections (``step_up``, ``prepay``, ``savings_offset``) that are not mappings

    **Example Usage:**
        ```python
        from loanlab.core.errors import ConfigError
        from loanlab.core.specs import LoanConfig

        try:
            LoanConfig.from_dict({"principal": "a lot"})
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass


class LoanLabWarning(UserWarning):
    """Warning for LoanLab configuration issues (alias clashes, unknown keys)."""
