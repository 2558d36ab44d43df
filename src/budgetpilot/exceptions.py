"""
BudgetPilot exceptions.
"""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside the engine's contract."""
