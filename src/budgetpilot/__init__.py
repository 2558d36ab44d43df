"""
BudgetPilot — personal budgeting engine.

Take-home pay. Budgets vs spending. Account projections. Net worth.
"""

__version__ = "0.1.0"
__all__ = ["BudgetPilot"]

from budgetpilot.pilot import BudgetPilot  # noqa: E402
