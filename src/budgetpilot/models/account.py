"""
Account models — balances, interest, and contributions.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from budgetpilot.models.base import Amount, RecordId


class AccountClass(str, Enum):
    """Kind of account held by the user."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"
    INVESTMENT = "investment"
    LOAN = "loan"
    OTHER = "other"


LIABILITY_CLASSES = frozenset({AccountClass.CREDIT, AccountClass.LOAN})
PROJECTABLE_CLASSES = frozenset({AccountClass.INVESTMENT, AccountClass.LOAN})


class Account(BaseModel):
    """A tracked account.

    Liabilities (credit, loan) store the amount owed as a positive
    ``present_value``. ``monthly_contribution`` is a deposit for assets and
    a payment for liabilities.
    """

    id: RecordId | None = None
    name: str = ""
    account_class: AccountClass = Field(default=AccountClass.INVESTMENT, alias="class")
    present_value: Amount = 0.0
    annual_interest_rate_pct: Amount = 0.0
    monthly_contribution: Amount = 0.0

    model_config = {"populate_by_name": True}

    @property
    def is_liability(self) -> bool:
        return self.account_class in LIABILITY_CLASSES

    @property
    def is_asset(self) -> bool:
        return not self.is_liability

    @property
    def is_projectable(self) -> bool:
        """Only investments and loans are projected forward."""
        return self.account_class in PROJECTABLE_CLASSES

    @property
    def monthly_rate(self) -> float:
        return self.annual_interest_rate_pct / 100 / 12
