"""
Budget report model — everything the engine derives for one month.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from budgetpilot.analyzers.budget import BudgetStatus


class ItemLine(BaseModel):
    """Budget vs spend for one item."""

    name: str
    budgeted: float
    spent: float
    remaining: float
    status: BudgetStatus


class CategoryLine(BaseModel):
    """Budget vs spend for one category and its items."""

    name: str
    budgeted: float
    spent: float
    remaining: float
    items: list[ItemLine] = Field(default_factory=list)


class ProjectionPoint(BaseModel):
    """An account's projected balance at one milestone."""

    month: int
    future_value: float
    total_contributions: float
    total_interest: float


class AccountLine(BaseModel):
    """An account with its projected balances."""

    name: str
    account_class: str
    present_value: float
    projections: list[ProjectionPoint] = Field(default_factory=list)


class NetWorthLine(BaseModel):
    """Projected net worth at one milestone."""

    month: int
    assets: float
    liabilities: float
    net_worth: float


class BudgetReport(BaseModel):
    """Complete budget report for a month and projection horizon.

    Money values are kept unrounded; exporters round for display.
    """

    generated_at: datetime = Field(default_factory=datetime.now)
    period_start: date
    period_end: date
    horizon_months: int = 12

    # Income
    annual_take_home: float = 0.0
    monthly_take_home: float = 0.0
    period_take_home: float = 0.0
    pay_frequency: str = "monthly"
    total_annual_tax: float = 0.0
    annual_contribution_401k: float = 0.0
    annual_employer_match: float = 0.0
    recommended_split: dict[str, float] = Field(default_factory=dict)

    # Budget
    categories: list[CategoryLine] = Field(default_factory=list)
    total_budgeted: float = 0.0
    total_spent: float = 0.0
    uncategorized_spent: float = 0.0
    remaining_budget: float = 0.0
    remaining_after_spend: float = 0.0

    # Accounts
    total_assets: float = 0.0
    total_liabilities: float = 0.0
    net_worth: float = 0.0
    accounts: list[AccountLine] = Field(default_factory=list)
    net_worth_series: list[NetWorthLine] = Field(default_factory=list)

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def over_budget_items(self) -> list[ItemLine]:
        return [
            item
            for category in self.categories
            for item in category.items
            if item.status == BudgetStatus.OVER
        ]

    def to_markdown(self) -> str:
        """Export report as Markdown."""
        from budgetpilot.exporters.markdown import render_markdown

        return render_markdown(self)

    def to_json(self) -> str:
        """Export report as JSON."""
        return self.model_dump_json(indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Export report as dictionary."""
        return self.model_dump()
