"""
BudgetPilot — Main orchestrator.

The BudgetPilot class ties the analyzers together: it takes a snapshot of a
user's data and builds a single BudgetReport for a month and a projection
horizon.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from budgetpilot.analyzers.budget import BudgetAggregator
from budgetpilot.analyzers.income import compute_take_home, recommended_budget
from budgetpilot.analyzers.networth import NetWorthAggregator
from budgetpilot.analyzers.projection import projection_table
from budgetpilot.config import BudgetPilotConfig
from budgetpilot.models.report import (
    AccountLine,
    BudgetReport,
    CategoryLine,
    ItemLine,
    NetWorthLine,
    ProjectionPoint,
)
from budgetpilot.models.snapshot import BudgetSnapshot

logger = logging.getLogger("budgetpilot")


@dataclass
class BudgetPilot:
    """Top-level entry point for BudgetPilot.

    Usage::

        from budgetpilot import BudgetPilot

        pilot = BudgetPilot.from_config("budgetpilot.yaml")
        report = pilot.report(BudgetSnapshot.load("snapshot.yaml"), year=2025, month=1)
        print(report.to_markdown())

    Each call works on the snapshot it is given. Nothing is cached between
    calls, so callers re-run a report whenever their data changes.
    """

    config: BudgetPilotConfig = field(default_factory=BudgetPilotConfig)

    @classmethod
    def from_config(cls, config_path: str | None = None, **overrides: Any) -> BudgetPilot:
        """Create a BudgetPilot instance from a config file or keyword arguments."""
        return cls(config=BudgetPilotConfig.load(config_path, **overrides))

    def report(
        self,
        snapshot: BudgetSnapshot,
        year: int | None = None,
        month: int | None = None,
        horizon: int | None = None,
    ) -> BudgetReport:
        """Build a report for a calendar month and projection horizon.

        Args:
            snapshot: The user's income, taxes, budgets, purchases, and accounts.
            year: Year of the budget month (defaults to today).
            month: Month of the budget month (defaults to today).
            horizon: Months to project accounts forward (defaults to config).

        Returns:
            BudgetReport with unrounded figures.
        """
        today = date.today()
        year = year or today.year
        month = month or today.month
        horizon = self.config.projection.horizon_months if horizon is None else horizon

        logger.info("Building report for %04d-%02d, %d month horizon", year, month, horizon)

        take_home = compute_take_home(snapshot.income, snapshot.taxes)
        monthly_income = take_home.persisted_monthly_take_home
        split = self.config.recommended_split
        recommended = recommended_budget(monthly_income, split.needs, split.wants, split.savings)

        budget = BudgetAggregator.for_month(snapshot.categories, snapshot.purchases, year, month)
        totals = budget.grand_totals(monthly_income)
        categories = []
        for category in snapshot.categories:
            cat_totals = budget.category_totals(category)
            categories.append(CategoryLine(
                name=category.name,
                budgeted=cat_totals.budgeted,
                spent=cat_totals.spent,
                remaining=cat_totals.remaining,
                items=[
                    ItemLine(
                        name=row.name,
                        budgeted=row.budgeted,
                        spent=row.spent,
                        remaining=row.remaining,
                        status=row.status,
                    )
                    for row in budget.item_spending(category)
                ],
            ))

        net_worth = NetWorthAggregator(snapshot.accounts)
        summary = net_worth.summary()
        accounts = [
            AccountLine(
                name=row.account.name,
                account_class=row.account.account_class.value,
                present_value=row.account.present_value,
                projections=[
                    ProjectionPoint(
                        month=p.months,
                        future_value=p.future_value,
                        total_contributions=p.total_contributions,
                        total_interest=p.total_interest,
                    )
                    for p in row.projections
                ],
            )
            for row in projection_table(snapshot.accounts, horizon)
        ]

        report = BudgetReport(
            period_start=budget.period[0],
            period_end=budget.period[1],
            horizon_months=horizon,
            annual_take_home=take_home.annual_take_home,
            monthly_take_home=monthly_income,
            period_take_home=take_home.period_take_home,
            pay_frequency=take_home.pay_frequency.value,
            total_annual_tax=take_home.total_annual_tax,
            annual_contribution_401k=take_home.annual_contribution_401k,
            annual_employer_match=take_home.annual_employer_match,
            recommended_split={
                "needs": recommended.needs,
                "wants": recommended.wants,
                "savings": recommended.savings,
            },
            categories=categories,
            total_budgeted=totals.total_budgeted,
            total_spent=totals.total_spent,
            uncategorized_spent=budget.uncategorized_spent(),
            remaining_budget=totals.remaining_budget,
            remaining_after_spend=totals.remaining_after_spend,
            total_assets=summary.total_assets,
            total_liabilities=summary.total_liabilities,
            net_worth=summary.net_worth,
            accounts=accounts,
            net_worth_series=[
                NetWorthLine(month=p.month, assets=p.assets, liabilities=p.liabilities, net_worth=p.net_worth)
                for p in net_worth.series(horizon)
            ],
            metadata={"currency": self.config.display.currency},
        )
        logger.info(
            "Report complete: %d categories, %d over budget, net worth $%.2f",
            len(report.categories),
            len(report.over_budget_items),
            report.net_worth,
        )
        return report
