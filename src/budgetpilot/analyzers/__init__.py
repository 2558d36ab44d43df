"""
BudgetPilot Analyzers — pure calculation modules.

No I/O and no state between calls: every function takes fresh snapshots of
the records it needs and returns new values.
"""

from budgetpilot.analyzers.budget import (
    BudgetAggregator,
    BudgetStatus,
    CategoryTotals,
    GrandTotals,
    ItemDeletion,
    ItemSpending,
    budget_vs_spent,
    category_totals,
    current_month_period,
    deletion_action,
    grand_totals,
    item_status,
    month_period,
    spent_for_item,
)
from budgetpilot.analyzers.income import (
    IncomeCalculator,
    RecommendedBudget,
    TakeHomeSummary,
    compute_take_home,
    pay_periods_per_year,
    recommended_budget,
)
from budgetpilot.analyzers.networth import (
    MilestoneSummary,
    NetWorthAggregator,
    NetWorthPoint,
    NetWorthSummary,
    milestone_summary,
    net_worth,
    net_worth_series,
    projected_net_worth,
)
from budgetpilot.analyzers.projection import (
    AccountProjection,
    Projection,
    ProjectionEngine,
    future_value,
    milestone_months,
    project_account,
    projection_table,
)
from budgetpilot.analyzers.tax import TaxLedger, TaxLine, per_rate_amount, tax_breakdown, total_tax

__all__ = [
    # Tax
    "TaxLedger",
    "TaxLine",
    "per_rate_amount",
    "tax_breakdown",
    "total_tax",
    # Income
    "IncomeCalculator",
    "RecommendedBudget",
    "TakeHomeSummary",
    "compute_take_home",
    "pay_periods_per_year",
    "recommended_budget",
    # Budget
    "BudgetAggregator",
    "BudgetStatus",
    "CategoryTotals",
    "GrandTotals",
    "ItemDeletion",
    "ItemSpending",
    "budget_vs_spent",
    "category_totals",
    "current_month_period",
    "deletion_action",
    "grand_totals",
    "item_status",
    "month_period",
    "spent_for_item",
    # Projection
    "AccountProjection",
    "Projection",
    "ProjectionEngine",
    "future_value",
    "milestone_months",
    "project_account",
    "projection_table",
    # Net worth
    "MilestoneSummary",
    "NetWorthAggregator",
    "NetWorthPoint",
    "NetWorthSummary",
    "milestone_summary",
    "net_worth",
    "net_worth_series",
    "projected_net_worth",
]
