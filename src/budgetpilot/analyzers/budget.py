"""
Budget Aggregator — spending against budget items for a calendar month.

Purchases are matched to items by ``budget_item_id`` and to a period by
their date, with the period half-open: ``start <= date < end``. Deleted
purchases never count. Uncategorized purchases count toward the grand total
but not toward any category.

Item status is three-way:
- OVER:  spent > budget
- AT:    spent == budget and budget > 0
- UNDER: everything else
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from budgetpilot.analyzers.income import round_half_up
from budgetpilot.exceptions import InvalidArgumentError
from budgetpilot.models.base import coerce_amount
from budgetpilot.models.budget import BudgetCategory, BudgetItem, Purchase

logger = logging.getLogger("budgetpilot.analyzers.budget")


class BudgetStatus(str, Enum):
    """How an item's spending compares to its budget."""

    UNDER = "under"
    AT = "at"
    OVER = "over"


class ItemDeletion(str, Enum):
    """How a budget item may be removed."""

    SOFT = "soft"  # mark inactive, keep for purchase history
    HARD = "hard"  # no purchases reference it


@dataclass(frozen=True)
class CategoryTotals:
    budgeted: float = 0.0
    spent: float = 0.0

    @property
    def remaining(self) -> float:
        return self.budgeted - self.spent


@dataclass(frozen=True)
class GrandTotals:
    """Month-level totals against monthly income."""

    total_budgeted: float
    total_spent: float
    remaining_budget: float       # income - total budgeted
    remaining_after_spend: float  # income - total spent


@dataclass(frozen=True)
class ItemSpending:
    """One bar pair in a budget-vs-spent chart."""

    item_id: str
    name: str
    budgeted: float
    spent: float
    status: BudgetStatus

    @property
    def remaining(self) -> float:
        return self.budgeted - self.spent


def month_period(year: int, month: int) -> tuple[date, date]:
    """First day of the month and first day of the next month."""
    start = date(year, month, 1)
    if month == 12:
        end = date(year + 1, 1, 1)
    else:
        end = date(year, month + 1, 1)
    return start, end


def current_month_period(today: date | None = None) -> tuple[date, date]:
    ref = today or date.today()
    return month_period(ref.year, ref.month)


def in_period(purchase: Purchase, start: date, end: date) -> bool:
    """Whether a purchase is active and dated inside ``[start, end)``."""
    return not purchase.deleted and start <= purchase.timestamp < end


def spent_for_item(item_id: str, purchases: Iterable[Purchase], start: date, end: date) -> float:
    """Total cost of active purchases for one item in the period."""
    return sum(
        p.cost for p in purchases
        if p.budget_item_id == item_id and in_period(p, start, end)
    )


def total_spent(purchases: Iterable[Purchase], start: date, end: date) -> float:
    """Total cost of every active purchase in the period, categorized or not."""
    return sum(p.cost for p in purchases if in_period(p, start, end))


def uncategorized_spent(purchases: Iterable[Purchase], start: date, end: date) -> float:
    return sum(
        p.cost for p in purchases
        if not p.is_categorized and in_period(p, start, end)
    )


def item_status(spent: float, budget_amount: float) -> BudgetStatus:
    """Classify spend against budget, compared in whole cents."""
    spent = round_half_up(spent)
    budget_amount = round_half_up(budget_amount)
    if spent > budget_amount:
        return BudgetStatus.OVER
    if spent == budget_amount and budget_amount > 0:
        return BudgetStatus.AT
    return BudgetStatus.UNDER


def category_totals(
    category: BudgetCategory,
    purchases: Iterable[Purchase],
    start: date,
    end: date,
) -> CategoryTotals:
    """Budgeted and spent across a category's active items."""
    purchases = list(purchases)
    items = category.active_items
    return CategoryTotals(
        budgeted=sum(item.budget_amount for item in items),
        spent=sum(spent_for_item(item.id, purchases, start, end) for item in items),
    )


def grand_totals(
    categories: Iterable[BudgetCategory],
    purchases: Iterable[Purchase],
    income: float | None,
    start: date,
    end: date,
) -> GrandTotals:
    """Budget and spend totals for the month against monthly income."""
    income = coerce_amount(income)
    budgeted = sum(item.budget_amount for category in categories for item in category.active_items)
    spent = total_spent(purchases, start, end)
    logger.debug(
        "Totals %s..%s: budgeted %.2f, spent %.2f, income %.2f",
        start, end, budgeted, spent, income,
    )
    return GrandTotals(
        total_budgeted=budgeted,
        total_spent=spent,
        remaining_budget=income - budgeted,
        remaining_after_spend=income - spent,
    )


def item_spending(
    category: BudgetCategory,
    purchases: Iterable[Purchase],
    start: date,
    end: date,
) -> list[ItemSpending]:
    purchases = list(purchases)
    rows = []
    for item in category.active_items:
        spent = spent_for_item(item.id, purchases, start, end)
        rows.append(ItemSpending(
            item_id=item.id,
            name=item.name,
            budgeted=item.budget_amount,
            spent=spent,
            status=item_status(spent, item.budget_amount),
        ))
    return rows


def budget_vs_spent(
    categories: Iterable[BudgetCategory],
    purchases: Iterable[Purchase],
    start: date,
    end: date,
    include_hidden: bool = False,
) -> list[ItemSpending]:
    """Chart series of budgeted vs spent per item, hidden items left out."""
    purchases = list(purchases)
    rows = []
    for category in categories:
        hidden = {item.id for item in category.items if item.hidden}
        rows.extend(
            row for row in item_spending(category, purchases, start, end)
            if include_hidden or row.item_id not in hidden
        )
    return rows


def deletion_action(item: BudgetItem, purchases: Iterable[Purchase]) -> ItemDeletion:
    """Soft-delete an item that any purchase points at, deleted purchases included."""
    if any(p.budget_item_id == item.id for p in purchases):
        return ItemDeletion.SOFT
    return ItemDeletion.HARD


@dataclass
class BudgetAggregator:
    """Budget vs spend for one month.

    Example usage:
        agg = BudgetAggregator.for_month(categories, purchases, 2025, 1)
        agg.grand_totals(income=3767.5).remaining_after_spend
    """

    categories: list[BudgetCategory] = field(default_factory=list)
    purchases: list[Purchase] = field(default_factory=list)
    period_start: date | None = None
    period_end: date | None = None

    def __post_init__(self) -> None:
        if self.period_start is None and self.period_end is None:
            self.period_start, self.period_end = current_month_period()
        elif self.period_start is None or self.period_end is None:
            raise InvalidArgumentError("period_start and period_end must be given together")

    @classmethod
    def for_month(
        cls,
        categories: Iterable[BudgetCategory],
        purchases: Iterable[Purchase],
        year: int,
        month: int,
    ) -> BudgetAggregator:
        start, end = month_period(year, month)
        return cls(list(categories), list(purchases), start, end)

    @property
    def period(self) -> tuple[date, date]:
        return self.period_start, self.period_end  # type: ignore[return-value]

    def spent_for_item(self, item_id: str) -> float:
        return spent_for_item(item_id, self.purchases, *self.period)

    def category_totals(self, category: BudgetCategory) -> CategoryTotals:
        return category_totals(category, self.purchases, *self.period)

    def grand_totals(self, income: float | None) -> GrandTotals:
        return grand_totals(self.categories, self.purchases, income, *self.period)

    def item_spending(self, category: BudgetCategory) -> list[ItemSpending]:
        return item_spending(category, self.purchases, *self.period)

    def budget_vs_spent(self, include_hidden: bool = False) -> list[ItemSpending]:
        return budget_vs_spent(self.categories, self.purchases, *self.period, include_hidden=include_hidden)

    def uncategorized_spent(self) -> float:
        return uncategorized_spent(self.purchases, *self.period)
