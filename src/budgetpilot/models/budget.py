"""
Budget models — categories, items, and purchases.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from budgetpilot.models.base import Amount, RecordId


class BudgetItem(BaseModel):
    """A spending bucket inside a category with a monthly budget.

    Items with purchase history are soft-deleted (``active=False``) rather
    than removed, so old purchases keep pointing at them.
    """

    id: RecordId
    name: str = ""
    budget_amount: Amount = 0.0
    category_id: RecordId | None = None
    active: bool = True
    hidden: bool = False  # hidden from budget-vs-spent charts only


class BudgetCategory(BaseModel):
    """A user-defined group of budget items."""

    id: RecordId
    name: str = ""
    items: list[BudgetItem] = Field(default_factory=list)

    @property
    def active_items(self) -> list[BudgetItem]:
        return [item for item in self.items if item.active]


class Purchase(BaseModel):
    """A single logged purchase.

    ``budget_item_id=None`` marks an uncategorized purchase. Deletion is
    soft: ``deleted=True`` purchases drop out of aggregation but are kept.
    """

    id: RecordId
    item_name: str = ""
    cost: Amount = 0.0
    timestamp: date
    budget_item_id: RecordId | None = None
    deleted: bool = False

    @field_validator("timestamp", mode="before")
    @classmethod
    def _to_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            text = value.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text).date()
            except ValueError:
                return value
        return value

    @property
    def is_categorized(self) -> bool:
        return self.budget_item_id is not None

    def soft_delete(self) -> Purchase:
        """Return a copy marked as deleted, keeping the same id."""
        return self.model_copy(update={"deleted": True})

    def restore(self) -> Purchase:
        """Return a copy with the deleted flag cleared."""
        return self.model_copy(update={"deleted": False})
