"""
Budget snapshot — one user's data set as typed records.

The data store hands back loosely shaped rows. A snapshot is the point where
they become typed records; nothing past this boundary sees raw dicts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from budgetpilot.models.account import Account
from budgetpilot.models.budget import BudgetCategory, BudgetItem, Purchase
from budgetpilot.models.income import IncomeProfile, TaxRate


class BudgetSnapshot(BaseModel):
    """Everything the engine needs for one user, already decrypted."""

    income: IncomeProfile = Field(default_factory=IncomeProfile)
    taxes: list[TaxRate] = Field(default_factory=list)
    categories: list[BudgetCategory] = Field(default_factory=list)
    purchases: list[Purchase] = Field(default_factory=list)
    accounts: list[Account] = Field(default_factory=list)

    @property
    def items(self) -> list[BudgetItem]:
        """All budget items across categories, active or not."""
        return [item for category in self.categories for item in category.items]

    @classmethod
    def load(cls, path: str | Path) -> BudgetSnapshot:
        """Load a snapshot from a YAML or JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content has the wrong shape.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {path}")

        with open(path) as f:
            if path.suffix.lower() == ".json":
                data: Any = json.load(f)
            else:
                data = yaml.safe_load(f)

        return cls.model_validate(data or {})
