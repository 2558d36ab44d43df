"""
Income models — salary profile and tax rates.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from budgetpilot.models.base import Amount, RecordId


class PayFrequency(str, Enum):
    """How often a paycheck arrives."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: Any) -> PayFrequency:
        """Parse a stored frequency, falling back to monthly."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.MONTHLY


class TaxRate(BaseModel):
    """A named tax rate owned by a user.

    Names are free text and may repeat. ``percent`` is a whole-number
    percentage (``7.65`` means 7.65%).
    """

    id: RecordId | None = None
    name: str = ""
    percent: Amount = 0.0


class IncomeProfile(BaseModel):
    """A user's salary and retirement settings.

    Percentages are whole-number percent: ``5`` means 5% of salary.
    """

    yearly_salary: Amount = 0.0
    retirement_contribution_pct: Amount = Field(default=0.0, description="Employee 401k contribution, % of salary")
    employer_match_pct: Amount = Field(default=0.0, description="Employer match, % of salary")
    pay_frequency: PayFrequency = PayFrequency.MONTHLY

    @field_validator("pay_frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, value: Any) -> PayFrequency:
        return PayFrequency.parse(value)
