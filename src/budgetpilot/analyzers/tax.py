"""
Tax Ledger — flat percentage taxes over a user-managed list of rates.

Each rate applies to the full salary:

  Tax for a rate  = Salary × Percent / 100
  Total tax       = Σ tax for every rate

An empty list means no tax. Zero-percent rates are kept so they still show
up in breakdowns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from budgetpilot.models.base import coerce_amount
from budgetpilot.models.income import TaxRate

logger = logging.getLogger("budgetpilot.analyzers.tax")


@dataclass(frozen=True)
class TaxLine:
    """One row of a tax breakdown."""

    name: str
    percent: float
    amount: float


def per_rate_amount(salary: float | None, rate: TaxRate) -> float:
    """Annual tax owed for a single rate."""
    return coerce_amount(salary) * rate.percent / 100


def total_tax(salary: float | None, rates: Iterable[TaxRate]) -> float:
    """Annual tax owed across all rates."""
    salary = coerce_amount(salary)
    total = sum(per_rate_amount(salary, rate) for rate in rates)
    logger.debug("Total tax on %.2f: %.2f", salary, total)
    return total


def tax_breakdown(salary: float | None, rates: Iterable[TaxRate]) -> list[TaxLine]:
    """Per-rate amounts in the order given, duplicates included."""
    salary = coerce_amount(salary)
    return [
        TaxLine(name=rate.name, percent=rate.percent, amount=per_rate_amount(salary, rate))
        for rate in rates
    ]


class TaxLedger:
    """A snapshot of a user's tax rates.

    Example usage:
        ledger = TaxLedger([TaxRate(name="Federal", percent=12)])
        ledger.total_tax(60_000)  # 7200.0
    """

    def __init__(self, rates: Iterable[TaxRate] | None = None):
        self.rates = list(rates or [])

    @property
    def total_percent(self) -> float:
        return sum(rate.percent for rate in self.rates)

    def total_tax(self, salary: float | None) -> float:
        return total_tax(salary, self.rates)

    def breakdown(self, salary: float | None) -> list[TaxLine]:
        return tax_breakdown(salary, self.rates)

    def net_income(self, salary: float | None) -> float:
        """Salary left after tax, before retirement contributions."""
        return coerce_amount(salary) - self.total_tax(salary)
