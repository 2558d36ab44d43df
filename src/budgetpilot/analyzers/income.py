"""
Income Calculator — take-home pay from salary, 401k, and taxes.

  401k contribution = Salary × Contribution% / 100
  Employer match    = Salary × Match% / 100      (does not reduce pay)
  Take-home         = Salary − Total tax − 401k contribution
  Monthly           = Take-home / 12
  Per paycheck      = Take-home / pay periods per year

Intermediate values are never rounded. Display values round to 2 places;
the monthly figure handed to the budget screens is stored to 4 places so
month-by-month sums drift less.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from budgetpilot.analyzers.tax import TaxLine, tax_breakdown
from budgetpilot.models.base import coerce_amount
from budgetpilot.models.income import IncomeProfile, PayFrequency, TaxRate

logger = logging.getLogger("budgetpilot.analyzers.income")

DISPLAY_PLACES = 2
PERSISTED_PLACES = 4

PAY_PERIODS_PER_YEAR: dict[PayFrequency, int] = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BIWEEKLY: 26,
    PayFrequency.SEMIMONTHLY: 24,
    PayFrequency.MONTHLY: 12,
}


def round_half_up(value: float, places: int = DISPLAY_PLACES) -> float:
    """Round like a cash register: halves go away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def pay_periods_per_year(frequency: PayFrequency | str | None) -> int:
    return PAY_PERIODS_PER_YEAR[PayFrequency.parse(frequency)]


@dataclass
class TakeHomeSummary:
    """Annual, monthly, and per-paycheck take-home pay."""

    yearly_salary: float
    annual_contribution_401k: float
    annual_employer_match: float
    total_annual_tax: float
    annual_take_home: float
    monthly_take_home: float
    period_take_home: float
    pay_frequency: PayFrequency = PayFrequency.MONTHLY
    tax_lines: list[TaxLine] = field(default_factory=list)

    @property
    def total_annual_retirement(self) -> float:
        """Employee contribution plus employer match."""
        return self.annual_contribution_401k + self.annual_employer_match

    @property
    def persisted_monthly_take_home(self) -> float:
        """Monthly take-home as stored for the budget screens."""
        return round_half_up(self.monthly_take_home, PERSISTED_PLACES)

    def rounded(self, places: int = DISPLAY_PLACES) -> TakeHomeSummary:
        """Copy with every money value rounded for display."""
        return dataclasses.replace(
            self,
            yearly_salary=round_half_up(self.yearly_salary, places),
            annual_contribution_401k=round_half_up(self.annual_contribution_401k, places),
            annual_employer_match=round_half_up(self.annual_employer_match, places),
            total_annual_tax=round_half_up(self.total_annual_tax, places),
            annual_take_home=round_half_up(self.annual_take_home, places),
            monthly_take_home=round_half_up(self.monthly_take_home, places),
            period_take_home=round_half_up(self.period_take_home, places),
            tax_lines=[
                TaxLine(name=line.name, percent=line.percent, amount=round_half_up(line.amount, places))
                for line in self.tax_lines
            ],
        )


def compute_take_home(profile: IncomeProfile, rates: Iterable[TaxRate]) -> TakeHomeSummary:
    """Derive take-home pay for an income profile.

    A take-home below zero (taxes plus contribution above salary) is
    returned as-is, not clamped.
    """
    salary = coerce_amount(profile.yearly_salary)
    contribution = salary * profile.retirement_contribution_pct / 100
    employer_match = salary * profile.employer_match_pct / 100

    tax_lines = tax_breakdown(salary, rates)
    total_tax = sum(line.amount for line in tax_lines)

    annual = salary - total_tax - contribution
    periods = pay_periods_per_year(profile.pay_frequency)

    summary = TakeHomeSummary(
        yearly_salary=salary,
        annual_contribution_401k=contribution,
        annual_employer_match=employer_match,
        total_annual_tax=total_tax,
        annual_take_home=annual,
        monthly_take_home=annual / 12,
        period_take_home=annual / periods,
        pay_frequency=profile.pay_frequency,
        tax_lines=tax_lines,
    )
    logger.debug(
        "Take-home for salary %.2f: %.2f/yr, %.2f per %s paycheck",
        salary,
        annual,
        summary.period_take_home,
        profile.pay_frequency.value,
    )
    return summary


class IncomeCalculator:
    """Take-home pay for a profile against a set of tax rates.

    Example usage:
        calc = IncomeCalculator(profile, rates)
        calc.summary().rounded().period_take_home
    """

    def __init__(self, profile: IncomeProfile, rates: Iterable[TaxRate] | None = None):
        self.profile = profile
        self.rates = list(rates or [])

    def summary(self) -> TakeHomeSummary:
        return compute_take_home(self.profile, self.rates)


@dataclass(frozen=True)
class RecommendedBudget:
    """Monthly take-home split into needs, wants, and savings."""

    monthly_income: float
    needs: float
    wants: float
    savings: float


def recommended_budget(
    monthly_take_home: float | None,
    needs: float = 0.5,
    wants: float = 0.3,
    savings: float = 0.2,
) -> RecommendedBudget:
    """The 50/30/20 rule applied to monthly take-home pay."""
    income = coerce_amount(monthly_take_home)
    return RecommendedBudget(
        monthly_income=income,
        needs=income * needs,
        wants=income * wants,
        savings=income * savings,
    )
