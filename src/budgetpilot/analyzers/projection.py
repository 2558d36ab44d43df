"""
Projection Engine — future balances of investments and loans.

Investments compound monthly with a fixed deposit (closed form):

  r  = Annual rate / 100 / 12
  FV = PV × (1 + r)^n + C × ((1 + r)^n − 1) / r
  FV = PV + C × n                                   when r == 0

Loans amortize month by month, because a balance cannot go below zero:

  balance = balance × (1 + r) − payment             until balance hits 0

The payment in the payoff month is only what is still owed, so total
contributions count money actually paid and

  Interest = Contributions − (PV − FV)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from budgetpilot.exceptions import InvalidArgumentError
from budgetpilot.models.account import Account

logger = logging.getLogger("budgetpilot.analyzers.projection")

# Horizon bucket upper bound -> representative months; the last entry is open-ended.
MILESTONE_TABLE: list[tuple[int | None, list[int]]] = [
    (12, [1, 3, 6, 12]),
    (36, [6, 12, 24, 36]),
    (60, [12, 24, 36, 60]),
    (120, [12, 36, 60, 120]),
    (180, [12, 60, 120, 180]),
    (None, [12, 60, 120, 180, 240]),
]


@dataclass(frozen=True)
class Projection:
    """An account's balance after ``months`` and how it got there."""

    months: int
    present_value: float
    future_value: float
    total_contributions: float
    total_interest: float
    paid_off_month: int | None = None  # liabilities only

    @property
    def is_paid_off(self) -> bool:
        return self.paid_off_month is not None


@dataclass
class AccountProjection:
    """An account projected at each milestone month."""

    account: Account
    projections: list[Projection] = field(default_factory=list)


def _check_months(months: int, name: str = "months") -> None:
    if months < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {months}")


def _project_investment(account: Account, months: int) -> Projection:
    pv = account.present_value
    contribution = account.monthly_contribution
    rate = account.monthly_rate

    if rate == 0:
        fv = pv + contribution * months
    else:
        growth = (1 + rate) ** months
        fv = pv * growth + contribution * ((growth - 1) / rate)

    contributions = contribution * months
    return Projection(
        months=months,
        present_value=pv,
        future_value=fv,
        total_contributions=contributions,
        total_interest=fv - pv - contributions,
    )


def _project_loan(account: Account, months: int) -> Projection:
    pv = account.present_value
    payment = account.monthly_contribution
    rate = account.monthly_rate

    if pv <= 0:
        return Projection(
            months=months,
            present_value=pv,
            future_value=0.0,
            total_contributions=0.0,
            total_interest=0.0,
            paid_off_month=0,
        )

    balance = pv
    paid = 0.0
    paid_off_month = None
    for month in range(1, months + 1):
        owed = balance * (1 + rate)
        this_payment = min(payment, owed)
        balance = owed - this_payment
        paid += this_payment
        if balance <= 0:
            paid_off_month = month
            break

    fv = max(0.0, balance)
    return Projection(
        months=months,
        present_value=pv,
        future_value=fv,
        total_contributions=paid,
        total_interest=paid - (pv - fv),
        paid_off_month=paid_off_month,
    )


def project_account(account: Account, months: int) -> Projection:
    """Project an account ``months`` ahead.

    Liabilities (credit, loan) amortize; everything else compounds.

    Raises:
        InvalidArgumentError: If ``months`` is negative.
    """
    _check_months(months)
    if account.is_liability:
        projection = _project_loan(account, months)
    else:
        projection = _project_investment(account, months)
    logger.debug(
        "Projected %s (%s) %d months: %.2f -> %.2f",
        account.name,
        account.account_class.value,
        months,
        projection.present_value,
        projection.future_value,
    )
    return projection


def future_value(account: Account, months: int) -> float:
    return project_account(account, months).future_value


def milestone_months(horizon: int) -> list[int]:
    """Representative months to show for a projection horizon.

    The horizon itself is always included as the last entry.
    """
    _check_months(horizon, "horizon")
    for upper, months in MILESTONE_TABLE:
        if upper is None or horizon <= upper:
            selected = [m for m in months if m <= horizon]
            break
    if horizon not in selected:
        selected.append(horizon)
        selected.sort()
    return selected


def projection_table(accounts: Iterable[Account], horizon: int) -> list[AccountProjection]:
    """Projections at each milestone for every investment and loan account."""
    months = milestone_months(horizon)
    return [
        AccountProjection(
            account=account,
            projections=[project_account(account, m) for m in months],
        )
        for account in accounts
        if account.is_projectable
    ]


class ProjectionEngine:
    """Balance projections over a set of accounts.

    Example usage:
        engine = ProjectionEngine(accounts)
        for row in engine.table(horizon=60):
            print(row.account.name, [p.future_value for p in row.projections])
    """

    def __init__(self, accounts: Iterable[Account] | None = None):
        self.accounts = list(accounts or [])

    @property
    def projectable(self) -> list[Account]:
        return [a for a in self.accounts if a.is_projectable]

    def project(self, account: Account, months: int) -> Projection:
        return project_account(account, months)

    def future_value(self, account: Account, months: int) -> float:
        return future_value(account, months)

    def table(self, horizon: int) -> list[AccountProjection]:
        return projection_table(self.accounts, horizon)
