"""
Net Worth Aggregator — assets minus liabilities, now and projected.

Current net worth uses every account's present value. Projected net worth
only counts investments and loans; checking, savings, credit, and other
accounts are point-in-time balances and drop out of projections.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from budgetpilot.analyzers.projection import milestone_months, project_account
from budgetpilot.models.account import Account

logger = logging.getLogger("budgetpilot.analyzers.networth")


@dataclass(frozen=True)
class NetWorthSummary:
    total_assets: float
    total_liabilities: float

    @property
    def net_worth(self) -> float:
        return self.total_assets - self.total_liabilities


@dataclass(frozen=True)
class NetWorthPoint:
    """Projected assets, liabilities, and net worth at one month."""

    month: int
    assets: float
    liabilities: float

    @property
    def net_worth(self) -> float:
        return self.assets - self.liabilities


@dataclass(frozen=True)
class MilestoneSummary:
    """Combined contributions and interest across accounts at one month.

    ``net_interest`` is interest earned on investments minus interest paid
    on loans.
    """

    month: int
    total_contributions: float
    net_interest: float


def net_worth_summary(accounts: Iterable[Account]) -> NetWorthSummary:
    assets = 0.0
    liabilities = 0.0
    for account in accounts:
        if account.is_liability:
            liabilities += account.present_value
        else:
            assets += account.present_value
    return NetWorthSummary(total_assets=assets, total_liabilities=liabilities)


def net_worth(accounts: Iterable[Account]) -> float:
    """Sum of asset balances minus sum of liability balances."""
    return net_worth_summary(accounts).net_worth


def projected_point(accounts: Iterable[Account], months: int) -> NetWorthPoint:
    assets = 0.0
    liabilities = 0.0
    for account in accounts:
        if not account.is_projectable:
            continue
        value = project_account(account, months).future_value
        if account.is_liability:
            liabilities += value
        else:
            assets += value
    return NetWorthPoint(month=months, assets=assets, liabilities=liabilities)


def projected_net_worth(accounts: Iterable[Account], months: int) -> float:
    """Projected investments minus projected loans after ``months``."""
    return projected_point(accounts, months).net_worth


def net_worth_series(accounts: Iterable[Account], horizon: int) -> list[NetWorthPoint]:
    """Projected net worth at each milestone month of the horizon."""
    accounts = list(accounts)
    series = [projected_point(accounts, m) for m in milestone_months(horizon)]
    logger.debug("Net worth series over %d months: %d points", horizon, len(series))
    return series


def milestone_summary(accounts: Iterable[Account], horizon: int) -> list[MilestoneSummary]:
    """Contributions and net interest across projectable accounts per milestone."""
    accounts = [a for a in accounts if a.is_projectable]
    rows = []
    for month in milestone_months(horizon):
        contributions = 0.0
        interest = 0.0
        for account in accounts:
            projection = project_account(account, month)
            contributions += projection.total_contributions
            if account.is_liability:
                interest -= projection.total_interest
            else:
                interest += projection.total_interest
        rows.append(MilestoneSummary(month=month, total_contributions=contributions, net_interest=interest))
    return rows


class NetWorthAggregator:
    """Net worth over a set of accounts.

    Example usage:
        agg = NetWorthAggregator(accounts)
        agg.current()           # today
        agg.projected(months=60)
    """

    def __init__(self, accounts: Iterable[Account] | None = None):
        self.accounts = list(accounts or [])

    def summary(self) -> NetWorthSummary:
        return net_worth_summary(self.accounts)

    def current(self) -> float:
        return net_worth(self.accounts)

    def projected(self, months: int) -> float:
        return projected_net_worth(self.accounts, months)

    def series(self, horizon: int) -> list[NetWorthPoint]:
        return net_worth_series(self.accounts, horizon)

    def milestones(self, horizon: int) -> list[MilestoneSummary]:
        return milestone_summary(self.accounts, horizon)
