"""Tests for the BudgetPilot orchestrator and report export."""

import json
from datetime import date

import pytest

from budgetpilot import BudgetPilot
from budgetpilot.analyzers.budget import BudgetStatus
from budgetpilot.config import BudgetPilotConfig
from budgetpilot.exporters import render_markdown
from budgetpilot.exporters.markdown import _money
from budgetpilot.models.snapshot import BudgetSnapshot


def _snapshot() -> BudgetSnapshot:
    return BudgetSnapshot.model_validate({
        "income": {
            "yearly_salary": 60_000,
            "retirement_contribution_pct": 5,
            "employer_match_pct": 3,
            "pay_frequency": "biweekly",
        },
        "taxes": [{"name": "Federal", "percent": 12}, {"name": "FICA", "percent": 7.65}],
        "categories": [
            {
                "id": "food",
                "name": "Food",
                "items": [
                    {"id": "groceries", "name": "Groceries", "budget_amount": 400},
                    {"id": "dining", "name": "Dining Out", "budget_amount": 100},
                ],
            },
            {"id": "misc", "name": "Misc", "items": []},
        ],
        "purchases": [
            {"id": "1", "cost": 400, "timestamp": "2025-01-05", "budget_item_id": "groceries"},
            {"id": "2", "cost": 120, "timestamp": "2025-01-18", "budget_item_id": "dining"},
            {"id": "3", "cost": 25, "timestamp": "2025-01-10"},
            {"id": "4", "cost": 999, "timestamp": "2025-01-11", "budget_item_id": "dining", "deleted": True},
        ],
        "accounts": [
            {"name": "Checking", "class": "checking", "present_value": 2_000},
            {
                "name": "Brokerage",
                "class": "investment",
                "present_value": 10_000,
                "annual_interest_rate_pct": 6,
                "monthly_contribution": 200,
            },
            {
                "name": "Car Loan",
                "class": "loan",
                "present_value": 5_000,
                "annual_interest_rate_pct": 18,
                "monthly_contribution": 500,
            },
        ],
    })


class TestBudgetPilotReport:
    def test_income_section(self) -> None:
        report = BudgetPilot().report(_snapshot(), year=2025, month=1, horizon=12)

        assert report.monthly_take_home == 3_767.5
        assert report.annual_take_home == pytest.approx(45_210)
        assert report.period_take_home == pytest.approx(1_738.846, abs=0.001)
        assert report.pay_frequency == "biweekly"
        assert report.recommended_split["needs"] == pytest.approx(1_883.75)

    def test_budget_section(self) -> None:
        report = BudgetPilot().report(_snapshot(), year=2025, month=1, horizon=12)

        assert report.period_start == date(2025, 1, 1)
        assert report.period_end == date(2025, 2, 1)
        assert report.total_budgeted == 500
        assert report.total_spent == 545
        assert report.uncategorized_spent == 25
        assert report.remaining_budget == pytest.approx(3_267.5)
        assert report.remaining_after_spend == pytest.approx(3_222.5)

        food = report.categories[0]
        assert food.spent == 520
        assert [item.status for item in food.items] == [BudgetStatus.AT, BudgetStatus.OVER]
        assert [item.name for item in report.over_budget_items] == ["Dining Out"]
        assert report.categories[1].budgeted == 0

    def test_accounts_section(self) -> None:
        report = BudgetPilot().report(_snapshot(), year=2025, month=1, horizon=12)

        assert report.net_worth == 7_000
        assert [a.name for a in report.accounts] == ["Brokerage", "Car Loan"]
        assert [p.month for p in report.accounts[0].projections] == [1, 3, 6, 12]
        assert report.accounts[0].projections[-1].future_value == pytest.approx(13_083.89, abs=0.01)
        assert report.net_worth_series[-1].liabilities == 0

    def test_horizon_from_config(self) -> None:
        pilot = BudgetPilot.from_config(None, projection={"horizon_months": 60})
        report = pilot.report(_snapshot(), year=2025, month=1)

        assert report.horizon_months == 60
        assert [p.month for p in report.net_worth_series] == [12, 24, 36, 60]

    def test_repeatable(self) -> None:
        pilot = BudgetPilot(config=BudgetPilotConfig())
        first = pilot.report(_snapshot(), year=2025, month=1).to_dict()
        second = pilot.report(_snapshot(), year=2025, month=1).to_dict()
        first.pop("generated_at")
        second.pop("generated_at")
        assert first == second


class TestExport:
    def test_json(self) -> None:
        report = BudgetPilot().report(_snapshot(), year=2025, month=1)
        data = json.loads(report.to_json())
        assert data["total_spent"] == 545
        assert data["categories"][0]["items"][1]["status"] == "over"

    def test_markdown(self) -> None:
        report = BudgetPilot().report(_snapshot(), year=2025, month=1, horizon=12)
        md = render_markdown(report)

        assert "January 2025" in md
        assert "$3,767.50" in md
        assert "$1,738.85" in md
        assert "| Dining Out | $100.00 | $120.00 | -$20.00 | 🔴 |" in md
        assert "Car Loan (loan)" in md
        assert md == report.to_markdown()

    def test_money_rounds_before_sign(self) -> None:
        """Float noise below half a cent prints as zero, not negative zero."""
        assert _money(0.3 - (0.1 + 0.2)) == "$0.00"
        assert _money(-0.004) == "$0.00"
        assert _money(-20) == "-$20.00"
        assert _money(1_234.565) == "$1,234.57"
