"""Tests for data models."""

import json
from datetime import date, datetime

import pytest
import yaml
from pydantic import ValidationError

from budgetpilot.models.account import Account, AccountClass
from budgetpilot.models.base import coerce_amount
from budgetpilot.models.budget import BudgetCategory, BudgetItem, Purchase
from budgetpilot.models.income import IncomeProfile, PayFrequency, TaxRate
from budgetpilot.models.snapshot import BudgetSnapshot


class TestCoerceAmount:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (None, 0.0),
            ("", 0.0),
            ("abc", 0.0),
            (float("nan"), 0.0),
            (float("inf"), 0.0),
            ("12.5", 12.5),
            (" 7 ", 7.0),
            (3, 3.0),
        ],
    )
    def test_values(self, raw, expected) -> None:
        assert coerce_amount(raw) == expected


class TestIncomeModels:
    def test_defaults(self) -> None:
        profile = IncomeProfile()
        assert profile.yearly_salary == 0
        assert profile.pay_frequency == PayFrequency.MONTHLY

    def test_frequency_parsing(self) -> None:
        assert IncomeProfile(pay_frequency="BiWeekly").pay_frequency == PayFrequency.BIWEEKLY
        assert IncomeProfile(pay_frequency="Semi-Monthly").pay_frequency == PayFrequency.SEMIMONTHLY
        assert IncomeProfile(pay_frequency=None).pay_frequency == PayFrequency.MONTHLY

    def test_tax_rate_ids_and_blank_percent(self) -> None:
        rate = TaxRate(id=42, name="Medicare", percent="")
        assert rate.id == "42"
        assert rate.percent == 0


class TestBudgetModels:
    def test_active_items(self) -> None:
        category = BudgetCategory(
            id=1,
            name="Home",
            items=[
                BudgetItem(id=1, name="Rent", budget_amount=1_500),
                BudgetItem(id=2, name="Old", active=False),
            ],
        )
        assert [item.name for item in category.active_items] == ["Rent"]
        assert category.items[0].id == "1"

    def test_purchase_timestamp_formats(self) -> None:
        assert Purchase(id="a", timestamp="2025-01-15").timestamp == date(2025, 1, 15)
        assert Purchase(id="b", timestamp="2025-01-15T23:10:00Z").timestamp == date(2025, 1, 15)
        assert Purchase(id="c", timestamp=datetime(2025, 1, 15, 9, 30)).timestamp == date(2025, 1, 15)

    def test_bad_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Purchase(id="a", timestamp="not a date")

    def test_uncategorized(self) -> None:
        purchase = Purchase(id="a", timestamp=date(2025, 1, 1), budget_item_id=None)
        assert purchase.is_categorized is False
        assert Purchase(id="b", timestamp=date(2025, 1, 1), budget_item_id=7).budget_item_id == "7"


class TestAccount:
    @pytest.mark.parametrize(
        "account_class,liability,projectable",
        [
            (AccountClass.CHECKING, False, False),
            (AccountClass.SAVINGS, False, False),
            (AccountClass.CREDIT, True, False),
            (AccountClass.INVESTMENT, False, True),
            (AccountClass.LOAN, True, True),
            (AccountClass.OTHER, False, False),
        ],
    )
    def test_classification(self, account_class, liability, projectable) -> None:
        account = Account(name="x", account_class=account_class)
        assert account.is_liability is liability
        assert account.is_asset is not liability
        assert account.is_projectable is projectable

    def test_class_alias(self) -> None:
        account = Account.model_validate({"name": "Mortgage", "class": "loan", "present_value": "250000"})
        assert account.account_class == AccountClass.LOAN
        assert account.present_value == 250_000

    def test_unknown_class_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Account(name="x", account_class="crypto")

    def test_monthly_rate(self) -> None:
        assert Account(annual_interest_rate_pct=6).monthly_rate == pytest.approx(0.005)


SNAPSHOT = {
    "income": {
        "yearly_salary": 60000,
        "retirement_contribution_pct": 5,
        "employer_match_pct": 3,
        "pay_frequency": "biweekly",
    },
    "taxes": [{"id": 1, "name": "Federal", "percent": 12}, {"id": 2, "name": "FICA", "percent": 7.65}],
    "categories": [
        {
            "id": "food",
            "name": "Food",
            "items": [{"id": "groceries", "name": "Groceries", "budget_amount": 400}],
        }
    ],
    "purchases": [
        {"id": "p1", "item_name": "Costco", "cost": 150, "timestamp": "2025-01-05", "budget_item_id": "groceries"},
    ],
    "accounts": [
        {"name": "Brokerage", "class": "investment", "present_value": 10000, "annual_interest_rate_pct": 6},
    ],
}


class TestSnapshot:
    def test_load_yaml(self, tmp_path) -> None:
        path = tmp_path / "snapshot.yaml"
        path.write_text(yaml.dump(SNAPSHOT))

        snapshot = BudgetSnapshot.load(path)
        assert snapshot.income.pay_frequency == PayFrequency.BIWEEKLY
        assert len(snapshot.taxes) == 2
        assert [item.id for item in snapshot.items] == ["groceries"]
        assert snapshot.accounts[0].account_class == AccountClass.INVESTMENT

    def test_load_json(self, tmp_path) -> None:
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(SNAPSHOT))
        assert BudgetSnapshot.load(path).purchases[0].cost == 150

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        snapshot = BudgetSnapshot.load(path)
        assert snapshot.accounts == []

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            BudgetSnapshot.load(tmp_path / "nope.yaml")
