"""Tests for the command-line interface."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from budgetpilot import __version__
from budgetpilot.cli import app

runner = CliRunner()

SNAPSHOT = {
    "income": {"yearly_salary": 60000, "retirement_contribution_pct": 5, "pay_frequency": "biweekly"},
    "taxes": [{"name": "Federal", "percent": 12}, {"name": "FICA", "percent": 7.65}],
    "categories": [
        {"id": "food", "name": "Food", "items": [{"id": "g", "name": "Groceries", "budget_amount": 400}]},
    ],
    "purchases": [{"id": "1", "cost": 150, "timestamp": "2025-01-05", "budget_item_id": "g"}],
    "accounts": [
        {"name": "Brokerage", "class": "investment", "present_value": 10000,
         "annual_interest_rate_pct": 6, "monthly_contribution": 200},
        {"name": "Car Loan", "class": "loan", "present_value": 5000,
         "annual_interest_rate_pct": 18, "monthly_contribution": 500},
    ],
}


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.dump(SNAPSHOT))
    return str(path)


class TestCli:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_takehome(self, snapshot_file) -> None:
        result = runner.invoke(app, ["takehome", snapshot_file])
        assert result.exit_code == 0
        assert "1,738.85" in result.output

    def test_budget(self, snapshot_file) -> None:
        result = runner.invoke(app, ["budget", snapshot_file, "--year", "2025", "--month", "1"])
        assert result.exit_code == 0
        assert "Groceries" in result.output
        assert "150.00" in result.output

    def test_project(self, snapshot_file) -> None:
        result = runner.invoke(app, ["project", snapshot_file, "--months", "12"])
        assert result.exit_code == 0
        assert "Brokerage" in result.output
        assert "Car Loan" in result.output

    def test_networth(self, snapshot_file) -> None:
        result = runner.invoke(app, ["networth", snapshot_file])
        assert result.exit_code == 0
        assert "5,000.00" in result.output

    def test_report_json(self, snapshot_file, tmp_path) -> None:
        output = tmp_path / "report.json"
        result = runner.invoke(
            app, ["report", snapshot_file, "--year", "2025", "--month", "1", "--output", str(output)]
        )
        assert result.exit_code == 0
        assert json.loads(output.read_text())["total_spent"] == 150

    def test_missing_snapshot(self, tmp_path) -> None:
        result = runner.invoke(app, ["takehome", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_invalid_snapshot(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.dump({"accounts": [{"name": "x", "class": "crypto"}]}))
        result = runner.invoke(app, ["networth", str(path)])
        assert result.exit_code == 1

    def test_unknown_log_level(self, snapshot_file, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUDGETPILOT_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["takehome", snapshot_file])
        assert result.exit_code == 1
        assert "invalid configuration" in result.output

    def test_non_integer_horizon(self, snapshot_file, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUDGETPILOT_HORIZON_MONTHS", "soon")
        result = runner.invoke(app, ["project", snapshot_file])
        assert result.exit_code == 1
        assert "invalid configuration" in result.output
