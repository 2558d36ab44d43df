"""
Example: Build a monthly budget report for a household.

Run:
    python examples/household/run_report.py

Or via CLI:
    budgetpilot report examples/household/snapshot.yaml --year 2025 --month 1 --months 60
"""

from pathlib import Path

from budgetpilot import BudgetPilot
from budgetpilot.models.snapshot import BudgetSnapshot

SCRIPT_DIR = Path(__file__).parent.resolve()
SNAPSHOT_PATH = SCRIPT_DIR / "snapshot.yaml"


def main() -> None:
    snapshot = BudgetSnapshot.load(SNAPSHOT_PATH)
    pilot = BudgetPilot.from_config(None, projection={"horizon_months": 60})

    report = pilot.report(snapshot, year=2025, month=1)

    print(f"Monthly take-home:  ${report.monthly_take_home:,.2f}")
    print(f"Per paycheck:       ${report.period_take_home:,.2f}")
    print(f"Spent this month:   ${report.total_spent:,.2f} of ${report.total_budgeted:,.2f} budgeted")
    for item in report.over_budget_items:
        print(f"  Over budget: {item.name} (${item.spent:,.2f} / ${item.budgeted:,.2f})")
    print(f"Net worth today:    ${report.net_worth:,.2f}")
    for point in report.net_worth_series:
        print(f"  in {point.month:>3} months: ${point.net_worth:,.2f}")

    output = SCRIPT_DIR / "report.md"
    output.write_text(report.to_markdown())
    print(f"\nReport saved to {output}")


if __name__ == "__main__":
    main()
