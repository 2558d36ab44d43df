"""
Markdown report exporter.

Renders a BudgetReport as Markdown, suitable for GitHub, Notion, or any
Markdown viewer. All money values are rounded to cents here, not before.
"""

from __future__ import annotations

from budgetpilot.analyzers.budget import BudgetStatus
from budgetpilot.analyzers.income import round_half_up
from budgetpilot.models.report import BudgetReport


def _money(value: float) -> str:
    value = round_half_up(value) or 0.0  # no negative zero
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def render_markdown(report: BudgetReport) -> str:
    """Render a BudgetReport as Markdown."""
    lines: list[str] = []

    # Header
    lines.append(f"# 💰 BudgetPilot Report — {report.period_start.strftime('%B %Y')}")
    lines.append("")
    lines.append(f"*Generated: {report.generated_at.strftime('%Y-%m-%d %H:%M')}*")
    lines.append("")

    # Income
    lines.append("## 💵 Income")
    lines.append("")
    lines.append("| Metric | Value |")
    lines.append("|--------|-------|")
    lines.append(f"| **Annual Take-Home** | {_money(report.annual_take_home)} |")
    lines.append(f"| **Monthly Take-Home** | {_money(report.monthly_take_home)} |")
    lines.append(f"| **Per Paycheck ({report.pay_frequency})** | {_money(report.period_take_home)} |")
    lines.append(f"| **Total Annual Tax** | {_money(report.total_annual_tax)} |")
    lines.append(f"| **401k Contribution** | {_money(report.annual_contribution_401k)} |")
    lines.append(f"| **Employer Match** | {_money(report.annual_employer_match)} |")
    lines.append("")

    if report.recommended_split:
        lines.append("**Recommended split:** " + " · ".join(
            f"{name.title()} {_money(amount)}" for name, amount in report.recommended_split.items()
        ))
        lines.append("")

    # Budget
    status_emoji = {
        BudgetStatus.UNDER: "🟢",
        BudgetStatus.AT: "🟡",
        BudgetStatus.OVER: "🔴",
    }

    lines.append("## 📋 Budget")
    lines.append("")
    for category in report.categories:
        lines.append(
            f"### {category.name} — {_money(category.spent)} of {_money(category.budgeted)}"
        )
        lines.append("")
        if not category.items:
            lines.append("*No items.*")
            lines.append("")
            continue
        lines.append("| Item | Budget | Spent | Remaining | |")
        lines.append("|------|--------|-------|-----------|---|")
        for item in category.items:
            lines.append(
                f"| {item.name} | {_money(item.budgeted)} | {_money(item.spent)} "
                f"| {_money(item.remaining)} | {status_emoji[item.status]} |"
            )
        lines.append("")

    lines.append("| Total | Value |")
    lines.append("|-------|-------|")
    lines.append(f"| **Budgeted** | {_money(report.total_budgeted)} |")
    lines.append(f"| **Spent** | {_money(report.total_spent)} |")
    if report.uncategorized_spent:
        lines.append(f"| **Uncategorized** | {_money(report.uncategorized_spent)} |")
    lines.append(f"| **Remaining Budget** | {_money(report.remaining_budget)} |")
    lines.append(f"| **Remaining After Spend** | {_money(report.remaining_after_spend)} |")
    lines.append("")

    # Accounts
    lines.append("## 📈 Net Worth")
    lines.append("")
    lines.append(
        f"Assets {_money(report.total_assets)} − Liabilities {_money(report.total_liabilities)} "
        f"= **{_money(report.net_worth)}**"
    )
    lines.append("")

    if report.accounts:
        months = [p.month for p in report.accounts[0].projections]
        lines.append("| Account | Current | " + " | ".join(f"{m} mo" for m in months) + " |")
        lines.append("|---------|---------|" + "|".join("------" for _ in months) + "|")
        for account in report.accounts:
            values = " | ".join(_money(p.future_value) for p in account.projections)
            lines.append(f"| {account.name} ({account.account_class}) | {_money(account.present_value)} | {values} |")
        lines.append("")

    if report.net_worth_series:
        lines.append("| Month | Assets | Liabilities | Net Worth |")
        lines.append("|-------|--------|-------------|-----------|")
        for point in report.net_worth_series:
            lines.append(
                f"| {point.month} | {_money(point.assets)} | {_money(point.liabilities)} | {_money(point.net_worth)} |"
            )
        lines.append("")

    lines.append("---")
    lines.append("*Generated by BudgetPilot*")

    return "\n".join(lines)
