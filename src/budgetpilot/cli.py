"""
BudgetPilot CLI — command-line interface.

Usage:
    budgetpilot takehome snapshot.yaml
    budgetpilot budget snapshot.yaml --year 2025 --month 1
    budgetpilot project snapshot.yaml --months 60
    bp report snapshot.yaml --output report.md
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from budgetpilot import __version__
from budgetpilot.analyzers.income import round_half_up
from budgetpilot.config import BudgetPilotConfig
from budgetpilot.models.snapshot import BudgetSnapshot

app = typer.Typer(
    name="budgetpilot",
    help="💰 BudgetPilot — personal budgeting from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()

CONFIG_OPTION = typer.Option("budgetpilot.yaml", "--config", "-c", help="Path to config file")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]BudgetPilot[/bold] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """💰 BudgetPilot — take-home pay, budgets, projections, net worth."""


def _load_config(config: str) -> BudgetPilotConfig:
    config_path = config if Path(config).exists() else None
    try:
        cfg = BudgetPilotConfig.load(config_path)
        logging.basicConfig(level=cfg.logging.level, format=cfg.logging.format)
    except ValueError as e:
        console.print("[red]Error: invalid configuration[/red]")
        console.print(str(e))
        raise typer.Exit(1)
    return cfg


def _load_snapshot(path: str) -> BudgetSnapshot:
    try:
        return BudgetSnapshot.load(path)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Error: invalid snapshot {path}[/red]")
        console.print(str(e))
        raise typer.Exit(1)


def _money(value: float, cfg: BudgetPilotConfig) -> str:
    symbol = cfg.display.currency_symbol
    decimals = cfg.display.decimals
    value = round_half_up(value, decimals) or 0.0  # no negative zero
    if value < 0:
        return f"-{symbol}{abs(value):,.{decimals}f}"
    return f"{symbol}{value:,.{decimals}f}"


@app.command()
def takehome(
    snapshot: str = typer.Argument(..., help="Snapshot file (.yaml or .json)"),
    config: str = CONFIG_OPTION,
) -> None:
    """Show take-home pay after taxes and 401k."""
    from budgetpilot.analyzers.income import compute_take_home, recommended_budget

    cfg = _load_config(config)
    data = _load_snapshot(snapshot)
    summary = compute_take_home(data.income, data.taxes).rounded(cfg.display.decimals)

    table = Table(title="Take-Home Pay", show_lines=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Yearly Salary", _money(summary.yearly_salary, cfg))
    table.add_row("401k Contribution", _money(summary.annual_contribution_401k, cfg))
    table.add_row("Employer Match", _money(summary.annual_employer_match, cfg))
    table.add_row("Total Annual 401k", _money(summary.total_annual_retirement, cfg))
    for line in summary.tax_lines:
        table.add_row(f"{line.name} ({line.percent:g}%)", _money(line.amount, cfg))
    table.add_row("Total Annual Tax", _money(summary.total_annual_tax, cfg))
    table.add_row("Annual Take-Home", _money(summary.annual_take_home, cfg))
    table.add_row("Monthly Take-Home", _money(summary.monthly_take_home, cfg))
    table.add_row(f"Per Paycheck ({summary.pay_frequency.value})", _money(summary.period_take_home, cfg))

    console.print(table)

    split = cfg.recommended_split
    rec = recommended_budget(summary.monthly_take_home, split.needs, split.wants, split.savings)
    console.print(
        f"[dim]Recommended: needs {_money(rec.needs, cfg)} · "
        f"wants {_money(rec.wants, cfg)} · savings {_money(rec.savings, cfg)}[/dim]"
    )


@app.command()
def budget(
    snapshot: str = typer.Argument(..., help="Snapshot file (.yaml or .json)"),
    year: int = typer.Option(None, "--year", "-y", help="Budget year (default: this year)"),
    month: int = typer.Option(None, "--month", "-m", min=1, max=12, help="Budget month (default: this month)"),
    config: str = CONFIG_OPTION,
) -> None:
    """Show spending against budget for a month."""
    from budgetpilot.analyzers.budget import BudgetAggregator, BudgetStatus
    from budgetpilot.analyzers.income import compute_take_home

    cfg = _load_config(config)
    data = _load_snapshot(snapshot)
    today = date.today()
    agg = BudgetAggregator.for_month(data.categories, data.purchases, year or today.year, month or today.month)
    income = compute_take_home(data.income, data.taxes).persisted_monthly_take_home

    status_colors = {
        BudgetStatus.UNDER: "green",
        BudgetStatus.AT: "yellow",
        BudgetStatus.OVER: "red",
    }

    start, _ = agg.period
    table = Table(title=f"Budget — {start.strftime('%B %Y')}")
    table.add_column("Category", style="bold")
    table.add_column("Item")
    table.add_column("Budget", justify="right")
    table.add_column("Spent", justify="right")

    for category in data.categories:
        for row in agg.item_spending(category):
            color = status_colors[row.status]
            table.add_row(
                category.name,
                row.name,
                _money(row.budgeted, cfg),
                f"[{color}]{_money(row.spent, cfg)}[/{color}]",
            )
        totals = agg.category_totals(category)
        table.add_row(category.name, "[dim]total[/dim]", _money(totals.budgeted, cfg), _money(totals.spent, cfg))

    console.print(table)

    totals = agg.grand_totals(income)
    console.print(f"Total Budgeted:   {_money(totals.total_budgeted, cfg)}")
    console.print(f"Remaining Budget: {_money(totals.remaining_budget, cfg)}")
    console.print(f"Total Spent:      {_money(totals.total_spent, cfg)}")
    console.print(f"Remaining:        {_money(totals.remaining_after_spend, cfg)}")


@app.command()
def project(
    snapshot: str = typer.Argument(..., help="Snapshot file (.yaml or .json)"),
    months: int = typer.Option(None, "--months", "-n", min=0, help="Projection horizon in months"),
    config: str = CONFIG_OPTION,
) -> None:
    """Project investment and loan balances forward."""
    from budgetpilot.analyzers.networth import milestone_summary
    from budgetpilot.analyzers.projection import milestone_months, projection_table

    cfg = _load_config(config)
    data = _load_snapshot(snapshot)
    horizon = cfg.projection.horizon_months if months is None else months

    rows = projection_table(data.accounts, horizon)
    if not rows:
        console.print("[yellow]No investment or loan accounts to project.[/yellow]")
        return

    table = Table(title=f"Account Projections — {horizon} months", show_lines=True)
    table.add_column("Account", style="bold")
    table.add_column("Current", justify="right")
    for m in milestone_months(horizon):
        table.add_column(f"{m} mo", justify="right")

    for row in rows:
        table.add_row(
            row.account.name,
            _money(row.account.present_value, cfg),
            *(_money(p.future_value, cfg) for p in row.projections),
        )
    console.print(table)

    for milestone in milestone_summary(data.accounts, horizon):
        console.print(
            f"[dim]{milestone.month:>4} mo: contributions {_money(milestone.total_contributions, cfg)}, "
            f"net interest {_money(milestone.net_interest, cfg)}[/dim]"
        )


@app.command()
def networth(
    snapshot: str = typer.Argument(..., help="Snapshot file (.yaml or .json)"),
    months: int = typer.Option(None, "--months", "-n", min=0, help="Projection horizon in months"),
    config: str = CONFIG_OPTION,
) -> None:
    """Show current and projected net worth."""
    from budgetpilot.analyzers.networth import NetWorthAggregator

    cfg = _load_config(config)
    data = _load_snapshot(snapshot)
    horizon = cfg.projection.horizon_months if months is None else months
    agg = NetWorthAggregator(data.accounts)
    summary = agg.summary()

    color = "green" if summary.net_worth >= 0 else "red"
    console.print(Panel.fit(
        f"Assets {_money(summary.total_assets, cfg)}  ·  Liabilities {_money(summary.total_liabilities, cfg)}\n"
        f"[bold {color}]Net Worth {_money(summary.net_worth, cfg)}[/bold {color}]",
        title="Net Worth",
    ))

    table = Table(title="Projected (investments and loans)")
    table.add_column("Month", justify="right")
    table.add_column("Assets", justify="right")
    table.add_column("Liabilities", justify="right")
    table.add_column("Net Worth", justify="right", style="bold")
    for point in agg.series(horizon):
        table.add_row(
            str(point.month),
            _money(point.assets, cfg),
            _money(point.liabilities, cfg),
            _money(point.net_worth, cfg),
        )
    console.print(table)


@app.command()
def report(
    snapshot: str = typer.Argument(..., help="Snapshot file (.yaml or .json)"),
    year: int = typer.Option(None, "--year", "-y", help="Budget year (default: this year)"),
    month: int = typer.Option(None, "--month", "-m", min=1, max=12, help="Budget month (default: this month)"),
    months: int = typer.Option(None, "--months", "-n", min=0, help="Projection horizon in months"),
    output: str = typer.Option("budget_report.md", "--output", "-o", help="Output file path (.md, .json)"),
    config: str = CONFIG_OPTION,
) -> None:
    """Write a full budget report."""
    from budgetpilot.pilot import BudgetPilot

    cfg = _load_config(config)
    data = _load_snapshot(snapshot)
    pilot = BudgetPilot(config=cfg)

    with console.status("[bold green]Building report...[/bold green]"):
        result = pilot.report(data, year=year, month=month, horizon=months)

    path = Path(output)
    if path.suffix == ".json":
        content = result.to_json()
    else:
        content = result.to_markdown()

    path.write_text(content)
    console.print(f"[green]✓[/green] Report saved to [bold]{path}[/bold]")


if __name__ == "__main__":
    app()
