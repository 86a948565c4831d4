"""Rich renderer for tax results and bracket tables.

Transforms SDK output into formatted Rich tables.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from taxcalc.sdk import TaxResult, TaxRules, format_amount, format_result

TAX_ROWS = [
    ("federal_tax", "Federal Tax"),
    ("social_security_tax", "Social Security"),
    ("medicare_tax", "Medicare"),
    ("total_tax", "Total Tax"),
]

NET_PAY_ROWS = [
    ("annual_net_pay", "Yearly"),
    ("semi_annual_net_pay", "Six Months"),
    ("monthly_net_pay", "Monthly"),
    ("bi_weekly_net_pay", "Bi-Weekly"),
    ("weekly_net_pay", "Weekly"),
]


def render_tax_result(console: Console, result: TaxResult, year: str, title: Optional[str] = None) -> None:
    """Render a tax result as Rich tables.

    Args:
        console: Rich Console instance
        result: SDK output from compute_tax()
        year: Tax year the rules came from
        title: Optional panel title (e.g., record label)
    """
    formatted = format_result(result)

    header = f"Salary: [bold]${formatted['salary']}[/bold]  (tax year {year})"
    console.print(Panel(header, title=title or "Tax Calculation", border_style="dim"))

    console.print(_amount_table("Taxes", TAX_ROWS, formatted, total_key="total_tax"))
    console.print(_amount_table("Net Pay", NET_PAY_ROWS, formatted))

    if result.annual_net_pay < 0:
        console.print(Panel(
            "[yellow]Taxes exceed salary; net pay is negative.[/yellow]",
            title="Note",
            border_style="yellow",
        ))


def _amount_table(title: str, rows: list, formatted: dict, total_key: Optional[str] = None) -> Table:
    table = Table(title=title, box=box.SIMPLE, show_header=False)
    table.add_column("label")
    table.add_column("amount", justify="right")

    for key, label in rows:
        if key == total_key:
            table.add_row(f"[bold]{label}[/bold]", f"[bold]${formatted[key]}[/bold]")
        else:
            table.add_row(label, f"${formatted[key]}")
    return table


def render_brackets(console: Console, rules: TaxRules) -> None:
    """Render the federal bracket table plus FICA rates."""
    table = Table(title=f"Federal Brackets {rules.year}", box=box.SIMPLE)
    table.add_column("Over", justify="right")
    table.add_column("Up To", justify="right")
    table.add_column("Rate", justify="right")

    for bracket in rules.federal_brackets:
        up_to = "-" if bracket.max_earnings is None else f"${format_amount(bracket.max_earnings)}"
        table.add_row(f"${format_amount(bracket.min_earnings)}", up_to, f"{bracket.rate:.1%}")

    console.print(table)
    console.print(f"Social Security: {rules.social_security_rate:.2%}  Medicare: {rules.medicare_rate:.2%}")
