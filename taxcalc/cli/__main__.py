"""Tax Calc CLI - Command-line interface for salary tax calculations."""

import json
import logging
import os

import click
from rich.console import Console

from taxcalc import __version__
from taxcalc.sdk import (
    InvalidSalaryError,
    PAY_PERIODS,
    compute_tax,
    format_amount,
    net_pay_for_period,
    parse_salary,
)

from .helpers import load_rules_or_fail, result_to_json
from .records_commands import records_cli as records_group
from .settings_commands import settings as settings_group
from .renderers.result_renderer import render_brackets, render_tax_result


def _configure_logging(verbose: bool) -> None:
    """Configure logging from LOG_LEVEL (default WARNING); --verbose forces DEBUG."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__, prog_name="tax-calc")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """Tax Calc - Salary tax and take-home pay calculator.

    Computes progressive federal income tax, Social Security and
    Medicare for an annual salary, and splits the net pay into
    yearly, six-month, monthly, bi-weekly and weekly amounts.

    Settings are loaded from (in order):

    \b
    1. TAX_CALC_CONFIG_PATH environment variable
    2. ~/.config/tax-calc/settings.json (XDG default)
    """
    _configure_logging(verbose)


cli.add_command(records_group, name="records")
cli.add_command(settings_group)


@cli.command("calc")
@click.argument("salary")
@click.option("--year", help="Tax year for bracket lookup (default: settings tax_year or 2025).")
@click.option("--period", type=click.Choice(list(PAY_PERIODS)),
              help="Print only the net pay for this pay period.")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
def calc(salary, year, period, output_format):
    """Calculate taxes and net pay for an annual SALARY.

    SALARY may include a leading $ and grouping commas. Put -- before a
    negative value so it is not read as an option.

    \b
    Examples:
      tax-calc calc 85000
      tax-calc calc '$120,000' --format json
      tax-calc calc 85000 --period biweekly
    """
    try:
        amount = parse_salary(salary)
    except InvalidSalaryError as e:
        raise click.ClickException(str(e))

    rules = load_rules_or_fail(year)
    result = compute_tax(amount, rules)

    if period:
        net = net_pay_for_period(result, period)
        if output_format == "json":
            click.echo(json.dumps({"period": period, "net_pay": net}, indent=2))
        else:
            click.echo(format_amount(net))
        return

    if output_format == "json":
        click.echo(json.dumps(result_to_json(result, rules), indent=2))
        return

    render_tax_result(Console(), result, rules.year)


@cli.command("brackets")
@click.option("--year", help="Tax year (default: settings tax_year or 2025).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
def brackets(year, output_format):
    """Show the federal tax brackets and FICA rates for a year."""
    rules = load_rules_or_fail(year)

    if output_format == "json":
        click.echo(json.dumps(rules.model_dump(), indent=2))
        return

    render_brackets(Console(), rules)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
