"""Salary records CLI commands."""

import json
from typing import Optional

import click
from rich.console import Console

from taxcalc.sdk import InvalidSalaryError, RecordError, compute_tax, format_amount
from taxcalc.sdk import records

from .helpers import load_rules_or_fail, result_to_json
from .renderers.result_renderer import render_tax_result


@click.group()
def records_cli():
    """Manage saved salary records.

    Records are stored as JSON under the data directory
    (~/.local/share/tax-calc/records/ by default).
    """
    pass


@records_cli.command("add")
@click.argument("salary")
@click.option("--label", help="Description, e.g. job title or employer.")
def records_add(salary: str, label: Optional[str]):
    """Save an annual SALARY as a new record and print its ID."""
    try:
        record_id = records.add_record(salary, label=label)
    except InvalidSalaryError as e:
        raise click.ClickException(str(e))

    click.echo(record_id)


@records_cli.command("list")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
def records_list(output_format: str):
    """List saved salary records."""
    all_records = records.list_records()

    if output_format == "json":
        output = [{"id": r["id"], "meta": r.get("meta"), "data": r.get("data")} for r in all_records]
        click.echo(json.dumps(output, indent=2))
        return

    if not all_records:
        click.echo("No records found.")
        click.echo("\nTo add a record:")
        click.echo("  tax-calc records add <salary> --label <label>")
        return

    for rec in all_records:
        data = rec.get("data") or {}
        salary = data.get("salary")
        amount = format_amount(salary) if isinstance(salary, (int, float)) else "?"
        label = data.get("label") or ""
        click.echo(f"{rec['id']}  ${amount:>14}  {label}".rstrip())


@records_cli.command("show")
@click.argument("record_id")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
def records_show(record_id: str, output_format: str):
    """Show details of a single record.

    \b
    Arguments:
      RECORD_ID    The 8-character record ID (from 'records list')
    """
    try:
        record = records.get_record(record_id)
    except RecordError as e:
        raise click.ClickException(str(e))

    if not record:
        raise click.ClickException(f"Record not found: {record_id}")

    if output_format == "json":
        output = {"id": record.get("id"), "meta": record.get("meta"), "data": record.get("data")}
        click.echo(json.dumps(output, indent=2))
        return

    meta = record.get("meta", {})
    data = record.get("data") or {}

    click.echo(f"Record: {record_id}")
    click.echo("-" * 40)
    click.echo(f"Label: {data.get('label') or '-'}")
    click.echo(f"Salary: {data.get('salary')}")
    click.echo(f"Created: {meta.get('created_at', 'unknown')}")


@records_cli.command("calc")
@click.argument("record_id")
@click.option("--year", help="Tax year for bracket lookup.")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
def records_calc(record_id: str, year: Optional[str], output_format: str):
    """Calculate taxes and net pay for the salary in a record."""
    rules = load_rules_or_fail(year)

    try:
        salary = records.get_salary(record_id)
    except RecordError as e:
        raise click.ClickException(str(e))

    result = compute_tax(salary, rules)

    if output_format == "json":
        click.echo(json.dumps({"id": record_id, **result_to_json(result, rules)}, indent=2))
        return

    label = ((records.get_record(record_id) or {}).get("data") or {}).get("label")
    render_tax_result(Console(), result, rules.year, title=label or f"Record {record_id}")


@records_cli.command("remove")
@click.argument("record_id")
def records_remove(record_id: str):
    """Delete a record by ID."""
    try:
        removed = records.remove_record(record_id)
    except RecordError as e:
        raise click.ClickException(str(e))

    if not removed:
        raise click.ClickException(f"Record not found: {record_id}")
    click.echo(f"Removed: {record_id}")
