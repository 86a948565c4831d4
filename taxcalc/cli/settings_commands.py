"""Settings CLI commands for Tax Calc.

Manages settings.json - default tax year, data directory.
"""

import click
from pathlib import Path

from taxcalc.sdk import (
    DEFAULT_TAX_YEAR,
    clear_setting,
    get_available_years,
    get_data_path,
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: default tax year for calculations
    - data_dir: custom data directory path
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  tax_year: {current.get('tax_year') or DEFAULT_TAX_YEAR}")
    click.echo(f"  data_dir: {get_data_path()}")


@settings.command("tax-year")
@click.argument("year", required=False)
@click.option("--clear", is_flag=True, help="Clear tax_year, revert to default")
def settings_tax_year(year, clear):
    """Set or clear the default tax year.

    Examples:
        tax-calc settings tax-year 2024
        tax-calc settings tax-year --clear
    """
    if clear:
        if clear_setting("tax_year"):
            click.echo(f"Cleared tax_year setting. Using default: {DEFAULT_TAX_YEAR}")
        else:
            click.echo("tax_year was not set.")
        return

    if not year:
        current = get_setting("tax_year")
        if current:
            click.echo(f"Current tax_year: {current}")
        else:
            click.echo(f"No tax_year set. Using default: {DEFAULT_TAX_YEAR}")
        return

    available = get_available_years()
    if year not in available:
        raise click.BadParameter(
            f"No tax rules for '{year}'. Available: {', '.join(available)}",
            param_hint="YEAR",
        )

    set_setting("tax_year", year)
    click.echo(f"Set tax_year: {year}")


@settings.command("data-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom data_dir, revert to default")
def settings_data_dir(path, clear):
    """Set or clear the custom data directory.

    PATH is the directory where tax-calc stores salary records.

    Examples:
        tax-calc settings data-dir ~/tax-calc-data
        tax-calc settings data-dir --clear
    """
    if clear:
        if clear_setting("data_dir"):
            click.echo("Cleared data_dir setting.")
            click.echo(f"Data directory is now: {get_data_path()} (default)")
        else:
            click.echo("data_dir was not set.")
        return

    if not path:
        current_data_dir = get_setting("data_dir")
        if current_data_dir:
            click.echo(f"Current data_dir: {current_data_dir}")
        else:
            click.echo(f"No custom data_dir set. Using default: {get_data_path()}")
        return

    data_path = Path(path).expanduser().resolve()

    if data_path.exists():
        if not data_path.is_dir():
            raise click.ClickException(f"Path exists but is not a directory: {data_path}")
    else:
        try:
            data_path.mkdir(parents=True, exist_ok=True)
            click.echo(f"Created directory: {data_path}")
        except OSError as e:
            raise click.ClickException(f"Cannot create directory: {data_path}\n{e}")

    set_setting("data_dir", str(data_path))
    click.echo(f"Set data_dir: {data_path}")
    click.echo(f"Saved to: {get_settings_path()}")
