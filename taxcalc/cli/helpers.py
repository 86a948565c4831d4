"""Shared helpers for CLI commands."""

import click

from taxcalc.sdk import TaxRulesError, effective_rate, load_tax_rules, marginal_rate


def load_rules_or_fail(year):
    """Load tax rules, converting errors to a CLI error."""
    try:
        return load_tax_rules(year)
    except TaxRulesError as e:
        raise click.ClickException(str(e))


def result_to_json(result, rules) -> dict:
    """Build the JSON payload shared by `calc` and `records calc`."""
    return {
        "tax_year": rules.year,
        **result.model_dump(),
        "marginal_rate": marginal_rate(result.salary, rules.federal_brackets),
        "effective_rate": effective_rate(result),
    }
