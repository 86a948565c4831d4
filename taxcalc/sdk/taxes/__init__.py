"""taxes - Federal income tax and take-home pay logic.

Scope:
- Federal tax brackets (single table per year)
- Flat-rate FICA (Social Security, Medicare), no wage cap
- Net pay split into yearly, semiannual, monthly, biweekly, weekly periods

Constraints:
- Pure calculation - no records access, no formatting
- Year-specific rules loaded from tax_rules/{year}.yaml

Modules:
- schemas: TaxBracket, TaxRules, TaxResult (frozen pydantic models)
- rules: Tax rules loading (load_tax_rules, get_available_years)
- engine: compute_tax and helpers

Usage:
    from taxcalc.sdk.taxes import compute_tax, load_tax_rules

    result = compute_tax(50000)
    rules = load_tax_rules("2025")
"""

from .schemas import TaxBracket, TaxRules, TaxResult

from .rules import (
    DEFAULT_TAX_YEAR,
    TaxRulesError,
    load_tax_rules,
    get_available_years,
    resolve_tax_year,
)

from .engine import (
    PAY_PERIODS,
    compute_tax,
    calculate_federal_income_tax,
    marginal_rate,
    effective_rate,
    net_pay_for_period,
)

__all__ = [
    # Schemas
    "TaxBracket",
    "TaxRules",
    "TaxResult",
    # Rules
    "DEFAULT_TAX_YEAR",
    "TaxRulesError",
    "load_tax_rules",
    "get_available_years",
    "resolve_tax_year",
    # Engine
    "PAY_PERIODS",
    "compute_tax",
    "calculate_federal_income_tax",
    "marginal_rate",
    "effective_rate",
    "net_pay_for_period",
]
