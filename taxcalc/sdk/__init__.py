"""Tax Calc SDK - Core functionality for salary tax calculations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_data_path,
)

from .taxes import (
    TaxBracket,
    TaxRules,
    TaxResult,
    TaxRulesError,
    DEFAULT_TAX_YEAR,
    PAY_PERIODS,
    load_tax_rules,
    get_available_years,
    compute_tax,
    calculate_federal_income_tax,
    marginal_rate,
    effective_rate,
    net_pay_for_period,
)

from .salary import InvalidSalaryError, parse_salary

from .formatting import format_amount, format_result

from .records import RecordError, RecordNotFoundError

from .calculator import TaxCalculator

from . import records

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_data_path",
    # Tax
    "TaxBracket",
    "TaxRules",
    "TaxResult",
    "TaxRulesError",
    "DEFAULT_TAX_YEAR",
    "PAY_PERIODS",
    "load_tax_rules",
    "get_available_years",
    "compute_tax",
    "calculate_federal_income_tax",
    "marginal_rate",
    "effective_rate",
    "net_pay_for_period",
    # Input and display
    "InvalidSalaryError",
    "parse_salary",
    "format_amount",
    "format_result",
    # Records
    "RecordError",
    "RecordNotFoundError",
    "records",
    # Session
    "TaxCalculator",
]
