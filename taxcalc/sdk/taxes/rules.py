"""Tax rules loading from tax_rules/YYYY.yaml."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .schemas import TaxRules

logger = logging.getLogger(__name__)

DEFAULT_TAX_YEAR = "2025"


class TaxRulesError(Exception):
    """Raised when tax rules for a year are missing or malformed."""
    pass


def _get_tax_rules_dir() -> Path:
    """Get the tax_rules directory path."""
    package_root = Path(__file__).parent.parent.parent  # taxes -> sdk -> taxcalc
    return package_root / "tax_rules"


def get_available_years() -> list[str]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = _get_tax_rules_dir()
    years = [p.stem for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def resolve_tax_year(year: Optional[str] = None) -> str:
    """Resolve the tax year: explicit value, then settings.json, then default.

    An unreadable settings file falls back to DEFAULT_TAX_YEAR with a warning.
    """
    if year:
        return str(year)

    from ..config import get_setting

    try:
        configured = get_setting("tax_year")
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Cannot read settings, using tax year {DEFAULT_TAX_YEAR}: {e}")
        return DEFAULT_TAX_YEAR

    return str(configured or DEFAULT_TAX_YEAR)


def load_tax_rules(year: Optional[str] = None) -> TaxRules:
    """Load and validate tax rules for a year.

    Args:
        year: Tax year (e.g., "2025"). None uses the configured default.

    Returns:
        Frozen TaxRules, shared across callers

    Raises:
        TaxRulesError: If the year has no rules file or the file is invalid
    """
    return _load_tax_rules(resolve_tax_year(year))


@lru_cache(maxsize=None)
def _load_tax_rules(year: str) -> TaxRules:
    config_file = _get_tax_rules_dir() / f"{year}.yaml"
    if not config_file.exists():
        available = ", ".join(get_available_years()) or "none"
        raise TaxRulesError(f"No tax rules for year {year} (available: {available})")

    try:
        with open(config_file, "r") as f:
            raw = yaml.safe_load(f) or {}
        return TaxRules.model_validate(raw)
    except (yaml.YAMLError, ValidationError) as e:
        raise TaxRulesError(f"Invalid tax rules in {config_file.name}: {e}") from e
