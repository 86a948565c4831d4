"""Display formatting for tax results.

Formatting never mutates or stores alongside the numeric TaxResult; callers
format on demand for presentation.
"""

from typing import Optional

from .taxes.schemas import TaxResult


def format_amount(value: float) -> str:
    """Format an amount with grouping commas and exactly two decimals.

    Example: 1234.5 -> "1,234.50"
    """
    text = f"{value:,.2f}"
    # Tiny negatives (and -0.0) round to "-0.00"
    if text == "-0.00":
        return "0.00"
    return text


def format_result(result: Optional[TaxResult]) -> dict[str, str]:
    """Format every field of a TaxResult for display.

    Args:
        result: Calculation result, or None before any calculation

    Returns:
        Dict of field name -> formatted string ("0.00" for every field if None)
    """
    if result is None:
        return {field: format_amount(0.0) for field in TaxResult.model_fields}
    return {field: format_amount(value) for field, value in result.model_dump().items()}
