"""Salary input parsing.

Raw salary values arrive from CLI arguments, MCP tool calls and record
files. They are validated here, once, before reaching the tax engine.
"""

import math
from typing import Any


class InvalidSalaryError(ValueError):
    """Raised when a raw salary value is not a finite number."""

    def __init__(self, raw: Any):
        self.raw = raw
        super().__init__(f"Invalid salary: {raw!r} (expected a number, e.g. 85000 or $85,000.00)")


def parse_salary(raw: Any) -> float:
    """Parse a raw salary value into a float.

    Empty input (None, "", whitespace) is treated as 0. Strings may include
    a leading "$", grouping commas and surrounding whitespace.

    Args:
        raw: Number or string from user input

    Returns:
        Salary as float

    Raises:
        InvalidSalaryError: If the value is not numeric or not finite
    """
    if raw is None:
        return 0.0

    # bool is an int subclass; True is not a salary
    if isinstance(raw, bool):
        raise InvalidSalaryError(raw)

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0.0
        negative = text.startswith("-")
        if negative:
            text = text[1:].lstrip()
        text = text.lstrip("$").replace(",", "").strip()
        if negative and text[:1] in ("+", "-"):
            raise InvalidSalaryError(raw)
        try:
            value = float(text)
        except ValueError:
            raise InvalidSalaryError(raw) from None
        if negative:
            value = -value
    else:
        raise InvalidSalaryError(raw)

    if not math.isfinite(value):
        raise InvalidSalaryError(raw)
    return value
