"""Interactive tax calculator session.

Holds the most recent TaxResult for a caller that loads a salary from a
record and then recalculates on every edit. The result is replaced whole on
each successful calculation; failed loads and invalid edits leave it as is.
"""

import logging
from typing import Any, Optional

from . import records
from .formatting import format_result
from .salary import parse_salary
from .taxes import TaxResult, TaxRules, compute_tax, load_tax_rules

logger = logging.getLogger(__name__)


class TaxCalculator:
    """Stateful wrapper around compute_tax for one salary being edited."""

    def __init__(self, rules: Optional[TaxRules] = None):
        self.rules = rules if rules is not None else load_tax_rules()
        self.result: Optional[TaxResult] = None
        self.record_id: Optional[str] = None

    def calculate(self, salary: float) -> TaxResult:
        """Compute and store the result for an already-parsed salary."""
        self.result = compute_tax(salary, self.rules)
        return self.result

    def load_record(self, record_id: str) -> Optional[TaxResult]:
        """Calculate from the salary stored in a record.

        Returns:
            The new result, or None if the record could not be read (the
            previous result is kept)
        """
        try:
            salary = records.get_salary(record_id)
        except records.RecordError as e:
            logger.error(f"Error retrieving record {record_id}: {e}")
            return None

        self.record_id = record_id
        return self.calculate(salary)

    def update_salary(self, raw: Any) -> TaxResult:
        """Recalculate from a user-edited salary value.

        Raises:
            InvalidSalaryError: If raw is not numeric (previous result is kept)
        """
        salary = parse_salary(raw)
        logger.debug(f"salary updated: {raw!r} -> {salary}")
        return self.calculate(salary)

    def formatted(self) -> dict[str, str]:
        """Current result formatted for display."""
        return format_result(self.result)
