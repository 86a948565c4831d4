"""Federal income tax and take-home pay calculations.

Pure functions over an annual salary and a TaxRules table. Callers that
omit the table get the bundled DEFAULT_TAX_YEAR rules, loaded once and
cached; settings.json is never consulted here.
"""

import logging
from typing import Optional, Sequence

from .rules import DEFAULT_TAX_YEAR, load_tax_rules
from .schemas import TaxBracket, TaxResult, TaxRules

logger = logging.getLogger(__name__)

# Pay periods per year, keyed by the CLI/MCP period name
PAY_PERIODS = {
    "yearly": 1,
    "semiannual": 2,
    "monthly": 12,
    "biweekly": 26,
    "weekly": 52,
}

_PERIOD_FIELDS = {
    "yearly": "annual_net_pay",
    "semiannual": "semi_annual_net_pay",
    "monthly": "monthly_net_pay",
    "biweekly": "bi_weekly_net_pay",
    "weekly": "weekly_net_pay",
}


def calculate_federal_income_tax(salary: float, brackets: Sequence[TaxBracket]) -> float:
    """Calculate federal income tax under progressive brackets.

    Only the slice of salary inside each bracket is taxed at that bracket's
    rate. Brackets must be ordered low to high; iteration stops at the first
    bracket the salary does not reach.
    """
    tax_owed = 0.0
    for bracket in brackets:
        if salary <= bracket.min_earnings:
            break
        income_in_this_bracket = min(salary, bracket.upper) - bracket.min_earnings
        tax_owed += income_in_this_bracket * bracket.rate
    return tax_owed


def marginal_rate(salary: float, brackets: Sequence[TaxBracket]) -> float:
    """Rate applied to the last dollar of salary."""
    rate = brackets[0].rate
    for bracket in brackets:
        if salary <= bracket.min_earnings:
            break
        rate = bracket.rate
    return rate


def compute_tax(salary: Optional[float], rules: Optional[TaxRules] = None) -> TaxResult:
    """Compute federal tax, FICA and per-period net pay for an annual salary.

    Args:
        salary: Gross annual income. None is treated as 0. Negative values
                are not rejected; the result stays arithmetically consistent.
        rules: Tax rules to apply (default: DEFAULT_TAX_YEAR rules)

    Returns:
        Frozen TaxResult
    """
    if rules is None:
        rules = load_tax_rules(DEFAULT_TAX_YEAR)
    if salary is None:
        salary = 0.0
    salary = float(salary)

    federal_tax = calculate_federal_income_tax(salary, rules.federal_brackets)
    social_security_tax = salary * rules.social_security_rate
    medicare_tax = salary * rules.medicare_rate
    total_tax = federal_tax + social_security_tax + medicare_tax

    annual_net_pay = salary - total_tax

    logger.debug(
        f"compute_tax({rules.year}): salary={salary:.2f} fed={federal_tax:.2f} "
        f"ss={social_security_tax:.2f} medicare={medicare_tax:.2f}"
    )

    return TaxResult(
        salary=salary,
        federal_tax=federal_tax,
        social_security_tax=social_security_tax,
        medicare_tax=medicare_tax,
        total_tax=total_tax,
        annual_net_pay=annual_net_pay,
        semi_annual_net_pay=annual_net_pay / PAY_PERIODS["semiannual"],
        monthly_net_pay=annual_net_pay / PAY_PERIODS["monthly"],
        bi_weekly_net_pay=annual_net_pay / PAY_PERIODS["biweekly"],
        weekly_net_pay=annual_net_pay / PAY_PERIODS["weekly"],
    )


def net_pay_for_period(result: TaxResult, period: str) -> float:
    """Get net pay for a named pay period (see PAY_PERIODS)."""
    field = _PERIOD_FIELDS.get(period)
    if field is None:
        raise ValueError(f"Unknown pay period '{period}'. Expected one of: {', '.join(PAY_PERIODS)}")
    return getattr(result, field)


def effective_rate(result: TaxResult) -> float:
    """Total tax as a fraction of salary (0 for a zero salary)."""
    if result.salary == 0:
        return 0.0
    return result.total_tax / result.salary
