"""Pydantic schemas for tax rules and calculation results.

These schemas validate the tax_rules/*.yaml files and provide typed,
immutable access to the bracket table, the FICA rates, and the per-call
calculation result.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaxBracket(BaseModel):
    """Single federal tax bracket: income in (min_earnings, max_earnings] at rate."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    min_earnings: float = Field(..., ge=0, description="Lower bound (exclusive)")
    max_earnings: Optional[float] = Field(default=None, description="Upper bound (None if top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Tax rate as decimal")

    @property
    def upper(self) -> float:
        """Upper bound with the top bracket mapped to infinity."""
        return float("inf") if self.max_earnings is None else self.max_earnings

    @model_validator(mode="after")
    def check_bounds(self) -> "TaxBracket":
        if self.max_earnings is not None and self.max_earnings < self.min_earnings:
            raise ValueError(
                f"max_earnings {self.max_earnings} is below min_earnings {self.min_earnings}"
            )
        return self


class TaxRules(BaseModel):
    """Complete tax rules for a year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: str
    federal_brackets: tuple[TaxBracket, ...] = Field(..., min_length=1)
    social_security_rate: float = Field(..., ge=0, le=1, description="SS tax rate (employee portion)")
    medicare_rate: float = Field(..., ge=0, le=1, description="Medicare tax rate (employee portion)")

    @model_validator(mode="after")
    def check_partition(self) -> "TaxRules":
        # Brackets must cover [0, inf) exactly once, in order
        brackets = self.federal_brackets
        if brackets[0].min_earnings != 0:
            raise ValueError(f"first bracket must start at 0, not {brackets[0].min_earnings}")

        for prev, curr in zip(brackets, brackets[1:]):
            if prev.max_earnings is None:
                raise ValueError("only the last bracket may omit max_earnings")
            if curr.min_earnings != prev.max_earnings:
                kind = "gap" if curr.min_earnings > prev.max_earnings else "overlap"
                raise ValueError(
                    f"bracket {kind}: {prev.max_earnings} -> {curr.min_earnings}"
                )

        if brackets[-1].max_earnings is not None:
            raise ValueError("last bracket must be unbounded (omit max_earnings)")
        return self


class TaxResult(BaseModel):
    """Taxes and net pay for one annual salary.

    Net pay fields may be negative when taxes exceed salary.
    """
    model_config = ConfigDict(frozen=True)

    salary: float
    federal_tax: float
    social_security_tax: float
    medicare_tax: float
    total_tax: float
    annual_net_pay: float
    semi_annual_net_pay: float
    monthly_net_pay: float
    bi_weekly_net_pay: float
    weekly_net_pay: float
