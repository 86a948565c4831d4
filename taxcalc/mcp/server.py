"""Tax Calc MCP Server - FastMCP implementation for salary tax tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from taxcalc.sdk import (
    InvalidSalaryError,
    TaxCalculator,
    TaxRulesError,
    effective_rate,
    format_result,
    load_tax_rules,
    marginal_rate,
)
from taxcalc.sdk import records as sdk_records

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("tax-calc")


def _result_payload(calculator: TaxCalculator) -> dict[str, Any]:
    result = calculator.result
    return {
        "tax_year": calculator.rules.year,
        "result": result.model_dump(),
        "formatted": format_result(result),
        "marginal_rate": marginal_rate(result.salary, calculator.rules.federal_brackets),
        "effective_rate": effective_rate(result),
    }


# --- Tools ---

@mcp.tool()
async def compute_tax(
    salary: str = Field(description="Annual gross salary, e.g. '85000' or '$85,000.00'"),
    year: str | None = Field(default=None, description="Tax year (default: configured tax year)"),
) -> dict[str, Any]:
    """Calculate federal tax, Social Security, Medicare and net pay per period for an annual salary."""
    try:
        calculator = TaxCalculator(load_tax_rules(year))
        calculator.update_salary(salary)
        return _result_payload(calculator)

    except (InvalidSalaryError, TaxRulesError) as e:
        return {"error": str(e), "result": None}
    except Exception as e:
        logger.error(f"Error computing tax: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def list_tax_brackets(
    year: str | None = Field(default=None, description="Tax year (default: configured tax year)"),
) -> dict[str, Any]:
    """List federal tax brackets and FICA rates for a tax year."""
    try:
        return load_tax_rules(year).model_dump()
    except TaxRulesError as e:
        return {"error": str(e)}


@mcp.tool()
async def list_salary_records() -> dict[str, Any]:
    """List saved salary records with their IDs, labels and salaries."""
    try:
        formatted = [
            {
                "id": rec["id"],
                "label": (rec.get("data") or {}).get("label"),
                "salary": (rec.get("data") or {}).get("salary"),
                "created_at": rec.get("meta", {}).get("created_at"),
            }
            for rec in sdk_records.list_records()
        ]
        return {"records": formatted, "count": len(formatted)}

    except Exception as e:
        logger.error(f"Error listing records: {e}")
        return {"error": str(e), "records": [], "count": 0}


@mcp.tool()
async def compute_tax_for_record(
    record_id: str = Field(description="The 8-character record ID (from list_salary_records)"),
    year: str | None = Field(default=None, description="Tax year (default: configured tax year)"),
) -> dict[str, Any]:
    """Calculate taxes and net pay for the salary stored in a record."""
    try:
        calculator = TaxCalculator(load_tax_rules(year))
    except TaxRulesError as e:
        return {"error": str(e), "result": None}

    if calculator.load_record(record_id) is None:
        return {"error": f"Record not found or unreadable: {record_id}", "result": None}

    return {"id": record_id, **_result_payload(calculator)}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
