"""
Compound Interest Calculations

Future value of a lump sum compounded n times a year, plus an optional
recurring monthly contribution.
"""

import math
from dataclasses import dataclass

# Compounding presets offered to callers; any positive integer is accepted.
COMPOUNDING_FREQUENCIES = {
    "annually": 1,
    "semi_annually": 2,
    "quarterly": 4,
    "monthly": 12,
    "daily": 365,
}


@dataclass(frozen=True)
class CompoundInterestResult:
    """Future value split into interest earned and money paid in."""

    future_value: float
    total_interest: float
    total_contributions: float


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def calculate_contributions_future_value(
    monthly_contribution: float, annual_rate: float, years: float
) -> float:
    """
    Future value of an ordinary annuity of monthly contributions.

    Contributions always compound monthly, independent of the compounding
    frequency applied to the principal.

    Args:
        monthly_contribution: Amount paid in at the end of every month
        annual_rate: Annual rate as decimal (e.g., 0.05 for 5%)
        years: Investment term in years
    """
    if monthly_contribution <= 0:
        return 0.0

    monthly_rate = annual_rate / 12
    months = years * 12

    if monthly_rate == 0:
        return monthly_contribution * months

    return monthly_contribution * (((1 + monthly_rate) ** months - 1) / monthly_rate)


def calculate_compound_interest(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounding_frequency: int,
    monthly_contribution: float = 0.0,
) -> CompoundInterestResult:
    """
    Calculate the future value of an investment.

    Args:
        principal: Initial amount in major currency units
        annual_rate_percent: Annual interest rate in percent (e.g., 5 for 5%)
        years: Investment term in years (fractions allowed)
        compounding_frequency: Times per year interest is capitalized
        monthly_contribution: Optional amount added at the end of each month

    Returns:
        CompoundInterestResult. Inputs are not re-validated here; a field
        that comes out non-finite is reported as 0.
    """
    r = annual_rate_percent / 100
    n = compounding_frequency
    t = years

    try:
        fv_principal = principal * (1 + r / n) ** (n * t)
        fv_contributions = calculate_contributions_future_value(
            monthly_contribution, r, t
        )
    except (ZeroDivisionError, OverflowError):
        fv_principal, fv_contributions = float("nan"), 0.0

    future_value = fv_principal + fv_contributions
    total_contributions = monthly_contribution * years * 12
    total_interest = future_value - principal - total_contributions

    return CompoundInterestResult(
        future_value=_finite_or_zero(future_value),
        total_interest=_finite_or_zero(total_interest),
        total_contributions=_finite_or_zero(total_contributions),
    )
