"""
EMI (Equated Monthly Installment) Calculations

Implements the fixed monthly installment for an amortizing loan and the
month-by-month schedule behind it.
"""

import math
from dataclasses import dataclass
from typing import List, Dict, Optional
from datetime import date
from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class EmiResult:
    """Monthly installment and totals over the full tenure."""

    emi: float
    total_payment: float
    total_interest: float


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def monthly_to_annual_rate(rate_percent: float) -> float:
    """Convert a monthly rate percentage into the annual rate the calculator expects."""
    return rate_percent * 12


def calculate_emi(
    principal: float, annual_rate_percent: float, tenure_months: int
) -> EmiResult:
    """
    Calculate the equated monthly installment for a loan.

    Args:
        principal: Loan amount in major currency units
        annual_rate_percent: Annual interest rate in percent (e.g., 8.5 for 8.5%)
        tenure_months: Number of monthly installments

    Returns:
        EmiResult with the installment, total payment and total interest.
        Non-finite values never leave this function; each affected field is 0.
        A zero (or vanishingly small) rate repays the principal in equal
        parts with no interest.
    """
    monthly_rate = annual_rate_percent / 100 / 12

    try:
        growth = (1 + monthly_rate) ** tenure_months
        # Rates too small to move the growth factor behave like a zero rate
        if monthly_rate == 0 or growth == 1:
            emi = principal / tenure_months
        else:
            emi = principal * monthly_rate * growth / (growth - 1)
    except (ZeroDivisionError, OverflowError):
        emi = float("nan")

    total_payment = emi * tenure_months
    total_interest = total_payment - principal

    return EmiResult(
        emi=_finite_or_zero(emi),
        total_payment=_finite_or_zero(total_payment),
        total_interest=_finite_or_zero(total_interest),
    )


def generate_emi_schedule(
    principal: float,
    annual_rate_percent: float,
    tenure_months: int,
    start_date: Optional[date] = None,
) -> List[Dict]:
    """
    Generate the month-by-month repayment schedule for an EMI loan.

    Args:
        principal: Loan amount in major currency units
        annual_rate_percent: Annual interest rate in percent
        tenure_months: Number of monthly installments
        start_date: Date of the first installment (rows carry no date if omitted)

    Returns:
        List of schedule rows, one per installment. Empty when no finite
        installment exists for the inputs.
    """
    schedule = []
    balance = principal
    monthly_rate = annual_rate_percent / 100 / 12
    emi = calculate_emi(principal, annual_rate_percent, tenure_months).emi

    if emi <= 0 and principal > 0:
        return schedule

    for period in range(1, tenure_months + 1):
        interest = balance * monthly_rate

        if period == tenure_months:
            # Last installment clears whatever rounding left behind
            principal_pmt = balance
            payment = balance + interest
        else:
            principal_pmt = max(0.0, min(emi - interest, balance))
            payment = principal_pmt + interest

        ending_balance = balance - principal_pmt

        schedule.append(
            {
                "period": period,
                "date": (
                    (start_date + relativedelta(months=period - 1)).isoformat()
                    if start_date
                    else None
                ),
                "beginning_balance": round(balance, 2),
                "emi": round(payment, 2),
                "interest": round(interest, 2),
                "principal": round(principal_pmt, 2),
                "ending_balance": round(max(0, ending_balance), 2),
            }
        )

        balance = max(0.0, ending_balance)

    return schedule


def calculate_total_interest(schedule: List[Dict]) -> float:
    """Calculate total interest paid over the schedule."""
    return sum(row["interest"] for row in schedule)
