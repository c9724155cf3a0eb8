"""Loan amortization.

Pure functions: Decimal in, dataclass out. No I/O.
Rates are annual percentages (4.5 means 4.5%).
"""

from decimal import Decimal, Overflow

from propvest.engine.rounding import quantize
from propvest.models.results import LoanSchedule

ZERO = Decimal("0")


def _monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return annual_rate_pct / 100 / 12


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, term_years: Decimal) -> Decimal:
    """Fixed monthly payment. Zero principal, rate or term yields zero."""
    if principal <= 0 or annual_rate_pct <= 0 or term_years <= 0:
        return ZERO

    i = _monthly_rate(annual_rate_pct)
    n = term_years * 12
    try:
        # M = P * [i(1+i)^n] / [(1+i)^n - 1]
        factor = (1 + i) ** n
        denominator = factor - 1
        if denominator == 0:
            return ZERO
        payment = principal * (i * factor) / denominator
    except Overflow:
        # (1+i)^n beyond Decimal range: the payment has converged to interest only
        payment = principal * i
    return quantize(payment)


def loan_schedule(principal: Decimal, annual_rate_pct: Decimal, term_years: Decimal) -> LoanSchedule:
    """Payment aggregates over the full loan term."""
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    if pmt == 0:
        return LoanSchedule()

    total_paid = quantize(pmt * term_years * 12)
    total_interest = max(ZERO, total_paid - principal)
    return LoanSchedule(
        principal=principal,
        monthly_payment=pmt,
        annual_payment=pmt * 12,
        total_interest=total_interest,
        total_paid=total_paid,
    )


def remaining_balance(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: Decimal,
    payments_made: int,
) -> Decimal:
    """Outstanding principal after a number of monthly payments.

    B_k = P(1+i)^k - M[(1+i)^k - 1] / i, floored at zero.
    """
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    if pmt == 0:
        return ZERO
    k = min(Decimal(payments_made), term_years * 12)
    if k <= 0:
        return principal

    i = _monthly_rate(annual_rate_pct)
    growth = (1 + i) ** k
    balance = principal * growth - pmt * (growth - 1) / i
    return quantize(max(ZERO, balance))


def interest_paid(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: Decimal,
    months: int,
) -> Decimal:
    """Interest portion of the first `months` payments."""
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    if pmt == 0 or months <= 0:
        return ZERO
    k = min(Decimal(months), term_years * 12)
    principal_repaid = principal - remaining_balance(principal, annual_rate_pct, term_years, months)
    return quantize(max(ZERO, pmt * k - principal_repaid))


def first_year_interest(principal: Decimal, annual_rate_pct: Decimal, term_years: Decimal) -> Decimal:
    return interest_paid(principal, annual_rate_pct, term_years, 12)
