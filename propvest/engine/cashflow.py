"""Annual cash flow: rent, vacancy, operating expenses, NOI, debt service.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from propvest.engine.rounding import quantize
from propvest.models.deal import InvestmentInput
from propvest.models.results import CashFlowBreakdown, LoanSchedule

ZERO = Decimal("0")


def gross_annual_rent(deal: InvestmentInput) -> Decimal:
    return deal.monthly_rent * 12


def vacancy_loss(deal: InvestmentInput) -> Decimal:
    return quantize(gross_annual_rent(deal) * deal.vacancy_rate / 100)


def net_annual_rent(deal: InvestmentInput) -> Decimal:
    return gross_annual_rent(deal) - vacancy_loss(deal)


def total_operating_expenses(deal: InvestmentInput) -> Decimal:
    return deal.property_tax + deal.insurance + deal.maintenance + deal.management


def noi(deal: InvestmentInput) -> Decimal:
    """Net Operating Income = net rent - operating expenses."""
    return net_annual_rent(deal) - total_operating_expenses(deal)


def project_cash_flow(
    deal: InvestmentInput,
    loan: LoanSchedule,
    tax_liability: Decimal = ZERO,
) -> CashFlowBreakdown:
    """Year-one cash flow breakdown.

    Negative cash flow is a normal outcome, not an error.
    """
    year_noi = noi(deal)
    cfbt = year_noi - loan.annual_payment
    return CashFlowBreakdown(
        gross_annual_rent=gross_annual_rent(deal),
        vacancy_loss=vacancy_loss(deal),
        net_annual_rent=net_annual_rent(deal),
        total_annual_expenses=total_operating_expenses(deal),
        noi=year_noi,
        annual_loan_payment=loan.annual_payment,
        cash_flow_before_tax=cfbt,
        tax_liability=tax_liability,
        cash_flow_after_tax=cfbt - tax_liability,
    )
