"""Break-even rent and rent cushion."""

from decimal import Decimal

from propvest.engine.rounding import quantize
from propvest.models.deal import InvestmentInput
from propvest.models.results import BreakEvenResult, CashFlowBreakdown

ZERO = Decimal("0")


def break_even_rent(total_monthly_costs: Decimal, vacancy_rate_pct: Decimal) -> Decimal:
    """Monthly rent that covers costs after vacancy.

    At 100% vacancy or more no rent level can cover costs, so the raw
    monthly cost is returned instead.
    """
    occupancy = 1 - vacancy_rate_pct / 100
    if occupancy <= 0:
        return total_monthly_costs
    return total_monthly_costs / occupancy


def analyze_break_even(
    deal: InvestmentInput,
    cash_flow: CashFlowBreakdown,
    rounded: bool = True,
) -> BreakEvenResult:
    total_monthly_costs = (cash_flow.total_annual_expenses + cash_flow.annual_loan_payment) / 12
    be_rent = break_even_rent(total_monthly_costs, deal.vacancy_rate)
    if rounded:
        be_rent = quantize(be_rent)
    cushion = deal.monthly_rent - be_rent

    if be_rent > 0:
        cushion_pct = cushion / be_rent * 100
        if rounded:
            cushion_pct = quantize(cushion_pct)
    else:
        cushion_pct = ZERO

    return BreakEvenResult(
        break_even_rent=be_rent,
        current_rent=deal.monthly_rent,
        rent_cushion=cushion,
        cushion_percentage=cushion_pct,
    )
