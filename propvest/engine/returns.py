"""Return metrics: cash-on-cash, cap rate, GRM, 1% rule, total ROI.

Every ratio returns 0 when its denominator is not positive.
"""

from decimal import Decimal

from propvest.engine.rounding import quantize
from propvest.models.deal import InvestmentInput
from propvest.models.results import CashFlowBreakdown, ReturnMetrics

ZERO = Decimal("0")


def _pct(numerator: Decimal, denominator: Decimal, rounded: bool = True) -> Decimal:
    if denominator <= 0:
        return ZERO
    pct = numerator / denominator * 100
    return quantize(pct) if rounded else pct


def gross_rent_multiplier(price: Decimal, gross_annual_rent: Decimal, rounded: bool = True) -> Decimal:
    if gross_annual_rent <= 0:
        return ZERO
    grm = price / gross_annual_rent
    return quantize(grm) if rounded else grm


def compute_return_metrics(
    deal: InvestmentInput,
    cash_flow: CashFlowBreakdown,
    rounded: bool = True,
) -> ReturnMetrics:
    """Year-one ratios, in percent except the GRM.

    With rounded=False the ratios keep full precision, which is what the
    scorer compares against its thresholds.
    """
    price = deal.property_price
    return ReturnMetrics(
        cash_on_cash_return=_pct(cash_flow.cash_flow_after_tax, deal.down_payment, rounded),
        cap_rate=_pct(cash_flow.noi, price, rounded),
        gross_rent_multiplier=gross_rent_multiplier(price, cash_flow.gross_annual_rent, rounded),
        one_percent_rule=_pct(deal.monthly_rent, price, rounded),
        total_roi=_pct(cash_flow.cash_flow_after_tax, deal.total_investment, rounded),
    )
