"""Compare a deal's return against the investor's target."""

from decimal import Decimal

from propvest.engine.rounding import quantize
from propvest.models.deal import InvestmentInput
from propvest.models.results import (
    CashFlowBreakdown,
    GoalAssessment,
    RentalOutcome,
    ReturnMetrics,
    StrategyOutcome,
)

ZERO = Decimal("0")


def assess_goals(
    deal: InvestmentInput,
    outcome: StrategyOutcome,
    returns: ReturnMetrics,
    cash_flow: CashFlowBreakdown,
) -> GoalAssessment:
    """Income deals are judged on after-tax cash-on-cash; exits on annualized ROI.

    A zero target is always met.
    """
    if isinstance(outcome, RentalOutcome):
        achieved = returns.cash_on_cash_return
        projected = cash_flow.cash_flow_after_tax * deal.holding_period_years
    else:
        achieved = outcome.annualized_roi_pct
        projected = outcome.profit

    target = deal.target_annual_return
    meets = target <= 0 or achieved >= target
    shortfall = ZERO if meets else target - achieved

    return GoalAssessment(
        target_annual_return=target,
        achieved_annual_return=achieved,
        meets_target=meets,
        return_shortfall=shortfall,
        holding_period_years=deal.holding_period_years,
        projected_cash_flow=quantize(projected),
    )
