"""Per-strategy profit models.

Each strategy turns the shared InvestmentInput into its own outcome shape.
New strategies register a model in STRATEGY_MODELS; dispatch never
branches on the strategy value.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from propvest.engine.rounding import quantize
from propvest.models.deal import InvestmentInput, InvestmentStrategy
from propvest.models.results import FlipOutcome, OffPlanOutcome, RentalOutcome, StrategyOutcome

ZERO = Decimal("0")
ONE_MONTH = Decimal("1")


def _ratio_pct(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator <= 0:
        return ZERO
    return numerator / denominator * 100


def _round(value: Decimal) -> Decimal:
    return quantize(value)


class StrategyModel(ABC):
    @abstractmethod
    def compute(self, deal: InvestmentInput) -> StrategyOutcome:
        ...


class BuyToRentModel(StrategyModel):
    """Income strategy: yields and cash-on-cash on rent before financing.

    Used for buy-to-rent, buy-to-hold, and mixed deals.
    """

    def compute(self, deal: InvestmentInput) -> RentalOutcome:
        price = deal.property_price
        annual_rent = deal.monthly_rent * 12
        fixed_costs = deal.property_tax + deal.insurance
        vacancy = annual_rent * deal.vacancy_rate / 100
        net_income = annual_rent - fixed_costs - deal.maintenance - vacancy

        equity = price - deal.loan_to_value * price
        coc = _round(_ratio_pct(net_income, equity))

        return RentalOutcome(
            strategy=deal.strategy,
            capital_committed=_round(max(ZERO, equity)),
            profit=_round(net_income),
            roi_pct=coc,
            annualized_roi_pct=coc,
            total_investment=deal.total_investment,
            gross_yield_pct=_round(_ratio_pct(annual_rent, price)),
            net_yield_pct=_round(_ratio_pct(net_income, price)),
            cash_on_cash_pct=coc,
        )


class FixAndFlipModel(StrategyModel):
    """Buy, renovate, resell. Purchase and rehab come from the deal itself."""

    def compute(self, deal: InvestmentInput) -> FlipOutcome:
        terms = deal.flip
        purchase = deal.property_price
        buy_costs = purchase * terms.buy_costs_pct / 100
        sell_costs = terms.sale_price * terms.sell_costs_pct / 100
        total_cost = purchase + deal.renovation_budget + buy_costs
        profit = terms.sale_price - sell_costs - total_cost

        months = terms.holding_months if terms.holding_months >= ONE_MONTH else ONE_MONTH
        roi = _ratio_pct(profit, total_cost)

        return FlipOutcome(
            strategy=deal.strategy,
            capital_committed=_round(total_cost),
            profit=_round(profit),
            roi_pct=_round(roi),
            annualized_roi_pct=_round(roi * 12 / months),
            buy_costs=_round(buy_costs),
            sell_costs=_round(sell_costs),
            total_cost=_round(total_cost),
            holding_months=months,
        )


class OffPlanModel(StrategyModel):
    """Pre-construction purchase.

    Profit is floored at zero: a completion value below the contract price
    is reported as no gain. The unfloored figure is kept in `margin`.
    A missing final contract price counts as zero.
    """

    def compute(self, deal: InvestmentInput) -> OffPlanOutcome:
        terms = deal.off_plan
        total_cash = terms.deposit + terms.installments
        contract_price = terms.final_contract_price
        margin = terms.expected_completion_value - contract_price
        profit = max(ZERO, margin)

        roi = _ratio_pct(profit, total_cash)
        if deal.holding_period_years > 0:
            annualized = roi / deal.holding_period_years
        else:
            annualized = roi

        return OffPlanOutcome(
            strategy=deal.strategy,
            capital_committed=_round(total_cash),
            profit=_round(profit),
            roi_pct=_round(roi),
            annualized_roi_pct=_round(annualized),
            margin=_round(margin),
        )


_RENTAL = BuyToRentModel()

STRATEGY_MODELS: dict[InvestmentStrategy, StrategyModel] = {
    InvestmentStrategy.BUY_TO_RENT: _RENTAL,
    InvestmentStrategy.BUY_TO_HOLD: _RENTAL,
    InvestmentStrategy.MIXED: _RENTAL,
    InvestmentStrategy.FIX_AND_FLIP: FixAndFlipModel(),
    InvestmentStrategy.OFF_PLAN: OffPlanModel(),
}


def model_for(strategy: InvestmentStrategy) -> StrategyModel:
    return STRATEGY_MODELS.get(strategy, _RENTAL)


def evaluate_strategy(deal: InvestmentInput) -> StrategyOutcome:
    return model_for(deal.strategy).compute(deal)
