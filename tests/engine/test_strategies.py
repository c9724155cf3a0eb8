from dataclasses import replace
from decimal import Decimal

from propvest.engine.strategies import (
    STRATEGY_MODELS,
    BuyToRentModel,
    FixAndFlipModel,
    OffPlanModel,
    evaluate_strategy,
    model_for,
)
from propvest.models.deal import FlipTerms, InvestmentInput, InvestmentStrategy, OffPlanTerms
from propvest.models.results import FlipOutcome, OffPlanOutcome, RentalOutcome


class TestDispatch:
    def test_every_strategy_registered(self):
        for strategy in InvestmentStrategy:
            assert strategy in STRATEGY_MODELS

    def test_rental_aliases(self):
        assert isinstance(model_for(InvestmentStrategy.BUY_TO_HOLD), BuyToRentModel)
        assert isinstance(model_for(InvestmentStrategy.MIXED), BuyToRentModel)

    def test_exit_strategies(self):
        assert isinstance(model_for(InvestmentStrategy.FIX_AND_FLIP), FixAndFlipModel)
        assert isinstance(model_for(InvestmentStrategy.OFF_PLAN), OffPlanModel)

    def test_outcome_keeps_strategy(self, canonical_deal):
        hold = replace(canonical_deal, strategy=InvestmentStrategy.BUY_TO_HOLD)
        outcome = evaluate_strategy(hold)
        assert isinstance(outcome, RentalOutcome)
        assert outcome.strategy == InvestmentStrategy.BUY_TO_HOLD


class TestBuyToRent:
    def test_canonical(self, canonical_deal):
        outcome = evaluate_strategy(canonical_deal)
        assert outcome.total_investment == Decimal("260000")
        # 10200 / 250000
        assert outcome.gross_yield_pct == Decimal("4.08")
        # 10200 - 750 - 1200 - 510 = 7740
        assert outcome.profit == Decimal("7740.00")
        assert outcome.net_yield_pct == Decimal("3.10")
        # equity = 250000 - 0.48 * 250000
        assert outcome.capital_committed == Decimal("130000.00")
        assert outcome.cash_on_cash_pct == Decimal("5.95")
        assert outcome.roi_pct == outcome.annualized_roi_pct == outcome.cash_on_cash_pct

    def test_total_investment_sums_acquisition_costs(self):
        deal = InvestmentInput(
            property_price=Decimal("250000"),
            buy_taxes_imt=Decimal("5000"),
            buy_taxes_is=Decimal("2000"),
            legal_fees=Decimal("3000"),
        )
        assert evaluate_strategy(deal).total_investment == Decimal("260000")

    def test_fully_financed_has_no_cash_on_cash(self):
        deal = InvestmentInput(
            property_price=Decimal("100000"),
            loan_amount=Decimal("100000"),
            monthly_rent=Decimal("800"),
        )
        outcome = evaluate_strategy(deal)
        assert outcome.cash_on_cash_pct == 0
        assert outcome.capital_committed == 0

    def test_empty_deal(self):
        outcome = evaluate_strategy(InvestmentInput())
        assert outcome.gross_yield_pct == 0
        assert outcome.net_yield_pct == 0
        assert outcome.cash_on_cash_pct == 0


class TestFixAndFlip:
    def test_reference_deal(self, flip_deal):
        outcome = evaluate_strategy(flip_deal)
        assert isinstance(outcome, FlipOutcome)
        assert outcome.buy_costs == Decimal("9000.00")
        assert outcome.sell_costs == Decimal("13800.00")
        assert outcome.total_cost == Decimal("189000.00")
        assert outcome.profit == Decimal("27200.00")
        assert outcome.roi_pct == Decimal("14.39")
        assert outcome.annualized_roi_pct == Decimal("28.78")

    def test_missing_months_treated_as_one(self, flip_deal):
        deal = replace(flip_deal, flip=replace(flip_deal.flip, holding_months=Decimal("0")))
        outcome = evaluate_strategy(deal)
        assert outcome.holding_months == Decimal("1")
        assert outcome.annualized_roi_pct == Decimal("172.70")

    def test_loss(self, flip_deal):
        deal = replace(flip_deal, flip=replace(flip_deal.flip, sale_price=Decimal("180000")))
        outcome = evaluate_strategy(deal)
        assert outcome.profit < 0
        assert outcome.roi_pct < 0

    def test_empty_terms(self):
        deal = InvestmentInput(strategy=InvestmentStrategy.FIX_AND_FLIP, flip=FlipTerms())
        outcome = evaluate_strategy(deal)
        assert outcome.profit == 0
        assert outcome.roi_pct == 0
        assert outcome.annualized_roi_pct == 0


class TestOffPlan:
    def test_gain(self, off_plan_deal):
        outcome = evaluate_strategy(off_plan_deal)
        assert isinstance(outcome, OffPlanOutcome)
        assert outcome.capital_committed == Decimal("50000.00")
        assert outcome.profit == Decimal("40000.00")
        assert outcome.margin == Decimal("40000.00")
        assert outcome.roi_pct == Decimal("80.00")
        assert outcome.annualized_roi_pct == Decimal("40.00")

    def test_loss_floored_at_zero(self, off_plan_deal):
        terms = replace(off_plan_deal.off_plan, expected_completion_value=Decimal("280000"))
        outcome = evaluate_strategy(replace(off_plan_deal, off_plan=terms))
        assert outcome.profit == 0
        assert outcome.roi_pct == 0
        assert outcome.margin == Decimal("-20000.00")

    def test_missing_contract_price_counts_as_zero(self, off_plan_deal):
        terms = replace(off_plan_deal.off_plan, final_contract_price=Decimal("0"))
        outcome = evaluate_strategy(replace(off_plan_deal, off_plan=terms))
        # property_price is not substituted
        assert outcome.profit == Decimal("340000.00")
        assert outcome.margin == Decimal("340000.00")

    def test_no_cash_committed(self):
        deal = InvestmentInput(
            strategy=InvestmentStrategy.OFF_PLAN,
            off_plan=OffPlanTerms(expected_completion_value=Decimal("10000")),
        )
        outcome = evaluate_strategy(deal)
        assert outcome.profit == Decimal("10000.00")
        assert outcome.roi_pct == 0
