"""Canonical test fixtures used across all engine tests.

Fixture: 250K Portuguese rental flat, 120K loan at 4.5% over 30 years,
850/month rent with 5% vacancy.
"""

import pytest
from decimal import Decimal

from propvest.models.deal import FlipTerms, InvestmentInput, InvestmentStrategy, OffPlanTerms


@pytest.fixture
def canonical_deal() -> InvestmentInput:
    """250K buy-to-rent with modest financing."""
    return InvestmentInput(
        property_price=Decimal("250000"),
        assessed_value=Decimal("180000"),
        buy_taxes_imt=Decimal("5000"),
        buy_taxes_is=Decimal("2000"),
        legal_fees=Decimal("3000"),
        loan_amount=Decimal("120000"),
        interest_rate=Decimal("4.5"),
        loan_term_years=Decimal("30"),
        monthly_rent=Decimal("850"),
        vacancy_rate=Decimal("5"),
        property_tax=Decimal("450"),
        insurance=Decimal("300"),
        maintenance=Decimal("1200"),
        management=Decimal("600"),
        strategy=InvestmentStrategy.BUY_TO_RENT,
        target_annual_return=Decimal("5"),
        holding_period_years=Decimal("10"),
    )


@pytest.fixture
def high_yield_deal() -> InvestmentInput:
    """Cash purchase renting at 1.2% of price per month."""
    return InvestmentInput(
        property_price=Decimal("100000"),
        monthly_rent=Decimal("1200"),
        property_tax=Decimal("400"),
        insurance=Decimal("200"),
        maintenance=Decimal("400"),
    )


@pytest.fixture
def flip_deal() -> InvestmentInput:
    return InvestmentInput(
        property_price=Decimal("150000"),
        renovation_budget=Decimal("30000"),
        strategy=InvestmentStrategy.FIX_AND_FLIP,
        flip=FlipTerms(
            sale_price=Decimal("230000"),
            buy_costs_pct=Decimal("6"),
            sell_costs_pct=Decimal("6"),
            holding_months=Decimal("6"),
        ),
    )


@pytest.fixture
def off_plan_deal() -> InvestmentInput:
    return InvestmentInput(
        property_price=Decimal("300000"),
        strategy=InvestmentStrategy.OFF_PLAN,
        holding_period_years=Decimal("2"),
        off_plan=OffPlanTerms(
            deposit=Decimal("30000"),
            installments=Decimal("20000"),
            final_contract_price=Decimal("300000"),
            expected_completion_value=Decimal("340000"),
        ),
    )
