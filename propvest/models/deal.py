from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0")


class InvestmentStrategy(Enum):
    BUY_TO_RENT = "buy-to-rent"
    BUY_TO_HOLD = "buy-to-hold"
    FIX_AND_FLIP = "fix-and-flip"
    OFF_PLAN = "off-plan"
    MIXED = "mixed"


@dataclass(frozen=True)
class FlipTerms:
    """Exit assumptions for a fix-and-flip deal.

    Purchase price and rehab budget come from the parent InvestmentInput.
    """
    sale_price: Decimal = ZERO
    buy_costs_pct: Decimal = ZERO  # % of purchase price
    sell_costs_pct: Decimal = ZERO  # % of sale price
    holding_months: Decimal = ZERO


@dataclass(frozen=True)
class OffPlanTerms:
    deposit: Decimal = ZERO
    installments: Decimal = ZERO  # Sum of stage payments before completion
    final_contract_price: Decimal = ZERO
    expected_completion_value: Decimal = ZERO


@dataclass(frozen=True)
class InvestmentInput:
    # Acquisition
    property_price: Decimal = ZERO
    assessed_value: Decimal = ZERO  # Taxable value (VPT)
    buy_taxes_imt: Decimal = ZERO  # Property transfer tax
    buy_taxes_is: Decimal = ZERO  # Stamp duty
    legal_fees: Decimal = ZERO  # Legal + notary
    renovation_budget: Decimal = ZERO
    emergency_fund: Decimal = ZERO

    # Financing
    loan_amount: Decimal = ZERO
    interest_rate: Decimal = ZERO  # Annual, percent (4.5 = 4.5%)
    loan_term_years: Decimal = ZERO
    own_capital: Decimal = ZERO

    # Income
    monthly_rent: Decimal = ZERO
    vacancy_rate: Decimal = ZERO  # Percent

    # Annual operating costs
    property_tax: Decimal = ZERO
    insurance: Decimal = ZERO
    maintenance: Decimal = ZERO
    management: Decimal = ZERO

    strategy: InvestmentStrategy = InvestmentStrategy.BUY_TO_RENT

    # Goals
    target_annual_return: Decimal = ZERO  # Percent
    holding_period_years: Decimal = ZERO

    flip: FlipTerms = field(default_factory=FlipTerms)
    off_plan: OffPlanTerms = field(default_factory=OffPlanTerms)

    @property
    def total_investment(self) -> Decimal:
        return (
            self.property_price
            + self.buy_taxes_imt
            + self.buy_taxes_is
            + self.legal_fees
            + self.renovation_budget
            + self.emergency_fund
        )

    @property
    def down_payment(self) -> Decimal:
        """Cash the investor puts in: everything the loan does not cover.

        own_capital is informational and never overrides this.
        """
        return max(ZERO, self.total_investment - self.loan_amount)

    @property
    def loan_to_value(self) -> Decimal:
        """Loan as a fraction of purchase price (0 when there is no price)."""
        if self.property_price <= 0:
            return ZERO
        return self.loan_amount / self.property_price
