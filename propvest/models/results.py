from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from propvest.models.deal import InvestmentStrategy

ZERO = Decimal("0")


@dataclass(frozen=True)
class LoanSchedule:
    principal: Decimal = ZERO
    monthly_payment: Decimal = ZERO
    annual_payment: Decimal = ZERO
    total_interest: Decimal = ZERO
    total_paid: Decimal = ZERO


@dataclass(frozen=True)
class CashFlowBreakdown:
    # Income
    gross_annual_rent: Decimal = ZERO
    vacancy_loss: Decimal = ZERO
    net_annual_rent: Decimal = ZERO

    # Expenses
    total_annual_expenses: Decimal = ZERO

    # Operations
    noi: Decimal = ZERO
    annual_loan_payment: Decimal = ZERO
    cash_flow_before_tax: Decimal = ZERO

    # Tax
    tax_liability: Decimal = ZERO
    cash_flow_after_tax: Decimal = ZERO


@dataclass(frozen=True)
class TaxEstimate:
    """Approximate rental tax position. Not a tax-law computation."""
    deductible_expenses: Decimal = ZERO
    taxable_income: Decimal = ZERO
    tax_liability: Decimal = ZERO
    tax_savings: Decimal = ZERO
    effective_income: Decimal = ZERO  # NOI - tax liability
    first_year_interest: Decimal = ZERO  # From the amortization, informational


@dataclass(frozen=True)
class ReturnMetrics:
    cash_on_cash_return: Decimal = ZERO  # %
    cap_rate: Decimal = ZERO  # %
    gross_rent_multiplier: Decimal = ZERO  # ratio
    one_percent_rule: Decimal = ZERO  # %
    total_roi: Decimal = ZERO  # %


@dataclass(frozen=True)
class BreakEvenResult:
    break_even_rent: Decimal = ZERO  # Monthly
    current_rent: Decimal = ZERO
    rent_cushion: Decimal = ZERO
    cushion_percentage: Decimal = ZERO

    @property
    def is_positive(self) -> bool:
        return self.rent_cushion > 0


@dataclass(frozen=True)
class ScenarioOutcome:
    name: str
    cash_on_cash_return: Decimal


@dataclass(frozen=True)
class ScenarioSet:
    base: ScenarioOutcome
    optimistic: ScenarioOutcome
    pessimistic: ScenarioOutcome


class Grade(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


@dataclass(frozen=True)
class InvestmentScore:
    score: int
    grade: Grade
    recommendation: str


@dataclass(frozen=True)
class StrategyOutcome:
    strategy: InvestmentStrategy
    capital_committed: Decimal
    profit: Decimal
    roi_pct: Decimal
    annualized_roi_pct: Decimal


@dataclass(frozen=True)
class RentalOutcome(StrategyOutcome):
    total_investment: Decimal
    gross_yield_pct: Decimal
    net_yield_pct: Decimal
    cash_on_cash_pct: Decimal


@dataclass(frozen=True)
class FlipOutcome(StrategyOutcome):
    buy_costs: Decimal
    sell_costs: Decimal
    total_cost: Decimal
    holding_months: Decimal


@dataclass(frozen=True)
class OffPlanOutcome(StrategyOutcome):
    # Expected value minus contract price before the zero floor on profit
    margin: Decimal


@dataclass(frozen=True)
class GoalAssessment:
    target_annual_return: Decimal
    achieved_annual_return: Decimal
    meets_target: bool
    return_shortfall: Decimal  # Percentage points below target, 0 if met
    holding_period_years: Decimal
    projected_cash_flow: Decimal  # After-tax cash flow over the holding period


@dataclass(frozen=True)
class AnalysisResult:
    total_investment: Decimal
    down_payment: Decimal
    cash_flow: CashFlowBreakdown
    returns: ReturnMetrics
    loan: LoanSchedule
    taxes: TaxEstimate
    break_even: BreakEvenResult
    scenarios: ScenarioSet
    score: InvestmentScore
    strategy: StrategyOutcome
    goals: GoalAssessment
