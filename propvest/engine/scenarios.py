"""Optimistic / pessimistic stress tests on rent and maintenance.

Each scenario is a perturbed copy of the deal run through the financing,
tax, cash flow and return steps. The input deal is never modified.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from propvest.config import settings
from propvest.engine.cashflow import project_cash_flow
from propvest.engine.debt import loan_schedule
from propvest.engine.returns import compute_return_metrics
from propvest.engine.tax import TaxAssumptions, estimate_tax
from propvest.models.deal import InvestmentInput
from propvest.models.results import (
    CashFlowBreakdown,
    LoanSchedule,
    ReturnMetrics,
    ScenarioOutcome,
    ScenarioSet,
    TaxEstimate,
)


@dataclass(frozen=True)
class ScenarioFactors:
    rent: Decimal = Decimal("1")
    maintenance: Decimal = Decimal("1")

    @classmethod
    def optimistic(cls) -> "ScenarioFactors":
        return cls(
            rent=settings.optimistic_rent_factor,
            maintenance=settings.optimistic_maintenance_factor,
        )

    @classmethod
    def pessimistic(cls) -> "ScenarioFactors":
        return cls(
            rent=settings.pessimistic_rent_factor,
            maintenance=settings.pessimistic_maintenance_factor,
        )


@dataclass(frozen=True)
class CorePass:
    loan: LoanSchedule
    taxes: TaxEstimate
    cash_flow: CashFlowBreakdown
    returns: ReturnMetrics


def apply_scenario(deal: InvestmentInput, factors: ScenarioFactors) -> InvestmentInput:
    return replace(
        deal,
        monthly_rent=deal.monthly_rent * factors.rent,
        maintenance=deal.maintenance * factors.maintenance,
    )


def run_core(deal: InvestmentInput, tax_assumptions: TaxAssumptions) -> CorePass:
    """Financing -> tax -> cash flow -> returns for one deal."""
    loan = loan_schedule(deal.loan_amount, deal.interest_rate, deal.loan_term_years)
    taxes = estimate_tax(deal, loan.annual_payment, tax_assumptions)
    cash_flow = project_cash_flow(deal, loan, taxes.tax_liability)
    returns = compute_return_metrics(deal, cash_flow)
    return CorePass(loan=loan, taxes=taxes, cash_flow=cash_flow, returns=returns)


def run_scenarios(
    deal: InvestmentInput,
    tax_assumptions: TaxAssumptions,
    optimistic: ScenarioFactors | None = None,
    pessimistic: ScenarioFactors | None = None,
    base: CorePass | None = None,
) -> ScenarioSet:
    optimistic = optimistic or ScenarioFactors.optimistic()
    pessimistic = pessimistic or ScenarioFactors.pessimistic()
    base = base or run_core(deal, tax_assumptions)

    up = run_core(apply_scenario(deal, optimistic), tax_assumptions)
    down = run_core(apply_scenario(deal, pessimistic), tax_assumptions)

    return ScenarioSet(
        base=ScenarioOutcome("Base Case", base.returns.cash_on_cash_return),
        optimistic=ScenarioOutcome("Optimistic", up.returns.cash_on_cash_return),
        pessimistic=ScenarioOutcome("Pessimistic", down.returns.cash_on_cash_return),
    )
