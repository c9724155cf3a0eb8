"""Analysis orchestrator: composes all engine sub-modules into one result.

Pure computation. No I/O. Deal in, AnalysisResult out. The same deal
always produces an equal result.
"""

import logging
from typing import Any, Mapping

from propvest.engine.breakeven import analyze_break_even
from propvest.engine.goals import assess_goals
from propvest.engine.returns import compute_return_metrics
from propvest.engine.scenarios import ScenarioFactors, run_core, run_scenarios
from propvest.engine.scoring import score_investment
from propvest.engine.strategies import evaluate_strategy
from propvest.engine.tax import TaxAssumptions
from propvest.models.deal import InvestmentInput
from propvest.models.results import AnalysisResult
from propvest.models.schemas import DealInputSchema, normalize_input

logger = logging.getLogger(__name__)


def analyze(
    deal: InvestmentInput | DealInputSchema | Mapping[str, Any],
    tax_assumptions: TaxAssumptions | None = None,
    optimistic: ScenarioFactors | None = None,
    pessimistic: ScenarioFactors | None = None,
) -> AnalysisResult:
    """Run the complete analysis for one deal.

    Missing or blank numbers count as zero, so partial input yields
    degenerate (zero) figures rather than an error.
    """
    deal = normalize_input(deal)
    tax_assumptions = tax_assumptions or TaxAssumptions.from_settings()

    core = run_core(deal, tax_assumptions)
    break_even = analyze_break_even(deal, core.cash_flow)
    scenarios = run_scenarios(
        deal,
        tax_assumptions,
        optimistic=optimistic,
        pessimistic=pessimistic,
        base=core,
    )
    score = score_investment(
        compute_return_metrics(deal, core.cash_flow, rounded=False),
        analyze_break_even(deal, core.cash_flow, rounded=False),
    )
    outcome = evaluate_strategy(deal)
    goals = assess_goals(deal, outcome, core.returns, core.cash_flow)

    logger.debug(
        "Analyzed %s deal: score=%d grade=%s",
        deal.strategy.value, score.score, score.grade.value,
    )

    return AnalysisResult(
        total_investment=deal.total_investment,
        down_payment=deal.down_payment,
        cash_flow=core.cash_flow,
        returns=core.returns,
        loan=core.loan,
        taxes=core.taxes,
        break_even=break_even,
        scenarios=scenarios,
        score=score,
        strategy=outcome,
        goals=goals,
    )
