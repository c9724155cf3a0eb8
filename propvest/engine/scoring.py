"""Rule-based investment scoring.

Scoring dimensions (0-100 total):
  Cash-on-cash return: 0-40
  Cap rate:            0-20
  One-percent rule:    0-20
  Break-even cushion:  0-20

Each table is ordered highest threshold first; the first threshold the
metric reaches decides that bucket's points.
"""

from decimal import Decimal

from propvest.models.results import BreakEvenResult, Grade, InvestmentScore, ReturnMetrics

PointsTable = tuple[tuple[Decimal, int], ...]

COC_POINTS: PointsTable = (
    (Decimal("15"), 40),
    (Decimal("10"), 30),
    (Decimal("6"), 20),
    (Decimal("3"), 10),
)

CAP_RATE_POINTS: PointsTable = (
    (Decimal("8"), 20),
    (Decimal("6"), 15),
    (Decimal("4"), 10),
    (Decimal("2"), 5),
)

ONE_PERCENT_POINTS: PointsTable = (
    (Decimal("1"), 20),
    (Decimal("0.8"), 15),
    (Decimal("0.6"), 10),
    (Decimal("0.4"), 5),
)

CUSHION_POINTS: PointsTable = (
    (Decimal("30"), 20),
    (Decimal("20"), 15),
    (Decimal("10"), 10),
    (Decimal("0"), 5),
)

GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (80, Grade.A),
    (60, Grade.B),
    (40, Grade.C),
)

RECOMMENDATIONS: dict[Grade, str] = {
    Grade.A: "Excellent investment opportunity. Strong fundamentals across all metrics.",
    Grade.B: "Good investment with solid returns. Review the weaker metrics before proceeding.",
    Grade.C: "Marginal investment. Requires careful analysis and possibly better terms.",
    Grade.D: "Poor investment fundamentals. Consider passing or renegotiating significantly.",
}


def bucket_points(value: Decimal, table: PointsTable) -> int:
    for threshold, points in table:
        if value >= threshold:
            return points
    return 0


def grade_for(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.D


def recommendation_for(grade: Grade) -> str:
    return RECOMMENDATIONS[grade]


def score_investment(returns: ReturnMetrics, break_even: BreakEvenResult) -> InvestmentScore:
    """Sum the bucket points. Thresholds are compared as given, so pass
    unrounded metrics to avoid rounding a value across a boundary."""
    score = (
        bucket_points(returns.cash_on_cash_return, COC_POINTS)
        + bucket_points(returns.cap_rate, CAP_RATE_POINTS)
        + bucket_points(returns.one_percent_rule, ONE_PERCENT_POINTS)
        + bucket_points(break_even.cushion_percentage, CUSHION_POINTS)
    )
    grade = grade_for(score)
    return InvestmentScore(score=score, grade=grade, recommendation=recommendation_for(grade))
