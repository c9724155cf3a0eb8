"""Portuguese purchase cost estimation.

IMT (property transfer tax), stamp duty (Imposto do Selo) and legal/notary
fees, plus typical gross rental yields by region. Offered to callers for
pre-filling a deal; the analysis never substitutes these for missing inputs.
"""

from dataclasses import dataclass
from decimal import Decimal

from propvest.engine.rounding import quantize

ZERO = Decimal("0")

FIRST_HOME_EXEMPTION = Decimal("92407")

# (upper bound, marginal rate); None = no upper bound
RESIDENTIAL_IMT_BRACKETS: tuple[tuple[Decimal | None, Decimal], ...] = (
    (Decimal("92407"), Decimal("0")),
    (Decimal("126403"), Decimal("0.02")),
    (Decimal("172348"), Decimal("0.05")),
    (Decimal("287213"), Decimal("0.07")),
    (Decimal("574323"), Decimal("0.08")),
    (None, Decimal("0.06")),
)
COMMERCIAL_IMT_RATE = Decimal("0.065")

STAMP_DUTY_RATE = Decimal("0.008")
LEGAL_FEES_RATE = Decimal("0.005")
MIN_LEGAL_FEES = Decimal("1000")


@dataclass(frozen=True)
class YieldRange:
    low: Decimal
    high: Decimal
    average: Decimal


# Gross rental yield, percent
REGIONAL_GROSS_YIELDS: dict[str, YieldRange] = {
    "Lisboa": YieldRange(Decimal("3.5"), Decimal("5.5"), Decimal("4.5")),
    "Porto": YieldRange(Decimal("4.0"), Decimal("6.0"), Decimal("5.0")),
    "Braga": YieldRange(Decimal("4.5"), Decimal("6.5"), Decimal("5.5")),
    "Aveiro": YieldRange(Decimal("4.0"), Decimal("6.0"), Decimal("5.0")),
    "Coimbra": YieldRange(Decimal("4.5"), Decimal("6.5"), Decimal("5.5")),
    "Vila Real": YieldRange(Decimal("5.0"), Decimal("7.0"), Decimal("6.0")),
}
NATIONAL_AVERAGE_YIELD = YieldRange(Decimal("4.0"), Decimal("6.0"), Decimal("5.0"))


@dataclass(frozen=True)
class AcquisitionCostEstimate:
    imt: Decimal
    stamp_duty: Decimal
    legal_fees: Decimal

    @property
    def total(self) -> Decimal:
        return self.imt + self.stamp_duty + self.legal_fees


def calculate_imt(
    property_value: Decimal,
    residential: bool = True,
    first_home: bool = False,
) -> Decimal:
    """Transfer tax, summed bracket by bracket over the property value."""
    if property_value <= 0:
        return ZERO
    if first_home and property_value <= FIRST_HOME_EXEMPTION:
        return ZERO
    if not residential:
        return quantize(property_value * COMMERCIAL_IMT_RATE)

    tax = ZERO
    lower = ZERO
    for upper, rate in RESIDENTIAL_IMT_BRACKETS:
        if property_value <= lower:
            break
        top = property_value if upper is None else min(property_value, upper)
        tax += (top - lower) * rate
        if upper is None:
            break
        lower = upper
    return quantize(tax)


def calculate_stamp_duty(property_value: Decimal) -> Decimal:
    return quantize(max(ZERO, property_value * STAMP_DUTY_RATE))


def estimate_legal_fees(property_value: Decimal) -> Decimal:
    """0.5% of value with a 1,000 floor."""
    return quantize(max(MIN_LEGAL_FEES, property_value * LEGAL_FEES_RATE))


def estimate_acquisition_costs(
    property_value: Decimal,
    residential: bool = True,
    first_home: bool = False,
) -> AcquisitionCostEstimate:
    return AcquisitionCostEstimate(
        imt=calculate_imt(property_value, residential, first_home),
        stamp_duty=calculate_stamp_duty(property_value),
        legal_fees=estimate_legal_fees(property_value),
    )


def typical_yield(region: str) -> YieldRange:
    return REGIONAL_GROSS_YIELDS.get(region, NATIONAL_AVERAGE_YIELD)
