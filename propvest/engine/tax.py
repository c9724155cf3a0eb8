"""Rental income tax approximation.

This is a deliberately coarse estimate, not a tax-law engine:

- Interest is proxied as a fixed share of annual debt service instead of
  being read off the amortization schedule.
- Depreciation is proxied as a fixed share of the purchase price.
- A single flat rate applies to taxable rental income.

All three factors live in TaxAssumptions and default to the values in
propvest.config.settings. The actual first-year interest from the
amortization is reported alongside for comparison but does not enter the
deduction.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from propvest.config import settings
from propvest.engine.cashflow import net_annual_rent, noi, total_operating_expenses
from propvest.engine.debt import first_year_interest
from propvest.engine.rounding import quantize
from propvest.models.deal import InvestmentInput
from propvest.models.results import TaxEstimate

ZERO = Decimal("0")


@dataclass(frozen=True)
class TaxAssumptions:
    rate: Decimal = Decimal("0.28")
    interest_share: Decimal = Decimal("0.80")  # Of annual debt service
    depreciation_rate: Decimal = Decimal("0.02")  # Of purchase price

    @classmethod
    def from_settings(cls) -> "TaxAssumptions":
        return cls(
            rate=settings.rental_tax_rate,
            interest_share=settings.interest_share_of_debt_service,
            depreciation_rate=settings.depreciation_rate,
        )


def deductible_expenses(
    deal: InvestmentInput,
    annual_loan_payment: Decimal,
    assumptions: TaxAssumptions,
) -> Decimal:
    """Operating expenses + interest proxy + depreciation proxy."""
    interest = annual_loan_payment * assumptions.interest_share
    depreciation = deal.property_price * assumptions.depreciation_rate
    return quantize(total_operating_expenses(deal) + interest + depreciation)


def estimate_tax(
    deal: InvestmentInput,
    annual_loan_payment: Decimal,
    assumptions: TaxAssumptions | None = None,
) -> TaxEstimate:
    assumptions = assumptions or TaxAssumptions.from_settings()

    deductible = deductible_expenses(deal, annual_loan_payment, assumptions)
    taxable = max(ZERO, net_annual_rent(deal) - deductible)
    liability = quantize(taxable * assumptions.rate)
    savings = quantize(deductible * assumptions.rate)

    return TaxEstimate(
        deductible_expenses=deductible,
        taxable_income=taxable,
        tax_liability=liability,
        tax_savings=savings,
        effective_income=noi(deal) - liability,
        first_year_interest=first_year_interest(
            deal.loan_amount, deal.interest_rate, deal.loan_term_years
        ),
    )
