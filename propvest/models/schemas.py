"""Pydantic schemas that turn raw deal entry into an InvestmentInput.

This is the only place the zero-default rule lives: missing, None and blank
numeric fields become 0 and negative amounts are clamped to 0. Non-numeric
text is rejected with a ValidationError.
"""

import logging
from dataclasses import asdict
from decimal import Decimal
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from propvest.models.deal import FlipTerms, InvestmentInput, InvestmentStrategy, OffPlanTerms

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class _AmountsSchema(BaseModel):
    """Base for schemas whose Decimal fields follow the zero-default rule."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if cls.model_fields[info.field_name].annotation is Decimal and _is_blank(value):
            return ZERO
        return value

    @field_validator("*")
    @classmethod
    def clamp_negative(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, Decimal) and value < 0:
            logger.warning("Negative %s (%s) clamped to 0", info.field_name, value)
            return ZERO
        return value


class FlipTermsSchema(_AmountsSchema):
    sale_price: Decimal = ZERO
    buy_costs_pct: Decimal = ZERO
    sell_costs_pct: Decimal = ZERO
    holding_months: Decimal = ZERO


class OffPlanTermsSchema(_AmountsSchema):
    deposit: Decimal = ZERO
    installments: Decimal = ZERO
    final_contract_price: Decimal = ZERO
    expected_completion_value: Decimal = ZERO


class DealInputSchema(_AmountsSchema):
    property_price: Decimal = ZERO
    assessed_value: Decimal = ZERO
    buy_taxes_imt: Decimal = ZERO
    buy_taxes_is: Decimal = ZERO
    legal_fees: Decimal = ZERO
    renovation_budget: Decimal = ZERO
    emergency_fund: Decimal = ZERO

    loan_amount: Decimal = ZERO
    interest_rate: Decimal = ZERO
    loan_term_years: Decimal = ZERO
    own_capital: Decimal = ZERO

    monthly_rent: Decimal = ZERO
    vacancy_rate: Decimal = ZERO

    property_tax: Decimal = ZERO
    insurance: Decimal = ZERO
    maintenance: Decimal = ZERO
    management: Decimal = ZERO

    strategy: InvestmentStrategy = InvestmentStrategy.BUY_TO_RENT

    target_annual_return: Decimal = ZERO
    holding_period_years: Decimal = ZERO

    flip: FlipTermsSchema = Field(default_factory=FlipTermsSchema)
    off_plan: OffPlanTermsSchema = Field(default_factory=OffPlanTermsSchema)

    @field_validator("strategy", mode="before")
    @classmethod
    def parse_strategy(cls, value: Any) -> InvestmentStrategy:
        if isinstance(value, InvestmentStrategy):
            return value
        if _is_blank(value):
            return InvestmentStrategy.BUY_TO_RENT
        key = str(value).strip().lower().replace("_", "-").replace(" ", "-")
        try:
            return InvestmentStrategy(key)
        except ValueError:
            logger.warning("Unknown strategy %r, using buy-to-rent", value)
            return InvestmentStrategy.BUY_TO_RENT

    @field_validator("flip", "off_plan", mode="before")
    @classmethod
    def missing_terms(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_input(self) -> InvestmentInput:
        fields = self.model_dump(exclude={"flip", "off_plan"})
        return InvestmentInput(
            **fields,
            flip=FlipTerms(**self.flip.model_dump()),
            off_plan=OffPlanTerms(**self.off_plan.model_dump()),
        )


def normalize_input(raw: InvestmentInput | DealInputSchema | Mapping[str, Any]) -> InvestmentInput:
    """Apply the zero-default rule to any supported deal representation."""
    if isinstance(raw, DealInputSchema):
        return raw.to_input()
    if isinstance(raw, InvestmentInput):
        raw = asdict(raw)
    return DealInputSchema.model_validate(dict(raw)).to_input()
