import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from propvest.models.deal import InvestmentInput, InvestmentStrategy
from propvest.models.schemas import DealInputSchema, normalize_input


class TestZeroDefaults:
    def test_missing_fields(self):
        deal = normalize_input({})
        assert deal == InvestmentInput()

    def test_blank_and_none(self):
        deal = normalize_input({"monthly_rent": "", "insurance": None, "maintenance": "   "})
        assert deal.monthly_rent == 0
        assert deal.insurance == 0
        assert deal.maintenance == 0

    def test_numeric_strings(self):
        deal = normalize_input({"property_price": "250000", "interest_rate": "4.5"})
        assert deal.property_price == Decimal("250000")
        assert deal.interest_rate == Decimal("4.5")

    def test_negative_clamped(self, caplog):
        with caplog.at_level(logging.WARNING):
            deal = normalize_input({"monthly_rent": "-850"})
        assert deal.monthly_rent == 0
        assert "monthly_rent" in caplog.text

    def test_nested_terms(self):
        deal = normalize_input({
            "strategy": "fix-and-flip",
            "flip": {"sale_price": "230000", "holding_months": ""},
            "off_plan": None,
        })
        assert deal.flip.sale_price == Decimal("230000")
        assert deal.flip.holding_months == 0
        assert deal.off_plan.deposit == 0

    def test_extra_fields_ignored(self):
        deal = normalize_input({"property_address": "Rua Augusta 1, Lisboa", "monthly_rent": "900"})
        assert deal.monthly_rent == Decimal("900")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError):
            normalize_input({"property_price": "two hundred thousand"})


class TestStrategyParsing:
    @pytest.mark.parametrize("raw,expected", [
        ("buy-to-rent", InvestmentStrategy.BUY_TO_RENT),
        ("Fix_and_Flip", InvestmentStrategy.FIX_AND_FLIP),
        ("off plan", InvestmentStrategy.OFF_PLAN),
        (InvestmentStrategy.MIXED, InvestmentStrategy.MIXED),
        ("", InvestmentStrategy.BUY_TO_RENT),
        (None, InvestmentStrategy.BUY_TO_RENT),
        ("timeshare", InvestmentStrategy.BUY_TO_RENT),
    ])
    def test_parse(self, raw, expected):
        assert normalize_input({"strategy": raw}).strategy == expected


class TestNormalizeInput:
    def test_dataclass_round_trip(self, canonical_deal):
        assert normalize_input(canonical_deal) == canonical_deal

    def test_dataclass_negative_clamped(self):
        deal = normalize_input(InvestmentInput(maintenance=Decimal("-100")))
        assert deal.maintenance == 0

    def test_schema_instance(self):
        schema = DealInputSchema(monthly_rent="700")
        assert normalize_input(schema).monthly_rent == Decimal("700")
