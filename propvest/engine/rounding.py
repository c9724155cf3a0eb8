"""Decimal rounding shared by the engine modules."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def quantize(value: Decimal, places: Decimal = TWO_PLACES) -> Decimal:
    """Round half-up to `places`.

    A value with too many digits to carry `places` at the context precision
    is returned unrounded.
    """
    try:
        return value.quantize(places, ROUND_HALF_UP)
    except InvalidOperation:
        return value
