"""Monetary helpers

All amounts are Decimal and rounded half-up to cents.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Union
from pydantic import PlainSerializer

CENTS = Decimal("0.01")


def to_decimal(value: Union[Decimal, int, str, float]) -> Decimal:
    """Convert value to Decimal, going through str for floats"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round2(value: Union[Decimal, int, str, float]) -> Decimal:
    """Round half-up to 2 decimal places"""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value: Union[Decimal, int, str, float]) -> str:
    """Fixed 2-decimal string (e.g., '115.00')"""
    return f"{round2(value):.2f}"


# Decimal that serializes to JSON as a fixed 2-decimal string
Money = Annotated[Decimal, PlainSerializer(format_money, return_type=str, when_used="json")]
