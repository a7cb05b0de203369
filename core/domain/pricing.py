"""
Price helpers shared by the dashboard and the storefront.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]

_CENTS = Decimal("0.01")


def _discountable(original: Optional[Number], selling: Optional[Number]) -> bool:
    if not original or original <= 0:
        return False
    if selling is None or selling <= 0:
        return False
    return selling < original


def calculate_discount_percentage(original: Optional[Number], selling: Optional[Number]) -> float:
    """
    Percentage off the original price, rounded to two decimals.

    Args:
        original: Original (list) price
        selling: Current selling price

    Returns:
        0 when there is no real discount, otherwise the percentage
    """
    if not _discountable(original, selling):
        return 0
    original = Decimal(str(original))
    selling = Decimal(str(selling))
    percentage = (original - selling) / original * 100
    return float(percentage.quantize(_CENTS, rounding=ROUND_HALF_UP))


def calculate_savings_amount(original: Optional[Number], selling: Optional[Number]) -> float:
    """
    Amount saved against the original price.

    Args:
        original: Original (list) price
        selling: Current selling price

    Returns:
        0 when there is no real discount, otherwise original minus selling
    """
    if not _discountable(original, selling):
        return 0
    return float(Decimal(str(original)) - Decimal(str(selling)))
