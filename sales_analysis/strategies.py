"""
Pluggable pricing and bonus rules.

A revenue strategy prices one line item; a bonus strategy turns a seller's
rank into a bonus amount. Callers can swap either one through
`AnalysisOptions` as long as the replacement keeps the same call signature.
"""

import math
from numbers import Real
from typing import Any, Callable, Mapping

from . import settings
from .errors import InvalidLineItem
from .schemas import SellerAccumulator

RevenueStrategy = Callable[[Mapping[str, Any], Mapping[str, Any]], float]
BonusStrategy = Callable[[int, int, SellerAccumulator], float]

REVENUE_FIELDS = ("sale_price", "quantity", "discount")


def numeric_field(item: Mapping[str, Any], field: str) -> float:
    """Returns item[field] if it is a real number, raising InvalidLineItem otherwise."""
    sku = item.get("sku") if isinstance(item, Mapping) else None
    if not isinstance(item, Mapping) or field not in item:
        raise InvalidLineItem(f"Line item {sku!r} is missing '{field}'", sku=sku)

    value = item[field]
    # bool is a subclass of int, but True is not a price.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidLineItem(
            f"Line item {sku!r} has a non-numeric '{field}': {value!r}", sku=sku
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidLineItem(
            f"Line item {sku!r} has a non-finite '{field}': {value!r}", sku=sku
        )
    return value


def calculate_simple_revenue(item: Mapping[str, Any], _product: Mapping[str, Any]) -> float:
    """
    Revenue of one line item: sale_price * quantity, minus the discount percentage.
    Discounts outside 0-100 are not clamped.
    """
    sale_price, quantity, discount = (numeric_field(item, f) for f in REVENUE_FIELDS)
    return sale_price * quantity * (1 - discount / 100)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> float:
    """
    Bonus by position in the profit ranking (index 0 = highest profit).
    The checks run top-down, so with few sellers the podium tiers win over
    the last-place rule.
    """
    if index == 0:
        return seller.profit * settings.BONUS_RATE_FIRST
    elif index == 1 or index == 2:
        return seller.profit * settings.BONUS_RATE_PODIUM
    elif index == total - 1:
        return 0.0
    else:
        return seller.profit * settings.BONUS_RATE_DEFAULT
