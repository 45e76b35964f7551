"""
Turns ranked accumulators into the final, immutable seller reports.

Money is rounded half away from zero to cents, using the shortest decimal
form of each float (so 2.675 becomes 2.68, not the 2.67 that binary
rounding would give).
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING, Any, Iterable, Mapping

import pandas as pd

from .schemas import SellerReport, TopProduct

if TYPE_CHECKING:
    from .ranker import RankedSeller

CENTS = Decimal("0.01")


def round_money(value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        return value

    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        rounded = float(exact.quantize(CENTS, rounding=ROUND_HALF_UP))
    # normalise -0.0
    return rounded + 0.0


def select_top_products(products_sold: Mapping[Any, float], limit: int) -> tuple[TopProduct, ...]:
    """Highest quantities first; equal quantities keep the order the skus were first sold."""
    ordered = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return tuple(TopProduct(sku=sku, quantity=quantity) for sku, quantity in ordered[:limit])


def format_reports(ranked: Iterable["RankedSeller"], top_products_limit: int) -> list[SellerReport]:
    return [
        SellerReport(
            seller_id=entry.seller.seller_id,
            name=entry.seller.name,
            revenue=round_money(entry.seller.revenue),
            profit=round_money(entry.seller.profit),
            sales_count=entry.seller.sales_count,
            top_products=select_top_products(entry.seller.products_sold, top_products_limit),
            bonus=round_money(entry.bonus),
        )
        for entry in ranked
    ]


def reports_to_frame(reports: Iterable[SellerReport]) -> pd.DataFrame:
    """Flat, one-row-per-seller view of the reports for CSV export and console output."""
    rows = []
    for report in reports:
        row = report.model_dump(exclude={"top_products"})
        row["top_products"] = "; ".join(
            f"{product.sku} x{product.quantity}" for product in report.top_products
        )
        rows.append(row)

    columns = list(SellerReport.model_fields.keys())
    return pd.DataFrame(rows, columns=columns)
