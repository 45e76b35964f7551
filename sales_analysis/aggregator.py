import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .errors import InvalidLineItem, MalformedInput, UnresolvedReference
from .formatter import round_money
from .options import AnalysisOptions
from .schemas import SellerAccumulator
from .strategies import numeric_field

logger = logging.getLogger(__name__)


@dataclass
class AggregationStats:
    records_processed: int = 0
    records_skipped: int = 0
    items_skipped: int = 0


def create_accumulators(
    seller_index: Mapping[Any, Mapping[str, Any]],
) -> dict[Any, SellerAccumulator]:
    """One empty accumulator per seller, in seller input order."""
    return {
        seller_id: SellerAccumulator(
            seller_id=seller_id,
            name=f"{seller.get('first_name', '')} {seller.get('last_name', '')}",
        )
        for seller_id, seller in seller_index.items()
    }


def _purchase_price(product: Mapping[str, Any], sku: Any) -> float:
    try:
        return numeric_field(product, "purchase_price")
    except InvalidLineItem as e:
        raise InvalidLineItem(
            f"Product {sku!r} has no usable 'purchase_price'", sku=sku
        ) from e


def _add_line_item(
    seller: SellerAccumulator,
    item: Mapping[str, Any],
    product: Mapping[str, Any],
    options: AnalysisOptions,
) -> None:
    sku = item["sku"]
    quantity = numeric_field(item, "quantity")

    revenue = options.revenue_strategy(item, product)
    cost = _purchase_price(product, sku) * quantity
    profit = revenue - cost

    if options.round_intermediate:
        revenue, cost = round_money(revenue), round_money(cost)
        profit = round_money(revenue - cost)

    seller.revenue += revenue
    seller.profit += profit
    seller.products_sold[sku] = seller.products_sold.get(sku, 0) + quantity


def aggregate_purchases(
    purchase_records: Sequence[Mapping[str, Any]],
    accumulators: Mapping[Any, SellerAccumulator],
    product_index: Mapping[Any, Mapping[str, Any]],
    options: AnalysisOptions,
) -> AggregationStats:
    """
    Walks every purchase record once and adds it to its seller's accumulator.

    Each record counts as one sale, whatever the number of line items.
    References to unknown sellers or skus are skipped or raised depending on
    options.unresolved_policy; the same policy applies to the whole run.
    """
    fail_fast = options.unresolved_policy == "raise"
    stats = AggregationStats()

    for position, record in enumerate(purchase_records):
        if not isinstance(record, Mapping):
            raise MalformedInput(
                f"'purchase_records' entry #{position} is not a record: {record!r}",
                dataset="purchase_records",
            )
        items = record.get("items")
        if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Sequence):
            raise MalformedInput(
                f"'purchase_records' entry #{position} has no list of items",
                dataset="purchase_records",
            )

        seller_id = record.get("seller_id")
        seller = accumulators.get(seller_id)
        if seller is None:
            if fail_fast:
                raise UnresolvedReference(
                    f"Purchase record #{position} references unknown seller {seller_id!r}",
                    dataset="purchase_records",
                    seller_id=seller_id,
                )
            stats.records_skipped += 1
            continue

        seller.sales_count += 1
        stats.records_processed += 1

        for item in items:
            if not isinstance(item, Mapping) or "sku" not in item:
                raise InvalidLineItem(
                    f"Purchase record #{position} has a line item without a sku: {item!r}",
                    seller_id=seller_id,
                )
            product = product_index.get(item["sku"])
            if product is None:
                if fail_fast:
                    raise UnresolvedReference(
                        f"Line item in record #{position} references unknown sku {item['sku']!r}",
                        dataset="purchase_records",
                        seller_id=seller_id,
                        sku=item["sku"],
                    )
                stats.items_skipped += 1
                continue

            _add_line_item(seller, item, product, options)

    if stats.records_skipped or stats.items_skipped:
        logger.warning(
            f"  > ⚠️  Skipped {stats.records_skipped} record(s) with unknown sellers "
            f"and {stats.items_skipped} line item(s) with unknown skus."
        )
    logger.info(f"  > Aggregated {stats.records_processed} purchase records.")
    return stats
