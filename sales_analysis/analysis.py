import logging
from typing import Any, Mapping, Optional, Sequence

from .aggregator import aggregate_purchases, create_accumulators
from .errors import MalformedInput
from .formatter import format_reports
from .indexes import build_product_index, build_seller_index
from .options import AnalysisOptions, resolve_options
from .ranker import rank_sellers
from .schemas import SellerReport

logger = logging.getLogger(__name__)

REQUIRED_DATASETS = ("sellers", "products", "purchase_records")


def _require_dataset(data: Mapping[str, Any], name: str) -> Sequence[Any]:
    dataset = data.get(name)
    if dataset is None:
        raise MalformedInput(f"Dataset '{name}' is missing", dataset=name)
    if isinstance(dataset, (str, bytes, Mapping)) or not isinstance(dataset, Sequence):
        raise MalformedInput(
            f"Dataset '{name}' must be a list, got {type(dataset).__name__}",
            dataset=name,
        )
    if len(dataset) == 0:
        raise MalformedInput(f"Dataset '{name}' is empty", dataset=name)
    return dataset


def analyze_sales_data(
    data: Mapping[str, Any],
    options: Optional[AnalysisOptions | Mapping[str, Any]] = None,
) -> list[SellerReport]:
    """
    Builds the seller performance report.

    `data` holds three non-empty lists: "sellers", "products" and
    "purchase_records". The result has one SellerReport per seller, ordered by
    profit (highest first). Any problem raises an AnalysisError subclass and
    nothing is returned.
    """
    if not isinstance(data, Mapping):
        raise MalformedInput(
            f"Sales data must be a mapping of datasets, got {type(data).__name__}",
            dataset="data",
        )
    sellers, products, purchase_records = (
        _require_dataset(data, name) for name in REQUIRED_DATASETS
    )
    opts = resolve_options(options)

    logger.info("--- Building Indexes ---")
    seller_index = build_seller_index(sellers)
    product_index = build_product_index(products)

    logger.info("--- Aggregating Purchase Records ---")
    accumulators = create_accumulators(seller_index)
    aggregate_purchases(purchase_records, accumulators, product_index, opts)

    logger.info("--- Ranking Sellers ---")
    ranked = rank_sellers(accumulators.values(), opts.bonus_strategy)

    return format_reports(ranked, opts.top_products_limit)
