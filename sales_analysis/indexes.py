import logging
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .errors import MalformedInput

logger = logging.getLogger(__name__)


def _check_entry(entry: Any, dataset: str, key: str, position: int) -> None:
    if not isinstance(entry, Mapping):
        raise MalformedInput(
            f"'{dataset}' entry #{position} is not a record: {entry!r}",
            dataset=dataset,
        )
    if key not in entry:
        raise MalformedInput(
            f"'{dataset}' entry #{position} has no '{key}' field",
            dataset=dataset,
        )
    # keys end up in the report, which only holds string or integer ids
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedInput(
            f"'{dataset}' entry #{position} has an invalid '{key}': {value!r}",
            dataset=dataset,
            seller_id=value if dataset == "sellers" else None,
            sku=value if dataset == "products" else None,
        )


def build_seller_index(sellers: Sequence[Mapping[str, Any]]) -> Mapping[Any, Mapping[str, Any]]:
    """
    Maps seller id -> seller record, keeping the input order.
    Seller ids must be unique since every seller gets exactly one row in the report.
    """
    index: dict[Any, Mapping[str, Any]] = {}
    for position, seller in enumerate(sellers):
        _check_entry(seller, "sellers", "id", position)
        seller_id = seller["id"]
        if seller_id in index:
            raise MalformedInput(
                f"Seller id {seller_id!r} appears more than once in 'sellers'",
                dataset="sellers",
                seller_id=seller_id,
            )
        index[seller_id] = seller

    logger.info(f"  > Indexed {len(index)} sellers.")
    return MappingProxyType(index)


def build_product_index(products: Sequence[Mapping[str, Any]]) -> Mapping[Any, Mapping[str, Any]]:
    """Maps sku -> product record. A repeated sku keeps the last product seen."""
    index: dict[Any, Mapping[str, Any]] = {}
    for position, product in enumerate(products):
        _check_entry(product, "products", "sku", position)
        index[product["sku"]] = product

    if len(index) < len(products):
        logger.warning(
            f"  > ⚠️  {len(products) - len(index)} duplicated sku(s) in 'products'; last one wins."
        )
    logger.info(f"  > Indexed {len(index)} products.")
    return MappingProxyType(index)
