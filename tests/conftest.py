from __future__ import annotations

from typing import Any

import pytest

from sales_analysis.schemas import SellerAccumulator


def make_item(sku: str, quantity: int, sale_price: float, discount: float = 0) -> dict[str, Any]:
    return {"sku": sku, "quantity": quantity, "sale_price": sale_price, "discount": discount}


def make_accumulator(seller_id: str, profit: float, **fields: Any) -> SellerAccumulator:
    return SellerAccumulator(seller_id=seller_id, name=f"Seller {seller_id}", profit=profit, **fields)


@pytest.fixture
def sales_data() -> dict[str, Any]:
    """
    Three sellers, three products.
    seller_1: two receipts, profit 80 + 30 = 110
    seller_2: one receipt, profit 20
    seller_3: no purchases at all
    """
    return {
        "sellers": [
            {"id": "seller_1", "first_name": "Ada", "last_name": "Lovelace"},
            {"id": "seller_2", "first_name": "Alan", "last_name": "Turing"},
            {"id": "seller_3", "first_name": "Grace", "last_name": "Hopper"},
        ],
        "products": [
            {"sku": "SKU_001", "purchase_price": 50},
            {"sku": "SKU_002", "purchase_price": 10},
            {"sku": "SKU_003", "purchase_price": 5},
        ],
        "purchase_records": [
            {
                "receipt_id": "rcpt_1",
                "seller_id": "seller_1",
                "items": [make_item("SKU_001", 2, 100, 10)],
            },
            {
                "receipt_id": "rcpt_2",
                "seller_id": "seller_2",
                "items": [make_item("SKU_002", 1, 20), make_item("SKU_003", 2, 10)],
            },
            {
                "receipt_id": "rcpt_3",
                "seller_id": "seller_1",
                "items": [make_item("SKU_003", 3, 15)],
            },
        ],
    }
