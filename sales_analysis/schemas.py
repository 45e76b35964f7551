from pydantic import BaseModel, ConfigDict, Field


class SellerAccumulator(BaseModel):
    """
    Running totals for one seller while purchase records are being processed.
    Revenue and profit are kept unrounded; rounding happens in the report.
    """

    seller_id: str | int
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = Field(default=0, ge=0)
    # sku -> cumulative quantity, in the order each sku was first recorded
    products_sold: dict[str | int, int | float] = Field(default_factory=dict)


class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str | int
    quantity: int | float


class SellerReport(BaseModel):
    """
    Defines the data contract for a single seller in the final report.
    Instances are frozen: once the report is built it never changes.
    """

    model_config = ConfigDict(frozen=True)

    seller_id: str | int
    name: str
    revenue: float
    profit: float
    sales_count: int = Field(ge=0)
    top_products: tuple[TopProduct, ...] = ()
    bonus: float
