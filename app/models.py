from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


# ── Input records ────────────────────────────────────────────────────────────

class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    sku: str
    # strict: strings and bools are rejected, a gap is left to the revenue calculator
    purchase_price: Optional[Union[StrictInt, StrictFloat]] = None
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[float] = None


class LineItem(BaseModel):
    sku: str
    sale_price: Optional[Union[StrictInt, StrictFloat]] = None
    discount: Optional[Union[StrictInt, StrictFloat]] = None  # percent, 0-100
    quantity: Optional[Union[StrictInt, StrictFloat]] = None


class Receipt(BaseModel):
    seller_id: str
    items: list[LineItem] = Field(default_factory=list)
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    total_amount: Optional[float] = None
    total_discount: Optional[float] = None


class SalesData(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[Receipt]


# ── Derived ──────────────────────────────────────────────────────────────────

class SellerStat(BaseModel):
    """Running totals for one seller while receipts are processed."""

    seller_id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    # sku -> quantity sold, in first-seen order
    products: dict[str, Union[int, float]] = Field(default_factory=dict)


class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: Union[int, float]


class SellerReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: list[TopProduct]
    bonus: float
