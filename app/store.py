from typing import Optional
from app.models import Product, Receipt, SalesData, Seller


class DataStore:
    def __init__(self) -> None:
        self.sellers: dict[str, Seller] = {}
        self.products: dict[str, Product] = {}
        self.receipts: list[Receipt] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def add_seller(self, seller: Seller) -> None:
        self.sellers[seller.id] = seller

    def add_product(self, product: Product) -> None:
        self.products[product.sku] = product

    def add_receipt(self, receipt: Receipt) -> None:
        self.receipts.append(receipt)

    def clear(self) -> None:
        self.sellers.clear()
        self.products.clear()
        self.receipts.clear()

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_seller(self, seller_id: str) -> Optional[Seller]:
        return self.sellers.get(seller_id)

    def get_product(self, sku: str) -> Optional[Product]:
        return self.products.get(sku)

    def list_sellers(self) -> list[Seller]:
        return list(self.sellers.values())

    def list_products(self) -> list[Product]:
        return list(self.products.values())

    def list_receipts(self) -> list[Receipt]:
        return list(self.receipts)

    def as_sales_data(self) -> SalesData:
        return SalesData(
            sellers=self.list_sellers(),
            products=self.list_products(),
            purchase_records=self.list_receipts(),
        )


# module-level singleton used by the app
store = DataStore()
