"""
Deterministic demo-data generator.

Produces:
  - 5 sellers
  - 30 products across 4 categories, purchase price 40-70 % of list price
  - 300 receipts spread over Jan 2026, 1-4 line items each
    - discounts of 0 / 5 / 10 / 15 / 20 %
    - ~2 % reference a seller that does not exist
    - ~3 % of items reference a SKU that does not exist
"""

import random
from datetime import date, timedelta

from app.models import LineItem, Product, Receipt, Seller
from app.store import DataStore

SEED = 42
START = date(2026, 1, 1)
DAYS  = 31

_SELLERS = [
    ("seller_1", "Alexey",   "Petrov",   "Senior Seller"),
    ("seller_2", "Ivan",     "Sidorov",  "Seller"),
    ("seller_3", "Maria",    "Ivanova",  "Seller"),
    ("seller_4", "Olga",     "Kuznetsova", "Junior Seller"),
    ("seller_5", "Dmitry",   "Smirnov",  "Junior Seller"),
]

_CATEGORIES = ["Electronics", "Home", "Garden", "Sports"]


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    for sid, first, last, position in _SELLERS:
        store.add_seller(Seller(
            id=sid,
            first_name=first,
            last_name=last,
            start_date=str(START - timedelta(days=rng.randint(30, 900))),
            position=position,
        ))
    seller_ids = [s[0] for s in _SELLERS]

    # ── products ─────────────────────────────────────────────────────────────
    for n in range(1, 31):
        sale_price = round(rng.uniform(5, 500), 2)
        store.add_product(Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n}",
            category=rng.choice(_CATEGORIES),
            sale_price=sale_price,
            purchase_price=round(sale_price * rng.uniform(0.4, 0.7), 2),
        ))
    catalog = store.list_products()

    # ── receipts ─────────────────────────────────────────────────────────────
    for n in range(1, 301):
        seller_id = "seller_99" if rng.random() < 0.02 else rng.choice(seller_ids)

        items: list[LineItem] = []
        for _ in range(rng.randint(1, 4)):
            product = rng.choice(catalog)
            sku = "SKU_999" if rng.random() < 0.03 else product.sku
            items.append(LineItem(
                sku=sku,
                sale_price=product.sale_price,
                discount=rng.choice([0, 0, 5, 10, 15, 20]),
                quantity=rng.randint(1, 5),
            ))

        total_amount = sum(i.sale_price * i.quantity for i in items)
        total_discount = sum(i.sale_price * i.quantity * i.discount / 100 for i in items)
        store.add_receipt(Receipt(
            receipt_id=f"receipt_{n:04d}",
            date=str(START + timedelta(days=rng.randint(0, DAYS - 1))),
            seller_id=seller_id,
            customer_id=f"customer_{rng.randint(1, 120):03d}",
            items=items,
            total_amount=round(total_amount, 2),
            total_discount=round(total_discount, 2),
        ))
