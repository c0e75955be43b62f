import logging
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

from pydantic import ValidationError as PydanticValidationError

from app.errors import NonNumericFieldError, ValidationError
from app.models import (
    LineItem,
    Product,
    Receipt,
    SalesData,
    Seller,
    SellerReport,
    SellerStat,
    TopProduct,
)
from app.revenue import calculate_profit
from app.strategies import AnalysisOptions, RevenueStrategy, resolve_options

logger = logging.getLogger(__name__)

_COLLECTIONS = ("sellers", "products", "purchase_records")
_NUMERIC_FIELDS = {"sale_price", "discount", "quantity", "purchase_price"}
_TWO_DP = Decimal("0.01")


def _check_collection(name: str, value) -> None:
    if value is None:
        raise ValidationError("missing_collection", f"'{name}' is required")
    if not isinstance(value, (list, tuple)):
        raise ValidationError("invalid_collection", f"'{name}' must be a list")
    if len(value) == 0:
        raise ValidationError("empty_collection", f"'{name}' must not be empty")


def _load_dataset(data) -> SalesData:
    if isinstance(data, SalesData):
        for name in _COLLECTIONS:
            _check_collection(name, getattr(data, name))
        return data

    if not isinstance(data, Mapping):
        raise ValidationError("invalid_data", "Sales data must be a mapping or SalesData")

    for name in _COLLECTIONS:
        _check_collection(name, data.get(name))

    try:
        return SalesData.model_validate(dict(data))
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        # union members append their own tag to the location, so search backwards
        field = next((p for p in reversed(error["loc"]) if p in _NUMERIC_FIELDS), None)
        if field is not None:
            raise NonNumericFieldError(field, error.get("input")) from exc
        location = ".".join(str(p) for p in error["loc"])
        raise ValidationError("malformed_record", f"{location}: {error['msg']}") from exc


# ── Indices ──────────────────────────────────────────────────────────────────

def build_product_index(products: Iterable[Product]) -> dict[str, Product]:
    # later duplicates overwrite earlier ones
    return {p.sku: p for p in products}


def build_seller_index(sellers: Iterable[Seller]) -> dict[str, Seller]:
    return {s.id: s for s in sellers}


# ── Aggregation ──────────────────────────────────────────────────────────────

def _accumulate(
    receipts: Iterable[Receipt],
    seller_index: Mapping[str, Seller],
    product_index: Mapping[str, Product],
    calculate_revenue: RevenueStrategy,
) -> dict[str, SellerStat]:
    stats: dict[str, SellerStat] = {}

    for receipt in receipts:
        seller = seller_index.get(receipt.seller_id)
        if seller is None:
            logger.debug("Skipping receipt %s: unknown seller %r",
                         receipt.receipt_id, receipt.seller_id)
            continue

        stat = stats.get(seller.id)
        if stat is None:
            stat = stats[seller.id] = SellerStat(seller_id=seller.id, name=seller.name)

        for item in receipt.items:
            product = product_index.get(item.sku)
            if product is None:
                logger.debug("Skipping item in receipt %s: unknown sku %r",
                             receipt.receipt_id, item.sku)
                continue
            _apply_item(stat, item, product, calculate_revenue)

    return stats


def _apply_item(
    stat: SellerStat,
    item: LineItem,
    product: Product,
    calculate_revenue: RevenueStrategy,
) -> None:
    # compute both values before touching the accumulator
    revenue = calculate_revenue(item, product)
    profit = calculate_profit(revenue, item, product)

    stat.revenue += revenue
    stat.profit += profit
    stat.sales_count += 1
    stat.products[item.sku] = stat.products.get(item.sku, 0) + item.quantity


def rank_sellers(stats: Iterable[SellerStat]) -> list[SellerStat]:
    """Profit descending; sorted() is stable, so ties keep first-seen order."""
    return sorted(stats, key=lambda s: s.profit, reverse=True)


def top_products(tally: Mapping[str, float], limit: int) -> list[TopProduct]:
    ordered = sorted(tally.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ordered[:limit]]


def round_amount(value: float) -> float:
    """Round to 2 dp, halves away from zero, on the exact binary value.

    Same result as formatting with two fixed decimals: 10.125 gives 10.13,
    while 1.005 (stored as 1.00499...) gives 1.0.
    """
    return float(Decimal(value).quantize(_TWO_DP, rounding=ROUND_HALF_UP))


# ── Entry point ──────────────────────────────────────────────────────────────

def analyze_sales_data(data, options=None) -> list[SellerReport]:
    if data is None:
        raise ValidationError("missing_data", "Sales data was not provided")

    opts: AnalysisOptions = resolve_options(options)
    dataset = _load_dataset(data)

    product_index = build_product_index(dataset.products)
    seller_index = build_seller_index(dataset.sellers)

    stats = _accumulate(
        dataset.purchase_records, seller_index, product_index, opts.calculate_revenue
    )
    ranked = rank_sellers(stats.values())
    total = len(ranked)

    reports = []
    for index, stat in enumerate(ranked):
        bonus = opts.calculate_bonus(index, total, stat.profit)
        reports.append(
            SellerReport(
                seller_id=stat.seller_id,
                name=stat.name,
                revenue=round_amount(stat.revenue),
                profit=round_amount(stat.profit),
                sales_count=stat.sales_count,
                top_products=top_products(stat.products, opts.top_products_limit),
                bonus=round_amount(bonus),
            )
        )

    logger.info(
        "Analyzed %d receipts: %d of %d sellers ranked",
        len(dataset.purchase_records), total, len(seller_index),
    )
    return reports
