from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from app.bonus import calculate_bonus_by_profit
from app.errors import InvalidOptionError
from app.models import LineItem, Product
from app.revenue import calculate_simple_revenue

DEFAULT_TOP_PRODUCTS_LIMIT = 10


class RevenueStrategy(Protocol):
    def __call__(self, item: LineItem, product: Product) -> float: ...


class BonusStrategy(Protocol):
    def __call__(self, rank_index: int, total_sellers: int, profit: float) -> float: ...


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenueStrategy = calculate_simple_revenue
    calculate_bonus: BonusStrategy = calculate_bonus_by_profit
    top_products_limit: int = DEFAULT_TOP_PRODUCTS_LIMIT


def resolve_options(options=None) -> AnalysisOptions:
    """Normalise ``None``, a mapping or an ``AnalysisOptions`` into options.

    A missing or ``None`` override falls back to the built-in calculator.
    """
    if options is None:
        return AnalysisOptions()

    if isinstance(options, AnalysisOptions):
        values = {
            "calculate_revenue": options.calculate_revenue,
            "calculate_bonus": options.calculate_bonus,
            "top_products_limit": options.top_products_limit,
        }
    elif isinstance(options, Mapping):
        values = dict(options)
    else:
        raise InvalidOptionError("options", "must be a mapping or AnalysisOptions")

    revenue = values.get("calculate_revenue")
    bonus = values.get("calculate_bonus")
    if revenue is not None and not callable(revenue):
        raise InvalidOptionError("calculate_revenue")
    if bonus is not None and not callable(bonus):
        raise InvalidOptionError("calculate_bonus")

    limit = values.get("top_products_limit")
    if limit is None:
        limit = DEFAULT_TOP_PRODUCTS_LIMIT
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidOptionError("top_products_limit", "must be a non-negative integer")

    return AnalysisOptions(
        calculate_revenue=revenue or calculate_simple_revenue,
        calculate_bonus=bonus or calculate_bonus_by_profit,
        top_products_limit=limit,
    )
